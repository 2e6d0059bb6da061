"""Unit tests for configuration management."""

import os
from unittest.mock import MagicMock, patch

import pydantic
import pytest

from core.config import _reset_config, get_config


@pytest.fixture(autouse=True)
def _clear_config_cache():
    _reset_config()
    yield
    _reset_config()


def test_get_config_with_dynamodb_endpoint():
    """Test that get_config reads DYNAMODB_ENDPOINT when set."""
    with patch.dict(os.environ, {"DYNAMODB_ENDPOINT": "http://localhost:8000"}):
        config = get_config()
        assert config.dynamodb_endpoint == "http://localhost:8000"


def test_get_config_without_dynamodb_endpoint():
    """Test that get_config returns None when DYNAMODB_ENDPOINT is not set."""
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        assert config.dynamodb_endpoint is None


def test_get_config_defaults():
    """Test that get_config provides sensible defaults."""
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        assert config.aws_region == "us-east-1"
        assert config.users_table == "BackpackUsers"
        assert config.trips_table == "BackpackTrips"
        assert config.jwt_secret == ""
        assert config.jwt_expires_hours == 5
        assert config.flight_api_host == "kiwi-com-cheap-flights.p.rapidapi.com"
        assert config.accommodation_api_host == "airbnb19.p.rapidapi.com"
        assert config.events_api_host == "google-map-places-new-v2.p.rapidapi.com"
        assert config.environment == "local"


def test_jwt_expires_hours_string_coercion():
    with patch.dict(os.environ, {"JWT_EXPIRES_HOURS": "12"}, clear=False):
        config = get_config()
        assert config.jwt_expires_hours == 12


def test_secrets_read_directly_from_env():
    with patch.dict(os.environ, {"JWT_SECRET": "local-secret", "RAPIDAPI_KEY": "rk"}, clear=True):
        config = get_config()
        assert config.jwt_secret == "local-secret"
        assert config.rapidapi_key == "rk"


def test_secret_resolved_from_secrets_manager_by_arn():
    arn = "arn:aws:secretsmanager:us-east-1:123:secret:jwt"
    mock_sm = MagicMock()
    mock_sm.get_secret_value.return_value = {"SecretString": "from-sm"}

    with patch.dict(os.environ, {"JWT_SECRET_ARN": arn}, clear=True), patch(
        "core.config.boto3.client", return_value=mock_sm
    ) as mock_client:
        config = get_config()

    assert config.jwt_secret == "from-sm"
    mock_client.assert_called_once_with("secretsmanager")
    mock_sm.get_secret_value.assert_called_once_with(SecretId=arn)


def test_config_is_cached():
    with patch.dict(os.environ, {}, clear=True):
        assert get_config() is get_config()


def test_config_is_immutable():
    with patch.dict(os.environ, {}, clear=True):
        config = get_config()
        with pytest.raises(pydantic.ValidationError):
            config.aws_region = "eu-west-1"  # type: ignore[misc]
