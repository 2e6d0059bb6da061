from os import environ

import boto3
from pydantic import BaseModel, ConfigDict

_cached_secrets: dict[str, str] = {}


def _resolve_secret(name: str) -> str:
    """Fetch a secret from Secrets Manager at runtime, with caching.

    ``name`` is the plain env var; ``<name>_ARN`` names the deployed secret.
    """
    if name in _cached_secrets:
        return _cached_secrets[name]

    # Local dev: use env var directly
    direct = environ.get(name, "")
    if direct:
        _cached_secrets[name] = direct
        return direct

    # Deployed: fetch from Secrets Manager by ARN
    arn = environ.get(f"{name}_ARN", "")
    if not arn:
        return ""

    client = boto3.client("secretsmanager")
    _cached_secrets[name] = client.get_secret_value(SecretId=arn)["SecretString"]
    return _cached_secrets[name]


class Config(BaseModel):
    model_config = ConfigDict(frozen=True)

    aws_region: str
    dynamodb_endpoint: str | None = None
    users_table: str
    trips_table: str
    jwt_secret: str = ""
    jwt_expires_hours: int = 5
    rapidapi_key: str = ""
    flight_api_host: str
    accommodation_api_host: str
    events_api_host: str
    environment: str


_cached_config: Config | None = None


def _reset_config() -> None:
    """Reset cached config. Tests only."""
    global _cached_config
    _cached_config = None
    _cached_secrets.clear()


def get_config() -> Config:
    global _cached_config
    if _cached_config is not None:
        return _cached_config

    _cached_config = Config(
        aws_region=environ.get("AWS_REGION", "us-east-1"),
        dynamodb_endpoint=environ.get("DYNAMODB_ENDPOINT"),
        users_table=environ.get("USERS_TABLE", "BackpackUsers"),
        trips_table=environ.get("TRIPS_TABLE", "BackpackTrips"),
        jwt_secret=_resolve_secret("JWT_SECRET"),
        jwt_expires_hours=int(environ.get("JWT_EXPIRES_HOURS", "5")),
        rapidapi_key=_resolve_secret("RAPIDAPI_KEY"),
        flight_api_host=environ.get("RAPIDAPI_FLIGHT_API_HOST", "kiwi-com-cheap-flights.p.rapidapi.com"),
        accommodation_api_host=environ.get("RAPIDAPI_ACCOMMODATION_API_HOST", "airbnb19.p.rapidapi.com"),
        events_api_host=environ.get("RAPIDAPI_EVENTS_API_HOST", "google-map-places-new-v2.p.rapidapi.com"),
        environment=environ.get("ENVIRONMENT", "local"),
    )
    return _cached_config
