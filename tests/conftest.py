"""Shared test fixtures for Budget Backpack."""

import os
import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Unset AWS_PROFILE for local testing (DynamoDB Local doesn't need it)
if "AWS_PROFILE" in os.environ:
    del os.environ["AWS_PROFILE"]

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture
def api_event():
    """Build an API Gateway proxy event for an authenticated caller."""

    def _make(method="GET", body=None, path_params=None, query=None, user_id="user-123"):
        request_context = {"authorizer": {"userId": user_id}} if user_id else {}
        return {
            "httpMethod": method,
            "path": "/api/test",
            "headers": {"Content-Type": "application/json"},
            "pathParameters": path_params,
            "queryStringParameters": query,
            "body": body,
            "isBase64Encoded": False,
            "requestContext": request_context,
        }

    return _make


# DynamoDB fixtures
@pytest.fixture
def dynamodb_client():
    """Provide a low-level DynamoDB client for integration tests."""
    import boto3
    from core.config import get_config

    config = get_config()

    return boto3.client(
        "dynamodb",
        endpoint_url=config.dynamodb_endpoint,
        region_name=config.aws_region,
        aws_access_key_id="dummy",
        aws_secret_access_key="dummy",
    )


@pytest.fixture
def users_table(dynamodb_client):
    """Provide the Users table name, emptied after the test."""
    from core.config import get_config

    table = get_config().users_table
    yield table

    # Cleanup: scan and delete all items created during test
    response = dynamodb_client.scan(TableName=table, ProjectionExpression="email")
    for item in response.get("Items", []):
        dynamodb_client.delete_item(TableName=table, Key={"email": item["email"]})


@pytest.fixture
def trips_table(dynamodb_client):
    """Provide the Trips table name, emptied after the test."""
    from core.config import get_config

    table = get_config().trips_table
    yield table

    # Cleanup: scan and delete all items created during test
    response = dynamodb_client.scan(TableName=table, ProjectionExpression="tripId")
    for item in response.get("Items", []):
        dynamodb_client.delete_item(TableName=table, Key={"tripId": item["tripId"]})
