"""User registration and credential checks against the Users table."""

import logging
from typing import Any

from botocore.exceptions import ClientError

from core.auth.passwords import hash_password, verify_password
from core.errors import AuthenticationError, ConflictError, ErrorCode
from core.models.user import LoginRequest, RegisterRequest, User
from core.services.storage import from_item, is_conditional_failure, storage_errors, to_item

logger = logging.getLogger(__name__)

USERNAME_INDEX = "username-index"


def find_user_by_email(email: str, dynamo_client: Any, users_table: str) -> User | None:
    with storage_errors("get_item"):
        response = dynamo_client.get_item(TableName=users_table, Key={"email": {"S": email.lower()}})
    item = response.get("Item")
    return User.model_validate(from_item(item)) if item else None


def find_user_by_username(username: str, dynamo_client: Any, users_table: str) -> User | None:
    with storage_errors("query"):
        response = dynamo_client.query(
            TableName=users_table,
            IndexName=USERNAME_INDEX,
            KeyConditionExpression="username = :username",
            ExpressionAttributeValues={":username": {"S": username}},
            Limit=1,
        )
    items = response.get("Items", [])
    return User.model_validate(from_item(items[0])) if items else None


def register_user(request: RegisterRequest, dynamo_client: Any, users_table: str) -> User:
    """Create a user; email and username must both be unused."""
    if find_user_by_email(request.email, dynamo_client, users_table):
        logger.info("Registration rejected: email already registered")
        raise ConflictError("User already exists with this email", code=ErrorCode.USER_EXISTS)
    if find_user_by_username(request.username, dynamo_client, users_table):
        logger.info("Registration rejected: username %s taken", request.username)
        raise ConflictError("Username is already taken", code=ErrorCode.USERNAME_TAKEN)

    user = User(username=request.username, email=request.email, password_hash=hash_password(request.password))
    with storage_errors("put_item"):
        try:
            dynamo_client.put_item(
                TableName=users_table,
                Item=to_item(user),
                ConditionExpression="attribute_not_exists(email)",
            )
        except ClientError as e:
            if is_conditional_failure(e):
                raise ConflictError("User already exists with this email", code=ErrorCode.USER_EXISTS) from e
            raise

    logger.info("Registered user %s", user.user_id)
    return user


def authenticate_user(request: LoginRequest, dynamo_client: Any, users_table: str) -> User:
    user = find_user_by_email(request.email, dynamo_client, users_table)
    # Same answer for unknown email and wrong password.
    if user is None or not verify_password(request.password, user.password_hash):
        raise AuthenticationError("Invalid credentials", code=ErrorCode.INVALID_CREDENTIALS)
    return user
