"""
Budget Backpack core business logic.

Shared by all Lambda handlers: configuration, errors, auth, models,
provider search and normalization, and the DynamoDB-backed services.
"""

__all__: list[str] = []
