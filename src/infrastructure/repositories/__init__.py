"""Repository Implementations"""
from .dynamodb_exhibition_store import DynamoDBExhibitionStore, create_dynamodb_client

__all__ = [
    "DynamoDBExhibitionStore",
    "create_dynamodb_client",
]
