"""User Exhibitions Lambda"""
from .handler import handle_request, lambda_handler

__all__ = [
    "handle_request",
    "lambda_handler",
]
