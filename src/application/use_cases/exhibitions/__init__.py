"""Exhibition Use Cases"""
from .fetch_exhibitions import ExhibitionFetcher
from .get_user_exhibitions import (
    GetUserExhibitionsInput,
    GetUserExhibitionsOutput,
    GetUserExhibitionsUseCase,
    ValidationError,
)
from .project_exhibition import project, project_content

__all__ = [
    "ExhibitionFetcher",
    "GetUserExhibitionsInput",
    "GetUserExhibitionsOutput",
    "GetUserExhibitionsUseCase",
    "ValidationError",
    "project",
    "project_content",
]
