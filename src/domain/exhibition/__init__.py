"""Exhibition Domain"""
from .views import ContentItemView, ExhibitionView, VisibilityFlag

__all__ = [
    "ContentItemView",
    "ExhibitionView",
    "VisibilityFlag",
]
