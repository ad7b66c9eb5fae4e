"""Application Ports (Interfaces)"""
from .repositories import IExhibitionStore, RawRecord, StoreQueryError

__all__ = [
    "IExhibitionStore",
    "RawRecord",
    "StoreQueryError",
]
