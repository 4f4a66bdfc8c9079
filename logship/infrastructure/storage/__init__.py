"""
Object storage implementations
"""
from .s3_store import S3ObjectStore, S3ObjectStoreFactory

__all__ = [
    "S3ObjectStore",
    "S3ObjectStoreFactory",
]
