"""
Core interfaces for dependency injection
"""
from abc import ABC, abstractmethod
from typing import Any, Dict
from pathlib import Path


class ObjectStore(ABC):
    """Object storage interface"""

    @abstractmethod
    def upload_file(self, bucket: str, key: str, local_path: Path) -> None:
        """Copy a local file to (bucket, key)"""
        pass

    @abstractmethod
    def exists(self, bucket: str, key: str) -> bool:
        """Check whether (bucket, key) can be read back"""
        pass


class ObjectStoreFactory(ABC):
    """Object store factory interface"""

    @abstractmethod
    def create(self, params: Dict[str, Any]) -> ObjectStore:
        """Create an object store client"""
        pass
