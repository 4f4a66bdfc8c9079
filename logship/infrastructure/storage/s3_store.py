"""
S3 object store implementation
"""
from pathlib import Path
from typing import Any, Dict, Optional

import boto3
from boto3.exceptions import S3UploadFailedError
from botocore.exceptions import BotoCoreError, ClientError

from ...core.constants import DEFAULT_S3_REGION
from ...core.exceptions import UploadFailure, VerifyFailure
from ...core.interfaces import ObjectStore, ObjectStoreFactory
from ...core.logging import get_logger

logger = get_logger(__name__)

# head_object reports a missing key with any of these codes
_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}


class S3ObjectStore(ObjectStore):
    """
    boto3-backed object store.

    Credentials come from boto3's standard chain (environment, shared
    config, instance role), which is how the job runner binds them.
    """

    def __init__(self, region: str = DEFAULT_S3_REGION, client: Optional[Any] = None):
        """
        Initialize S3 object store.

        Args:
            region: AWS region
            client: Preconfigured S3 client (created from region if None)
        """
        self.region = region
        self.client = client or boto3.client("s3", region_name=region)

    def upload_file(self, bucket: str, key: str, local_path: Path) -> None:
        """
        Copy a local file to s3://bucket/key.

        Raises:
            UploadFailure: On any transfer error
        """
        try:
            self.client.upload_file(str(local_path), bucket, key)
        except (S3UploadFailedError, ClientError, BotoCoreError) as e:
            raise UploadFailure(f"Failed to upload {local_path} to s3://{bucket}/{key}: {e}") from e

    def exists(self, bucket: str, key: str) -> bool:
        """
        Check whether s3://bucket/key exists via head_object.

        Returns:
            True if present, False if S3 reports it missing

        Raises:
            VerifyFailure: If the check itself fails (e.g. access denied)
        """
        try:
            self.client.head_object(Bucket=bucket, Key=key)
        except ClientError as e:
            code = str(e.response.get("Error", {}).get("Code", ""))
            if code in _MISSING_CODES:
                return False
            raise VerifyFailure(f"head_object failed for s3://{bucket}/{key}: {e}") from e
        except BotoCoreError as e:
            raise VerifyFailure(f"head_object failed for s3://{bucket}/{key}: {e}") from e
        return True


class S3ObjectStoreFactory(ObjectStoreFactory):
    """S3ObjectStore factory"""

    def create(self, params: Dict[str, Any]) -> S3ObjectStore:
        """
        Create S3 object store.

        Args:
            params: Parameters dictionary, `region` is used

        Returns:
            S3ObjectStore instance
        """
        region = params.get("region") or DEFAULT_S3_REGION
        logger.debug("Creating S3 client for region %s", region)
        return S3ObjectStore(region=region)
