"""
S3 Tools

Read-only access to the attachments bucket.
"""

from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError
import structlog

from mailer.config import get_settings
from mailer.exceptions import S3Error
from mailer.models import FetchedObject

log = structlog.get_logger()


def _get_client():
    """Get S3 client."""
    settings = get_settings()
    return boto3.client("s3", **settings.s3_config)


class S3ObjectReader:
    """Fetches object bytes and content type from S3."""
    
    def __init__(self, client=None) -> None:
        self._client = client or _get_client()
    
    def get_object(self, bucket: str, key: str) -> FetchedObject:
        """
        Download a single object.
        
        Args:
            bucket: S3 bucket name
            key: S3 object key
            
        Returns:
            FetchedObject with content bytes and content type
            
        Raises:
            S3Error: If the object cannot be read
        """
        log.debug("fetching_s3_object", bucket=bucket, key=key)
        
        try:
            response = self._client.get_object(Bucket=bucket, Key=key)
            content = response["Body"].read()
        except ClientError as e:
            error_code = e.response["Error"]["Code"]
            
            if error_code == "NoSuchKey":
                log.warning("s3_object_not_found", bucket=bucket, key=key)
            else:
                log.error("s3_get_failed", bucket=bucket, key=key, error=str(e))
            
            raise S3Error(
                bucket,
                key,
                error_code=error_code,
                error_message=str(e),
            ) from e
        except BotoCoreError as e:
            log.error("s3_get_failed", bucket=bucket, key=key, error=str(e))
            raise S3Error(bucket, key, error_message=str(e)) from e
        
        log.debug(
            "s3_object_fetched",
            bucket=bucket,
            key=key,
            size_bytes=len(content),
        )
        
        return FetchedObject(
            content=content,
            content_type=response.get("ContentType"),
        )


@lru_cache(maxsize=1)
def get_object_reader() -> S3ObjectReader:
    """Process-wide reader, created on first use and reused across invocations."""
    return S3ObjectReader()
