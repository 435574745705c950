"""S3-compatible object storage gateway for the beer image library.

Every object this service lists, creates or deletes lives under a single key
prefix (``IMAGES_PREFIX``, ``beers/`` by default):

    beers/{epoch_millis}-{sanitized_file_name}

Browsers never receive storage credentials. They read through short-lived
signed GET URLs and upload through presigned POST tickets.
"""
from __future__ import annotations

import logging
import re
import time
from functools import lru_cache
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.config import get_settings
from app.errors import InvalidKeyError, MissingFieldError, StorageUnavailableError
from app.models.image import ImageRecord
from app.models.upload import UploadTicket

logger = logging.getLogger(__name__)

_IMAGE_KEY_RE = re.compile(r"\.(jpe?g|png|webp|gif)$", re.IGNORECASE)
_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9._-]")


class StorageService:
    """Wrapper around list/sign/delete/presigned-post on one bucket prefix."""

    _VALID_IMAGE_PREFIX = "image/"

    def __init__(
        self,
        client: Any,
        *,
        bucket: str,
        prefix: str,
        signed_url_ttl: int = 3600,
        min_upload_bytes: int = 1_000,
        max_upload_bytes: int = 10_000_000,
    ) -> None:
        self._client = client
        self._bucket = bucket
        self._prefix = prefix
        self._signed_url_ttl = signed_url_ttl
        self._min_upload_bytes = min_upload_bytes
        self._max_upload_bytes = max_upload_bytes

    @property
    def prefix(self) -> str:
        return self._prefix

    # ------------------------------------------------------------------
    # Public helpers
    # ------------------------------------------------------------------

    def list_images(self) -> list[ImageRecord]:
        """Return every image under the prefix with a fresh signed URL.

        Order follows the provider listing and is not stable across calls.
        """

        try:
            paginator = self._client.get_paginator("list_objects_v2")
            images: list[ImageRecord] = []
            for page in paginator.paginate(Bucket=self._bucket, Prefix=self._prefix):
                for obj in page.get("Contents", []):
                    key = obj.get("Key", "")
                    if not _IMAGE_KEY_RE.search(key):
                        continue
                    images.append(self._to_record(obj))
        except (BotoCoreError, ClientError) as exc:
            logger.exception("Failed to list images under s3://%s/%s: %s", self._bucket, self._prefix, exc)
            raise StorageUnavailableError("Failed to list images") from exc

        logger.debug("Listed %d images under %s", len(images), self._prefix)
        return images

    def delete_image(self, key: str | None) -> None:
        """Delete one object; keys outside the prefix are rejected untouched."""

        if not key or not key.startswith(self._prefix):
            raise InvalidKeyError()

        try:
            self._client.delete_object(Bucket=self._bucket, Key=key)
        except (BotoCoreError, ClientError) as exc:
            logger.exception("Failed to delete s3://%s/%s: %s", self._bucket, key, exc)
            raise StorageUnavailableError("Failed to delete image") from exc
        logger.info("Deleted image %s", key)

    def create_upload_ticket(self, file_name: str | None, *, epoch_ms: int | None = None) -> UploadTicket:
        """Issue a presigned POST for one image upload.

        Parameters
        ----------
        file_name : str | None
            Client-side file name; sanitized into the object key.
        epoch_ms : int | None, optional
            Key timestamp, defaults to the current time in milliseconds.
            Two tickets issued within the same millisecond for the same
            name share a key.
        """

        if not file_name:
            raise MissingFieldError("fileName")

        key = build_object_key(self._prefix, file_name, epoch_ms=epoch_ms)
        conditions: list[Any] = [
            {"bucket": self._bucket},
            ["eq", "$key", key],
            ["starts-with", "$Content-Type", self._VALID_IMAGE_PREFIX],
            ["content-length-range", self._min_upload_bytes, self._max_upload_bytes],
        ]

        try:
            post = self._client.generate_presigned_post(
                Bucket=self._bucket,
                Key=key,
                Conditions=conditions,
                ExpiresIn=self._signed_url_ttl,
            )
        except (BotoCoreError, ClientError) as exc:
            logger.exception("Failed to create presigned upload for %s: %s", key, exc)
            raise StorageUnavailableError("Failed to prepare upload") from exc

        logger.info("Issued upload ticket for %s", key)
        return UploadTicket(url=post["url"], fields=post["fields"], key=key)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _to_record(self, obj: dict[str, Any]) -> ImageRecord:
        key = obj["Key"]
        url = self._client.generate_presigned_url(
            "get_object",
            Params={"Bucket": self._bucket, "Key": key},
            ExpiresIn=self._signed_url_ttl,
        )
        filename = key.replace(self._prefix, "", 1)
        return ImageRecord(
            id=key,
            src=url,
            alt=filename,
            filename=filename,
            uploaded_at=obj.get("LastModified"),
            size=obj.get("Size") or 0,
        )


# ------------------------------------------------------------------
# Helper functions
# ------------------------------------------------------------------


def sanitize_file_name(file_name: str) -> str:
    """Replace every character outside ``[A-Za-z0-9._-]`` with ``_``."""

    return _UNSAFE_CHARS_RE.sub("_", file_name)


def current_epoch_ms() -> int:
    return int(time.time() * 1000)


def build_object_key(prefix: str, file_name: str, *, epoch_ms: int | None = None) -> str:
    if epoch_ms is None:
        epoch_ms = current_epoch_ms()
    return f"{prefix}{epoch_ms}-{sanitize_file_name(file_name)}"


def s3_client() -> Any:
    settings = get_settings()
    # max_attempts counts the first call, so 1 disables retries
    cfg = Config(signature_version="s3v4", retries={"max_attempts": 1, "mode": "standard"})
    return boto3.client(
        "s3",
        endpoint_url=str(settings.aws_endpoint_url),
        region_name=settings.aws_default_region,
        aws_access_key_id=settings.aws_access_key_id,
        aws_secret_access_key=settings.aws_secret_access_key,
        config=cfg,
    )


@lru_cache()
def get_storage_service() -> StorageService:
    settings = get_settings()
    return StorageService(
        s3_client(),
        bucket=settings.aws_s3_bucket_name,
        prefix=settings.images_prefix,
        signed_url_ttl=settings.signed_url_ttl_seconds,
        min_upload_bytes=settings.upload_min_bytes,
        max_upload_bytes=settings.upload_max_bytes,
    )
