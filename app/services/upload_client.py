"""Async client for managing the image library of a running Beer Tester API.

Performs the same steps as the browser upload manager: check the shared
password, request an upload ticket, POST the file straight to object storage,
list and delete images.
"""
from __future__ import annotations

import logging
import mimetypes
from pathlib import Path
from typing import Any, Optional

import httpx

logger = logging.getLogger(__name__)

UPLOAD_PASSWORD_HEADER = "x-upload-password"
AUTH_CHECK_FILE_NAME = "__auth_check__.png"


class UploadClientError(Exception):
    """Raised when the API or the object store rejects a request."""

    def __init__(self, status: int, message: str, response_json: Optional[dict[str, Any]] = None):
        super().__init__(f"Upload error {status}: {message}")
        self.status = status
        self.response_json = response_json or {}


class ImageUploadClient:
    """Minimal async client for the image management endpoints."""

    def __init__(
        self,
        base_url: str,
        password: str,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._headers = {UPLOAD_PASSWORD_HEADER: password}
        self._client = httpx.AsyncClient(timeout=None, transport=transport)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def check_password(self) -> None:
        """Raise ``UploadClientError`` (401) when the password is wrong.

        Only a 401 counts as a failed login; other errors are left for the
        upload itself to surface.
        """

        try:
            await self._request_ticket(AUTH_CHECK_FILE_NAME)
        except UploadClientError as exc:
            if exc.status == 401:
                raise
            logger.warning("Password check inconclusive: %s", exc)

    async def upload_file(self, path: Path) -> str:
        """Upload one image file and return its storage key."""

        content_type = guess_image_type(path)
        if content_type is None:
            raise UploadClientError(400, f"Not an image file: {path.name}")

        ticket = await self._request_ticket(path.name)
        form = dict(ticket["fields"])
        form["Content-Type"] = content_type

        logger.debug("POST %s (key=%s)", ticket["url"], ticket["key"])
        # httpx writes data fields before files, storage expects the file last
        resp = await self._client.post(
            ticket["url"],
            data=form,
            files={"file": (path.name, path.read_bytes(), content_type)},
        )
        if resp.status_code >= 400:
            raise UploadClientError(resp.status_code, "Upload failed")
        return ticket["key"]

    async def list_images(self) -> list[dict[str, Any]]:
        resp = await self._client.get(f"{self._base_url}/api/images")
        data = self._json_or_raise(resp)
        return data.get("images", [])

    async def delete_image(self, key: str) -> None:
        resp = await self._client.request(
            "DELETE",
            f"{self._base_url}/api/images",
            json={"key": key},
            headers=self._headers,
        )
        self._json_or_raise(resp)

    async def close(self) -> None:
        await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _request_ticket(self, file_name: str) -> dict[str, Any]:
        url = f"{self._base_url}/api/upload"
        logger.debug("POST %s fileName=%s", url, file_name)
        resp = await self._client.post(url, json={"fileName": file_name}, headers=self._headers)
        return self._json_or_raise(resp)

    @staticmethod
    def _json_or_raise(resp: httpx.Response) -> dict[str, Any]:
        try:
            data = resp.json()
        except ValueError:
            data = None
        if resp.status_code >= 400:
            message = data.get("error", resp.text) if isinstance(data, dict) else resp.text
            raise UploadClientError(resp.status_code, message, data if isinstance(data, dict) else None)
        return data or {}


def guess_image_type(path: Path) -> str | None:
    content_type, _ = mimetypes.guess_type(path.name)
    if content_type is None or not content_type.startswith("image/"):
        return None
    return content_type
