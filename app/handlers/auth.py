"""Shared-password gate for mutating endpoints."""
from __future__ import annotations

import logging
from typing import Callable, Coroutine

from fastapi import Request, Response
from fastapi.routing import APIRoute

from app.config import get_settings
from app.errors import UnauthorizedError

logger = logging.getLogger(__name__)

UPLOAD_PASSWORD_HEADER = "x-upload-password"


def check_upload_password(upload_password: str | None) -> None:
    # Plain equality against one static secret; no rotation or per-user scope.
    if upload_password != get_settings().upload_password:
        logger.warning("Rejected request with missing or wrong upload password")
        raise UnauthorizedError()


class UploadPasswordRoute(APIRoute):
    """Route that rejects a bad ``x-upload-password`` before the body is read."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[None, None, Response]]:
        handler = super().get_route_handler()

        async def gated_handler(request: Request) -> Response:
            check_upload_password(request.headers.get(UPLOAD_PASSWORD_HEADER))
            return await handler(request)

        return gated_handler
