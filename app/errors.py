"""Error taxonomy shared by services and handlers.

Every error carries the HTTP status it maps to; ``app.main`` renders them as
``{"error": message}``. Upstream errors keep a generic message, the
underlying exception is only logged.
"""
from __future__ import annotations


class BeerTesterError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# 400
# ---------------------------------------------------------------------------


class InvalidRequestError(BeerTesterError):
    status_code = 400


class MissingFieldError(InvalidRequestError):
    def __init__(self, field: str) -> None:
        super().__init__(f"{field} is required")
        self.field = field


class MissingBrandsError(InvalidRequestError):
    def __init__(self) -> None:
        super().__init__("at least one allowed brand is required")


class UnsupportedModelError(InvalidRequestError):
    def __init__(self, kind: str, selector: str) -> None:
        super().__init__(f"unsupported {kind} model")
        self.selector = selector


class InvalidKeyError(InvalidRequestError):
    def __init__(self) -> None:
        super().__init__("Invalid key")


# ---------------------------------------------------------------------------
# 401
# ---------------------------------------------------------------------------


class UnauthorizedError(BeerTesterError):
    status_code = 401

    def __init__(self) -> None:
        super().__init__("Unauthorized")


# ---------------------------------------------------------------------------
# 500
# ---------------------------------------------------------------------------


class UpstreamError(BeerTesterError):
    status_code = 500


class StorageUnavailableError(UpstreamError):
    """Raised when the object store rejects or fails a request."""


class DescriptionGenerationError(UpstreamError):
    def __init__(self) -> None:
        super().__init__("Failed to generate description")


class GuessGenerationError(UpstreamError):
    def __init__(self) -> None:
        super().__init__("Failed to guess beer")
