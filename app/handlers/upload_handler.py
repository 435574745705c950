"""Presigned upload ticket issuance."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from app.handlers.auth import UploadPasswordRoute
from app.models.upload import UploadTicket, UploadTicketRequest
from app.services.storage import StorageService, get_storage_service

router = APIRouter(prefix="/api", tags=["upload"], route_class=UploadPasswordRoute)


@router.post("/upload", response_model=UploadTicket)
def create_upload_ticket(
    payload: UploadTicketRequest | None = None,
    storage: StorageService = Depends(get_storage_service),
):
    return storage.create_upload_ticket(payload.file_name if payload else None)
