"""Image library listing and deletion."""
from __future__ import annotations

from fastapi import APIRouter, Depends

from app.handlers.auth import UploadPasswordRoute
from app.models.image import DeleteImageRequest, DeleteImageResponse, ImageListResponse
from app.services.storage import StorageService, get_storage_service

router = APIRouter(prefix="/api", tags=["images"])
# Mutations on the library sit behind the shared upload password.
protected_router = APIRouter(prefix="/api", tags=["images"], route_class=UploadPasswordRoute)


@router.get("/images", response_model=ImageListResponse)
def list_images(storage: StorageService = Depends(get_storage_service)):
    return ImageListResponse(images=storage.list_images())


@protected_router.delete("/images", response_model=DeleteImageResponse)
def delete_image(
    payload: DeleteImageRequest | None = None,
    storage: StorageService = Depends(get_storage_service),
):
    storage.delete_image(payload.key if payload else None)
    return DeleteImageResponse(success=True)
