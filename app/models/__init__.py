from .catalog import BEER_BRANDS, CatalogResponse, ModelOption
from .describe import DescriptionRequest, DescriptionResult
from .guess import GuessRequest, GuessResult
from .image import DeleteImageRequest, DeleteImageResponse, ImageListResponse, ImageRecord
from .llm_models import DescriptionModel, GuessModel
from .upload import UploadTicket, UploadTicketRequest

__all__ = [
    "BEER_BRANDS",
    "CatalogResponse",
    "ModelOption",
    "DescriptionRequest",
    "DescriptionResult",
    "GuessRequest",
    "GuessResult",
    "DeleteImageRequest",
    "DeleteImageResponse",
    "ImageListResponse",
    "ImageRecord",
    "DescriptionModel",
    "GuessModel",
    "UploadTicket",
    "UploadTicketRequest",
]
