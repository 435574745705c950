from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.errors import BeerTesterError
from app.handlers import (
    catalog_handler,
    describe_handler,
    guess_handler,
    images_handler,
    upload_handler,
)

settings = get_settings()
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Beer Tester API")

app.include_router(images_handler.router)
app.include_router(images_handler.protected_router)
app.include_router(upload_handler.router)
app.include_router(describe_handler.router)
app.include_router(guess_handler.router)
app.include_router(catalog_handler.router)


@app.exception_handler(BeerTesterError)
async def beer_tester_error_handler(request: Request, exc: BeerTesterError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    logger.info("Invalid request body for %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": "invalid request body"})


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
