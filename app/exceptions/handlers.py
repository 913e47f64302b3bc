import logging

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .custom import (
    DuplicateRatingError,
    FeatureDisabledError,
    NotFoundError,
    RatingValidationError,
)

logger = logging.getLogger(__name__)


async def not_found_error_handler(_request: Request, exc: NotFoundError) -> JSONResponse:
    logger.warning("Not found: %s", exc.message)
    return JSONResponse(status_code=404, content={"detail": exc.message})


async def feature_disabled_error_handler(
    request: Request, exc: FeatureDisabledError,
) -> JSONResponse:
    # Same body as an unknown route: a disabled feature looks absent.
    logger.info("Feature %s disabled, hiding %s %s", exc.feature, request.method, request.url.path)
    return JSONResponse(status_code=404, content={"detail": "Not Found"})


async def duplicate_rating_error_handler(
    _request: Request, exc: DuplicateRatingError,
) -> JSONResponse:
    logger.warning(
        "Duplicate rating: tour=%s customer=%s", exc.tour_id, exc.customer_id,
    )
    return JSONResponse(status_code=409, content={"detail": str(exc)})


async def rating_validation_error_handler(
    _request: Request, exc: RatingValidationError,
) -> JSONResponse:
    logger.warning("Invalid rating request: %s", exc.message)
    return JSONResponse(status_code=400, content={"detail": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    logger.warning("Validation failed for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )
