import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError

from app.config import Settings
from app.exceptions.custom import (
    DuplicateRatingError,
    NotFoundError,
    RatingValidationError,
)
from app.exceptions.handlers import (
    duplicate_rating_error_handler,
    not_found_error_handler,
    rating_validation_error_handler,
    request_validation_error_handler,
)
from app.middleware.access_control import AccessControlMiddleware
from app.routers.health import router as health_router
from app.routers.tour_ratings import router as tour_ratings_router
from app.security import build_accounts
from app.services.feature_flags import FeatureFlagService
from app.services.tour_rating import TourRatingService
from app.store import IdRegistry, TourRatingStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )

    tours = IdRegistry(settings.tour_ids)
    customers = IdRegistry(settings.customer_ids)

    app.title = settings.app_name
    app.version = settings.app_version
    app.state.settings = settings
    app.state.accounts = build_accounts(settings)
    app.state.feature_flags = FeatureFlagService(settings.features)
    app.state.tour_rating_service = TourRatingService(
        TourRatingStore(), tours, customers,
    )

    logger.info(
        "Started %s %s (features=%s, tours=%d, customers=%d)",
        settings.app_name, settings.app_version, settings.features,
        len(settings.tour_ids), len(settings.customer_ids),
    )
    yield


app = FastAPI(lifespan=lifespan)
app.add_middleware(AccessControlMiddleware)

app.add_exception_handler(RequestValidationError, request_validation_error_handler)
app.add_exception_handler(RatingValidationError, rating_validation_error_handler)
app.add_exception_handler(NotFoundError, not_found_error_handler)
app.add_exception_handler(DuplicateRatingError, duplicate_rating_error_handler)

app.include_router(health_router)
app.include_router(tour_ratings_router)
