from typing import Annotated

from fastapi import Depends, Request

from app.config import Settings
from app.services.tour_rating import TourRatingService


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_tour_rating_service(request: Request) -> TourRatingService:
    return request.app.state.tour_rating_service


SettingsDep = Annotated[Settings, Depends(get_settings)]
TourRatingDep = Annotated[TourRatingService, Depends(get_tour_rating_service)]
