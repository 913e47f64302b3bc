import logging

from fastapi import APIRouter, Body, Query, Response

from app.dependencies import TourRatingDep
from app.mappers.rating_mapper import patch_fields, to_rating_dto
from app.schemas.ratings import AverageResponse, RatingDto, RatingPatch

logger = logging.getLogger(__name__)

# Authentication, the tour-ratings feature gate and roles are enforced by
# AccessControlMiddleware before requests reach these handlers.
router = APIRouter(prefix="/tours/{tour_id}/ratings", tags=["Tour Rating"])


@router.post("", response_model=RatingDto, status_code=201)
async def create_tour_rating(
    tour_id: int, rating: RatingDto, service: TourRatingDep,
) -> RatingDto:
    logger.info("POST /tours/%s/ratings customer=%s", tour_id, rating.customer_id)
    created = service.create_new(
        tour_id, rating.customer_id, rating.score, rating.comment,
    )
    return to_rating_dto(created)


@router.get("", response_model=list[RatingDto])
async def get_all_ratings_for_tour(
    tour_id: int, service: TourRatingDep,
) -> list[RatingDto]:
    logger.info("GET /tours/%s/ratings", tour_id)
    return [to_rating_dto(r) for r in service.lookup_ratings(tour_id)]


@router.get("/average", response_model=AverageResponse)
async def get_average(tour_id: int, service: TourRatingDep) -> AverageResponse:
    logger.info("GET /tours/%s/ratings/average", tour_id)
    return AverageResponse(average=service.get_average_score(tour_id))


@router.put("", response_model=RatingDto)
async def update_with_put(
    tour_id: int, rating: RatingDto, service: TourRatingDep,
) -> RatingDto:
    logger.info("PUT /tours/%s/ratings customer=%s", tour_id, rating.customer_id)
    updated = service.update(
        tour_id, rating.customer_id, rating.score, rating.comment,
    )
    return to_rating_dto(updated)


@router.patch("", response_model=RatingDto)
async def update_with_patch(
    tour_id: int, patch: RatingPatch, service: TourRatingDep,
) -> RatingDto:
    logger.info("PATCH /tours/%s/ratings customer=%s", tour_id, patch.customer_id)
    updated = service.update_some(tour_id, patch.customer_id, **patch_fields(patch))
    return to_rating_dto(updated)


@router.delete("/{customer_id}", status_code=204, response_class=Response)
async def delete_rating(
    tour_id: int, customer_id: int, service: TourRatingDep,
) -> Response:
    logger.info("DELETE /tours/%s/ratings/%s", tour_id, customer_id)
    service.delete(tour_id, customer_id)
    return Response(status_code=204)


@router.post("/batch", status_code=201, response_class=Response)
async def create_many_tour_ratings(
    tour_id: int,
    service: TourRatingDep,
    score: int = Query(ge=0, le=5),
    customers: list[int] = Body(),
) -> Response:
    logger.info(
        "POST /tours/%s/ratings/batch score=%s customers=%s", tour_id, score, customers,
    )
    service.rate_many(tour_id, score, customers)
    return Response(status_code=201)
