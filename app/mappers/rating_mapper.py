from typing import Any

from app.schemas.ratings import RatingDto, RatingPatch
from app.store import TourRating

PATCHABLE_FIELDS = ("score", "comment")


def to_rating_dto(rating: TourRating) -> RatingDto:
    return RatingDto(
        score=rating.score,
        comment=rating.comment,
        customer_id=rating.customer_id,
    )


def patch_fields(patch: RatingPatch) -> dict[str, Any]:
    """Return only the patchable fields present in the PATCH payload.

    An explicit ``"comment": null`` is kept (it clears the comment); an
    omitted field is left out entirely.
    """
    return {
        field: getattr(patch, field)
        for field in PATCHABLE_FIELDS
        if field in patch.model_fields_set
    }
