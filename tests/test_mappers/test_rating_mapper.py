from app.mappers.rating_mapper import patch_fields, to_rating_dto
from app.schemas.ratings import RatingPatch
from app.store import TourRating


def test_to_rating_dto():
    rating = TourRating(tour_id=999, customer_id=1000, score=3, comment="comment")

    dto = to_rating_dto(rating)

    assert dto.score == 3
    assert dto.comment == "comment"
    assert dto.customer_id == 1000
    assert dto.model_dump(by_alias=True) == {
        "score": 3,
        "comment": "comment",
        "customerId": 1000,
    }


def test_patch_fields_score_only():
    patch = RatingPatch.model_validate({"customerId": 1000, "score": 5})
    assert patch_fields(patch) == {"score": 5}


def test_patch_fields_comment_only():
    patch = RatingPatch.model_validate({"customerId": 1000, "comment": "great"})
    assert patch_fields(patch) == {"comment": "great"}


def test_patch_fields_explicit_null_comment_is_kept():
    patch = RatingPatch.model_validate({"customerId": 1000, "comment": None})
    assert patch_fields(patch) == {"comment": None}


def test_patch_fields_nothing_supplied():
    patch = RatingPatch.model_validate({"customerId": 1000})
    assert patch_fields(patch) == {}


def test_patch_fields_ignores_customer_id():
    patch = RatingPatch.model_validate({"customerId": 1000, "score": 1, "comment": "x"})
    assert patch_fields(patch) == {"score": 1, "comment": "x"}
