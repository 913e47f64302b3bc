from __future__ import annotations

from collections.abc import Iterable

from pydantic import BaseModel

from app.exceptions.custom import DuplicateRatingError


class TourRating(BaseModel):
    tour_id: int
    customer_id: int
    score: int
    comment: str | None = None


RatingKey = tuple[int, int]


class TourRatingStore:
    """In-memory ratings keyed by (tour_id, customer_id).

    Insertion order is preserved, so lookups return ratings in the order
    they were created.
    """

    def __init__(self) -> None:
        self._ratings: dict[RatingKey, TourRating] = {}

    def find_by_tour(self, tour_id: int) -> list[TourRating]:
        return [r for r in self._ratings.values() if r.tour_id == tour_id]

    def find(self, tour_id: int, customer_id: int) -> TourRating | None:
        return self._ratings.get((tour_id, customer_id))

    def exists(self, tour_id: int, customer_id: int) -> bool:
        return (tour_id, customer_id) in self._ratings

    def insert(self, rating: TourRating) -> TourRating:
        key = (rating.tour_id, rating.customer_id)
        if key in self._ratings:
            raise DuplicateRatingError(rating.tour_id, rating.customer_id)
        self._ratings[key] = rating
        return rating

    def save(self, rating: TourRating) -> TourRating:
        self._ratings[(rating.tour_id, rating.customer_id)] = rating
        return rating

    def remove(self, tour_id: int, customer_id: int) -> TourRating | None:
        return self._ratings.pop((tour_id, customer_id), None)


class IdRegistry:
    """Set of known entity ids (tours, customers)."""

    def __init__(self, ids: Iterable[int] = ()) -> None:
        self._ids: set[int] = set(ids)

    def exists(self, entity_id: int) -> bool:
        return entity_id in self._ids
