import logging
from enum import Enum
from statistics import fmean

from app.exceptions.custom import (
    DuplicateRatingError,
    NotFoundError,
    RatingValidationError,
)
from app.store import IdRegistry, TourRating, TourRatingStore

logger = logging.getLogger(__name__)


class _Unset(Enum):
    token = "UNSET"


# Marks a PATCH field that was not supplied, as opposed to an explicit None.
UNSET = _Unset.token


class TourRatingService:
    def __init__(
        self,
        store: TourRatingStore,
        tours: IdRegistry,
        customers: IdRegistry,
    ) -> None:
        self._store = store
        self._tours = tours
        self._customers = customers

    def create_new(
        self, tour_id: int, customer_id: int, score: int, comment: str | None = None,
    ) -> TourRating:
        self._verify_tour(tour_id)
        self._verify_customer(customer_id)
        rating = self._store.insert(TourRating(
            tour_id=tour_id, customer_id=customer_id, score=score, comment=comment,
        ))
        logger.info("Created rating tour=%s customer=%s score=%s", tour_id, customer_id, score)
        return rating

    def lookup_ratings(self, tour_id: int) -> list[TourRating]:
        self._verify_tour(tour_id)
        return self._store.find_by_tour(tour_id)

    def get_average_score(self, tour_id: int) -> float:
        ratings = self.lookup_ratings(tour_id)
        if not ratings:
            raise NotFoundError(f"Tour {tour_id} has no ratings")
        return fmean(r.score for r in ratings)

    def update(
        self, tour_id: int, customer_id: int, score: int, comment: str | None,
    ) -> TourRating:
        rating = self._verify_tour_rating(tour_id, customer_id)
        return self._store.save(
            rating.model_copy(update={"score": score, "comment": comment})
        )

    def update_some(
        self,
        tour_id: int,
        customer_id: int,
        score: int | _Unset = UNSET,
        comment: str | None | _Unset = UNSET,
    ) -> TourRating:
        rating = self._verify_tour_rating(tour_id, customer_id)
        changes: dict[str, object] = {}
        if score is not UNSET:
            changes["score"] = score
        if comment is not UNSET:
            changes["comment"] = comment
        if not changes:
            return rating
        return self._store.save(rating.model_copy(update=changes))

    def delete(self, tour_id: int, customer_id: int) -> None:
        self._verify_tour_rating(tour_id, customer_id)
        self._store.remove(tour_id, customer_id)
        logger.info("Deleted rating tour=%s customer=%s", tour_id, customer_id)

    def rate_many(
        self, tour_id: int, score: int, customer_ids: list[int],
    ) -> list[TourRating]:
        """Rate one tour with the same score for several customers.

        All-or-nothing: every customer is checked before the first rating is
        stored, so a rejected batch leaves the store untouched.
        """
        self._verify_tour(tour_id)

        seen: set[int] = set()
        for customer_id in customer_ids:
            if customer_id in seen:
                raise RatingValidationError(
                    f"Customer {customer_id} appears more than once in the batch"
                )
            seen.add(customer_id)
            self._verify_customer(customer_id)
            if self._store.exists(tour_id, customer_id):
                raise DuplicateRatingError(tour_id, customer_id)

        ratings = [
            self._store.insert(TourRating(
                tour_id=tour_id, customer_id=customer_id, score=score,
            ))
            for customer_id in customer_ids
        ]
        logger.info(
            "Created %d ratings for tour=%s with score=%s", len(ratings), tour_id, score,
        )
        return ratings

    def _verify_tour(self, tour_id: int) -> None:
        if not self._tours.exists(tour_id):
            raise NotFoundError(f"Tour does not exist: {tour_id}")

    def _verify_customer(self, customer_id: int) -> None:
        if not self._customers.exists(customer_id):
            raise NotFoundError(f"Customer does not exist: {customer_id}")

    def _verify_tour_rating(self, tour_id: int, customer_id: int) -> TourRating:
        rating = self._store.find(tour_id, customer_id)
        if rating is None:
            raise NotFoundError(
                f"Tour-Rating pair for request ({tour_id} for customer {customer_id}) not found"
            )
        return rating
