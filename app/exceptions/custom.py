class NotFoundError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class FeatureDisabledError(Exception):
    def __init__(self, feature: str):
        self.feature = feature
        super().__init__(f"Feature {feature} is disabled")


class DuplicateRatingError(Exception):
    def __init__(self, tour_id: int, customer_id: int):
        self.tour_id = tour_id
        self.customer_id = customer_id
        super().__init__(
            f"Customer {customer_id} has already rated tour {tour_id}"
        )


class RatingValidationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
