from pydantic import BaseModel, Field, field_validator


class RatingDto(BaseModel):
    model_config = {"populate_by_name": True}

    score: int = Field(ge=0, le=5)
    comment: str | None = Field(default=None, max_length=255)
    customer_id: int = Field(alias="customerId")


class RatingPatch(BaseModel):
    """PATCH body. Fields left out of the payload are not in ``model_fields_set``."""

    model_config = {"populate_by_name": True}

    score: int | None = Field(default=None, ge=0, le=5)
    comment: str | None = Field(default=None, max_length=255)
    customer_id: int = Field(alias="customerId")

    @field_validator("score")
    @classmethod
    def _score_not_null(cls, value: int | None) -> int | None:
        # Only runs for values present in the payload
        if value is None:
            raise ValueError("score may be omitted but not null")
        return value


class AverageResponse(BaseModel):
    average: float
