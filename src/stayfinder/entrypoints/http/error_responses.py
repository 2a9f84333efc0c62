"""Body of every non-2xx response, for the OpenAPI ``responses`` tables."""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Listing with identifier 'lst-404' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "priceMin",
                            "message": "Must be less than or equal to priceMax",
                            "code": "INVALID_RANGE",
                        },
                    ],
                },
            ]
        }
    )
