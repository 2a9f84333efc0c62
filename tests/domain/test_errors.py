"""Tests for domain error classes."""

from stayfinder.domain.booking import InvalidBookingInput
from stayfinder.domain.errors import DomainError, NotFoundError, ValidationError
from stayfinder.domain.listing import FilterValidationError, PagingValidationError


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_to_dict_returns_structured_format(self) -> None:
        """DomainError.to_dict() merges context into the structured format."""
        error = DomainError("Test error", field="test", value=123)

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "test",
            "value": 123,
        }

    def test_str_representation(self) -> None:
        assert str(DomainError("Test message")) == "Test message"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_creates_validation_error_with_default_message(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None

    def test_creates_validation_error_with_field_errors(self) -> None:
        errors = [
            {"field": "checkOut", "message": "Must be after checkIn", "code": "INVALID_RANGE"},
            {"field": "guests", "message": "Must be at least 1", "code": "INVALID_VALUE"},
        ]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_field_errors(self) -> None:
        error = ValidationError("Simple error")

        assert error.to_dict() == {"message": "Simple error", "code": "VALIDATION_ERROR"}

    def test_listing_and_booking_errors_share_the_validation_code(self) -> None:
        for error_class in (FilterValidationError, PagingValidationError, InvalidBookingInput):
            error = error_class("bad input")

            assert isinstance(error, ValidationError)
            assert error.error_code == "VALIDATION_ERROR"


class TestNotFoundError:
    """Tests for NotFoundError class."""

    def test_creates_not_found_error_with_identifier(self) -> None:
        error = NotFoundError("Listing", "lst-001")

        assert error.message == "Listing with identifier 'lst-001' not found"
        assert error.error_code == "NOT_FOUND"
        assert error.to_dict() == {
            "message": "Listing with identifier 'lst-001' not found",
            "code": "NOT_FOUND",
            "resource": "Listing",
            "identifier": "lst-001",
        }

    def test_creates_not_found_error_without_identifier(self) -> None:
        error = NotFoundError("Shared wishlist")

        assert error.message == "Shared wishlist not found"
        assert error.context["identifier"] is None
