"""Tests for domain error classes."""

from storefront.domain.errors import (
    DomainError,
    NotFoundError,
    ValidationError,
)
from storefront.domain.product import FilterValidationError, PagingValidationError


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
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

    def test_creates_simple_validation_error(self) -> None:
        error = ValidationError("Invalid input")

        assert error.message == "Invalid input"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None

    def test_creates_validation_error_with_default_message(self) -> None:
        error = ValidationError()

        assert error.message == "Validation error"
        assert error.errors is None

    def test_creates_validation_error_with_field_errors(self) -> None:
        errors = [
            {"field": "minPrice", "message": "Must be a valid decimal number", "code": "INVALID_DECIMAL"},
        ]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.errors == errors

    def test_to_dict_includes_field_errors(self) -> None:
        errors = [{"field": "page", "message": "Must be an integer", "code": "INVALID_INTEGER"}]

        result = ValidationError(errors=errors).to_dict()

        assert result == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_to_dict_without_field_errors(self) -> None:
        result = ValidationError("page must be >= 1").to_dict()

        assert result == {"message": "page must be >= 1", "code": "VALIDATION_ERROR"}

    def test_filter_and_paging_errors_are_validation_errors(self) -> None:
        assert isinstance(FilterValidationError("x"), ValidationError)
        assert isinstance(PagingValidationError("x"), ValidationError)
        assert PagingValidationError("x").error_code == "VALIDATION_ERROR"


class TestNotFoundError:
    """Tests for NotFoundError class."""

    def test_message_names_resource_only(self) -> None:
        error = NotFoundError("Product", "999")

        assert error.message == "Product not found"
        assert error.error_code == "NOT_FOUND"

    def test_context_keeps_identifier(self) -> None:
        error = NotFoundError("Product", "999")

        assert error.to_dict() == {
            "message": "Product not found",
            "code": "NOT_FOUND",
            "resource": "Product",
            "identifier": "999",
        }

    def test_without_identifier(self) -> None:
        error = NotFoundError("Product")

        assert error.message == "Product not found"
        assert error.context["identifier"] is None

