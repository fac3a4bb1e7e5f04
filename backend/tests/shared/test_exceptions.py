"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    AppError,
    AuthenticationError,
    AuthorizationError,
    ConfigurationError,
    ExternalServiceError,
    InternalError,
    NotFoundError,
    ValidationError,
)


class TestAppError:
    def test_basic_error(self):
        error = AppError("Something went wrong")
        assert error.message == "Something went wrong"
        assert error.code == "AppError"
        assert error.details == {}
        assert error.status_code == 500
        assert str(error) == "Something went wrong"

    def test_custom_code_and_details(self):
        error = AppError("Oops", code="CUSTOM", details={"key": "value"})
        assert error.code == "CUSTOM"
        assert error.details == {"key": "value"}

    def test_envelope_has_only_error(self):
        error = AppError("Oops", code="CUSTOM", details={"key": "value"})
        assert error.to_dict() == {"error": "Oops"}


class TestStatusCodes:
    def test_each_base_carries_its_status(self):
        assert NotFoundError("x").status_code == 404
        assert ValidationError("x").status_code == 400
        assert AuthenticationError("x").status_code == 401
        assert AuthorizationError("x").status_code == 403
        assert InternalError().status_code == 500
        assert ConfigurationError("x").status_code == 500

    def test_subclass_inherits_status(self):
        class MissingThing(NotFoundError):
            pass

        assert MissingThing("gone").status_code == 404
        assert isinstance(MissingThing("gone"), AppError)


class TestValidationError:
    def test_details_included_when_present(self):
        error = ValidationError(
            "Validation error",
            errors=[{"field": "email", "message": "Invalid email"}],
        )
        assert error.to_dict() == {
            "error": "Validation error",
            "details": [{"field": "email", "message": "Invalid email"}],
        }

    def test_details_omitted_when_empty(self):
        assert ValidationError("Bad").to_dict() == {"error": "Bad"}


class TestInternalError:
    def test_default_message_is_generic(self):
        assert InternalError().message == "Internal Server Error"


class TestExternalServiceError:
    def test_records_service(self):
        error = ExternalServiceError("Down", service="smtp")
        assert error.service == "smtp"
        assert error.details["service"] == "smtp"
        assert error.status_code == 500
