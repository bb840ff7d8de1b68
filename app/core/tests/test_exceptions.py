"""
Tests for the base application exceptions.
"""

from core.exceptions import (
    BaseApplicationError,
    ConfigurationError,
    ExternalServiceError,
    ValidationError,
)


class TestBaseApplicationError:
    """Tests for BaseApplicationError."""

    def test_default_error_code(self):
        error = BaseApplicationError("Something broke")

        assert error.error_code == "APPLICATION_ERROR"
        assert error.details == {}
        assert str(error) == "[APPLICATION_ERROR] Something broke"

    def test_to_dict_omits_empty_details(self):
        assert BaseApplicationError("x").to_dict() == {"error": "x", "error_code": "APPLICATION_ERROR"}

    def test_to_dict_with_details(self):
        error = ValidationError("Invalid", details={"email": ["Required"]})

        assert error.to_dict() == {
            "error": "Invalid",
            "error_code": "VALIDATION_ERROR",
            "details": {"email": ["Required"]},
        }

    def test_subclass_codes(self):
        assert ConfigurationError("x").error_code == "CONFIGURATION_ERROR"
        assert ExternalServiceError("x").error_code == "EXTERNAL_SERVICE_ERROR"
        assert ConfigurationError("x", error_code="MISSING_SECRET_KEY").error_code == "MISSING_SECRET_KEY"

    def test_repr(self):
        assert repr(ValidationError("bad")) == (
            "ValidationError(message='bad', error_code='VALIDATION_ERROR', details={})"
        )
