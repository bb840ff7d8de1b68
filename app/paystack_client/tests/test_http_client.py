"""
Tests for the HTTP request pipeline.

Tests cover:
- Construction (config validation, headers, timeouts)
- Request building per method
- Success, status: false, non-2xx, non-JSON and network failure paths
- Redacted request/response logging
"""

from types import MappingProxyType
from unittest.mock import patch

import pytest
import requests

from core.exceptions import ConfigurationError
from paystack_client.conf import PaystackConfig
from paystack_client.exceptions import (
    PaystackAuthenticationError,
    PaystackError,
    PaystackNetworkError,
    PaystackRateLimitError,
    PaystackServerError,
    PaystackValidationError,
)
from paystack_client.http_client import (
    REDACTED,
    HTTPMethod,
    PaystackHTTPClient,
    RequestDescriptor,
    redact,
)

from .conftest import make_response


# =============================================================================
# Construction Tests
# =============================================================================


class TestConstruction:
    """Tests for client construction."""

    def test_rejects_missing_secret_key(self, session):
        with pytest.raises(ConfigurationError):
            PaystackHTTPClient(PaystackConfig(), session=session)

    def test_rejects_insecure_production_config(self, session):
        config = PaystackConfig(secret_key="sk_live_1", production=True, verify_ssl=False)

        with pytest.raises(ConfigurationError):
            PaystackHTTPClient(config, session=session)

    def test_default_headers(self, http_client, session):
        assert session.headers["Authorization"] == "Bearer sk_test_123"
        assert session.headers["Content-Type"] == "application/json"
        assert session.headers["Accept"] == "application/json"
        assert session.headers["Cache-Control"] == "no-cache"
        assert session.headers["User-Agent"].startswith("paystack-client-python/")

    def test_timeout_tuple(self, http_client):
        assert http_client.timeout == (10, 30)

    def test_trailing_slash_stripped_from_base_url(self, session):
        config = PaystackConfig(secret_key="sk_test_123", base_url="https://api.paystack.co/")

        client = PaystackHTTPClient(config, session=session)
        client.get("/bank")

        assert session.request.call_args.args[1] == "https://api.paystack.co/bank"

    def test_context_manager_closes_session(self, http_client, session):
        with patch.object(session, "close") as mock_close:
            with http_client:
                pass

        mock_close.assert_called_once()


# =============================================================================
# Request Building Tests
# =============================================================================


class TestRequestBuilding:
    """Tests for how requests are handed to requests.Session."""

    def test_get_sends_query_params(self, http_client, session):
        http_client.get("/bank", {"country": "nigeria"})

        args, kwargs = session.request.call_args
        assert args == ("GET", "https://api.paystack.co/bank")
        assert kwargs["params"] == {"country": "nigeria"}
        assert "json" not in kwargs
        assert kwargs["timeout"] == (10, 30)
        assert kwargs["verify"] is True

    def test_post_sends_json_body(self, http_client, session):
        http_client.post("/transaction/initialize", {"email": "a@b.co", "amount": 10050})

        args, kwargs = session.request.call_args
        assert args[0] == "POST"
        assert kwargs["json"] == {"email": "a@b.co", "amount": 10050}
        assert "params" not in kwargs

    def test_post_without_data_sends_empty_object(self, http_client, session):
        http_client.post("/transfer/enable_otp")

        assert session.request.call_args.kwargs["json"] == {}

    def test_put(self, http_client, session):
        http_client.put("/customer/CUS_1", {"first_name": "Ada"})

        args, kwargs = session.request.call_args
        assert args[0] == "PUT"
        assert kwargs["json"] == {"first_name": "Ada"}

    def test_delete_without_data_has_no_body(self, http_client, session):
        http_client.delete("/transferrecipient/RCP_1")

        args, kwargs = session.request.call_args
        assert args[0] == "DELETE"
        assert "json" not in kwargs

    def test_verify_ssl_passed_through(self, session):
        config = PaystackConfig(secret_key="sk_test_123", verify_ssl=False)

        PaystackHTTPClient(config, session=session).get("/bank")

        assert session.request.call_args.kwargs["verify"] is False

    def test_descriptor_is_read_only(self):
        descriptor = RequestDescriptor("get", "/bank", query={"country": "ghana"})

        assert descriptor.method is HTTPMethod.GET
        assert isinstance(descriptor.query, MappingProxyType)
        with pytest.raises(TypeError):
            descriptor.query["country"] = "kenya"

    @pytest.mark.parametrize("method", ["post", "Post", "POST", HTTPMethod.POST])
    def test_descriptor_method_is_case_insensitive(self, method):
        assert RequestDescriptor(method, "/customer").method is HTTPMethod.POST

    def test_descriptor_rejects_unknown_method(self):
        with pytest.raises(ValueError):
            RequestDescriptor("patch", "/customer")


# =============================================================================
# Response Handling Tests
# =============================================================================


class TestResponses:
    """Tests for the success and failure paths."""

    def test_returns_envelope(self, http_client, session):
        envelope = {"status": True, "message": "Authorization URL created", "data": {"reference": "R1"}}
        session.request.return_value = make_response(200, envelope)

        assert http_client.post("/transaction/initialize", {"email": "a@b.co"}) == envelope

    def test_status_false_is_classified(self, http_client, session):
        session.request.return_value = make_response(
            200, {"status": False, "message": "Invalid amount", "errors": {"amount": ["Too small"]}}
        )

        with pytest.raises(PaystackValidationError) as exc_info:
            http_client.post("/transaction/initialize", {"amount": 1})

        error = exc_info.value
        assert error.errors == {"amount": ["Too small"]}
        assert error.context["method"] == "POST"
        assert error.context["endpoint"] == "/transaction/initialize"
        assert error.context["status_code"] == 200

    def test_401(self, http_client, session):
        session.request.return_value = make_response(
            401, {"status": False, "message": "Invalid key"}, reason="Unauthorized"
        )

        with pytest.raises(PaystackAuthenticationError) as exc_info:
            http_client.get("/transaction")

        assert exc_info.value.message == "Authentication failed: Invalid key"

    def test_429_headers(self, http_client, session):
        session.request.return_value = make_response(
            429,
            {"status": False, "message": "Too many"},
            headers={"Retry-After": "60"},
            reason="Too Many Requests",
        )

        with pytest.raises(PaystackRateLimitError) as exc_info:
            http_client.get("/transaction")

        assert exc_info.value.retry_after == 60

    def test_404_is_generic(self, http_client, session):
        session.request.return_value = make_response(
            404, {"status": False, "message": "Transaction not found"}, reason="Not Found"
        )

        with pytest.raises(PaystackError) as exc_info:
            http_client.get("/transaction/999")

        assert type(exc_info.value) is PaystackError
        assert exc_info.value.code == 404

    def test_non_json_error_body_uses_reason(self, http_client, session):
        session.request.return_value = make_response(502, text="<html>bad gateway</html>", reason="Bad Gateway")

        with pytest.raises(PaystackServerError) as exc_info:
            http_client.get("/bank")

        assert exc_info.value.message == "Paystack server error: Bad Gateway"
        assert exc_info.value.response is None

    def test_non_json_success_body(self, http_client, session):
        session.request.return_value = make_response(200, text="<html>ok</html>")

        with pytest.raises(PaystackError) as exc_info:
            http_client.get("/bank")

        assert exc_info.value.message == "Invalid JSON response from Paystack API."
        assert exc_info.value.response == "<html>ok</html>"

    def test_json_array_success_body(self, http_client, session):
        session.request.return_value = make_response(200, [1, 2, 3])

        with pytest.raises(PaystackError, match="Invalid JSON response"):
            http_client.get("/bank")

    def test_network_failure(self, http_client, session):
        original = requests.exceptions.ConnectTimeout("Connection to api.paystack.co timed out")
        session.request.side_effect = original

        with pytest.raises(PaystackNetworkError) as exc_info:
            http_client.get("/bank")

        error = exc_info.value
        assert error.is_timeout
        assert error.__cause__ is original
        assert error.context["endpoint"] == "/bank"
        assert error.context["exception"] == "ConnectTimeout"

    def test_no_internal_retries(self, http_client, session):
        session.request.return_value = make_response(503, {"message": "Down"}, reason="Service Unavailable")

        with pytest.raises(PaystackServerError):
            http_client.get("/bank")

        assert session.request.call_count == 1


# =============================================================================
# Logging Tests
# =============================================================================


class TestLogging:
    """Tests for request/response logging."""

    def test_disabled_by_default(self, http_client):
        with patch.object(http_client, "_io_logger") as mock_logger:
            http_client.get("/bank")

        mock_logger.info.assert_not_called()

    def test_logs_redacted_request_and_response(self, paystack_config, session):
        config = paystack_config.replace(logging_enabled=True)
        client = PaystackHTTPClient(config, session=session)
        session.request.return_value = make_response(
            200, {"status": True, "data": {"authorization": {"authorization_code": "AUTH_x"}}}
        )

        with patch.object(client, "_io_logger") as mock_logger:
            client.post("/charge", {"email": "a@b.co", "pin": "1234"})

        request_call, response_call = mock_logger.info.call_args_list
        assert request_call.args[0] == "Paystack API Request"
        assert request_call.kwargs["extra"]["options"]["json"] == {"email": "a@b.co", "pin": REDACTED}
        assert response_call.args[0] == "Paystack API Response"
        assert response_call.kwargs["extra"]["data"]["data"]["authorization"] == REDACTED

    def test_logger_uses_configured_channel(self, paystack_config, session):
        client = PaystackHTTPClient(paystack_config.replace(logging_channel="payments.io"), session=session)

        assert client._io_logger.name == "payments.io"


class TestRedact:
    """Tests for redact()."""

    def test_nested_and_case_insensitive(self):
        data = {
            "Authorization": "Bearer sk_test_123",
            "card": {"number": "4084", "CVV": "408"},
            "items": [{"token": "t"}, {"name": "ok"}],
        }

        assert redact(data) == {
            "Authorization": REDACTED,
            "card": {"number": "4084", "CVV": REDACTED},
            "items": [{"token": REDACTED}, {"name": "ok"}],
        }

    def test_does_not_mutate_input(self):
        data = {"password": "hunter2"}
        redact(data)

        assert data == {"password": "hunter2"}

    def test_scalars_pass_through(self):
        assert redact("secret") == "secret"
        assert redact(None) is None
