"""
Unit tests for server exception handlers.

Tests cover the global 500 handler and the translation of visitor log errors
and request validation failures.
"""

import json
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from visitor_log.core.errors import (
    InvalidVisitorIdError,
    VisitorLogError,
    VisitorNotFoundError,
    VisitorValidationError,
)
from visitor_log.core.models.io import FieldError
from visitor_log.server.exception_handlers import setup_exception_handlers
from visitor_log.server.exception_handlers.global_handler import global_exception_handler
from visitor_log.server.exception_handlers.visitor_handler import (
    request_validation_handler,
    visitor_error_handler,
)


@pytest.fixture
def mock_request():
    """Create a mock request object."""
    request = Mock(spec=Request)
    request.method = "PATCH"
    request.url.path = "/api/visitors/1/logout"
    request.query_params = {}
    request.client = Mock()
    request.client.host = "127.0.0.1"
    return request


def _body(response: JSONResponse) -> dict:
    return json.loads(response.body.decode())


class TestGlobalExceptionHandler:
    """Test suite for global exception handler."""

    @pytest.mark.asyncio
    async def test_exception_handler_logs_error(self, mock_request):
        exc = ValueError("Test error")

        with patch("visitor_log.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, exc)

            mock_logger.error.assert_called_once()
            call_args = mock_logger.error.call_args
            assert "Unhandled exception" in call_args[0][0]
            assert call_args[1]["extra"]["error_type"] == "ValueError"
            assert call_args[1]["extra"]["path"] == "/api/visitors/1/logout"

    @pytest.mark.asyncio
    async def test_exception_handler_returns_generic_500(self, mock_request):
        exc = RuntimeError("secret detail")

        with patch("visitor_log.server.exception_handlers.global_handler.logger"):
            response = await global_exception_handler(mock_request, exc)

        assert response.status_code == 500
        body = _body(response)
        assert body["message"] == "Internal server error"
        assert isinstance(body["error_id"], int)
        assert "secret detail" not in response.body.decode()

    @pytest.mark.asyncio
    async def test_exception_handler_without_client(self, mock_request):
        mock_request.client = None

        with patch("visitor_log.server.exception_handlers.global_handler.logger") as mock_logger:
            await global_exception_handler(mock_request, RuntimeError("x"))

        assert mock_logger.error.call_args[1]["extra"]["client"] == "unknown"


class TestVisitorErrorHandler:
    @pytest.mark.asyncio
    async def test_validation_error(self, mock_request):
        exc = VisitorValidationError(
            [
                FieldError(field="name", message="Name is required", type="name_required"),
                FieldError(field="mobile", message="Please enter a valid 10-digit mobile number", type="mobile_invalid"),
            ]
        )

        response = await visitor_error_handler(mock_request, exc)

        assert response.status_code == 400
        body = _body(response)
        assert body["message"] == "Validation failed"
        assert [error["field"] for error in body["errors"]] == ["name", "mobile"]

    @pytest.mark.asyncio
    async def test_invalid_id(self, mock_request):
        response = await visitor_error_handler(mock_request, InvalidVisitorIdError("abc"))

        assert response.status_code == 400
        assert _body(response) == {"message": "Invalid visitor ID"}

    @pytest.mark.asyncio
    async def test_not_found(self, mock_request):
        response = await visitor_error_handler(mock_request, VisitorNotFoundError(999))

        assert response.status_code == 404
        assert _body(response) == {"message": "Visitor not found"}

    @pytest.mark.asyncio
    async def test_unmapped_subclass_is_internal_error(self, mock_request):
        class OddError(VisitorLogError):
            pass

        response = await visitor_error_handler(mock_request, OddError("odd"))

        assert response.status_code == 500
        assert _body(response) == {"message": "Internal server error"}


class TestRequestValidationHandler:
    @pytest.mark.asyncio
    async def test_translates_to_field_errors(self, mock_request):
        exc = RequestValidationError(
            [
                {"loc": ("body", "name"), "msg": "Name is required", "type": "name_required"},
                {"loc": ("body", "mobile"), "msg": "Field required", "type": "missing"},
            ]
        )

        response = await request_validation_handler(mock_request, exc)

        assert response.status_code == 400
        body = _body(response)
        assert body["message"] == "Validation failed"
        assert body["errors"] == [
            {"field": "name", "message": "Name is required", "type": "name_required"},
            {"field": "mobile", "message": "Field required", "type": "missing"},
        ]


def test_setup_exception_handlers_registers_all():
    app = FastAPI()

    setup_exception_handlers(app)

    assert VisitorLogError in app.exception_handlers
    assert RequestValidationError in app.exception_handlers
    assert Exception in app.exception_handlers
