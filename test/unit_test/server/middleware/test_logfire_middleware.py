"""
Unit tests for Logfire middleware.

This test suite covers:
- Request/response processing
- Performance metrics collection
- Error handling
- Header injection
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from fastapi import Request
from starlette.datastructures import State
from starlette.responses import Response

from visitor_log.server.middleware.logfire_middleware import LogfireMiddleware


def _mock_request(method: str = "GET", path: str = "/api/visitors"):
    request = AsyncMock(spec=Request)
    request.method = method
    request.url.path = path
    request.state = MagicMock()
    return request


class TestLogfireMiddlewareDispatch:
    @pytest.mark.asyncio
    async def test_middleware_processes_successful_request(self):
        response = Response(content="[]", status_code=200)

        async def call_next(request):
            return response

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("visitor_log.server.middleware.logfire_middleware.log_api_request") as mock_log:
            result = await middleware.dispatch(_mock_request(), call_next)

        assert result.status_code == 200
        kwargs = mock_log.call_args.kwargs
        assert kwargs["method"] == "GET"
        assert kwargs["path"] == "/api/visitors"
        assert kwargs["status_code"] == 200
        assert kwargs["duration_ms"] >= 0
        assert "X-Process-Time" in result.headers

    @pytest.mark.asyncio
    async def test_middleware_reraises_and_records_500(self):
        async def call_next(request):
            raise RuntimeError("boom")

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("visitor_log.server.middleware.logfire_middleware.log_api_request") as mock_log, patch(
            "visitor_log.server.middleware.logfire_middleware.logger"
        ) as mock_logger:
            with pytest.raises(RuntimeError):
                await middleware.dispatch(_mock_request("POST"), call_next)

        assert mock_log.call_args.kwargs["status_code"] == 500
        mock_logger.error.assert_called_once()

    @pytest.mark.asyncio
    async def test_slow_request_is_logged(self):
        async def call_next(request):
            return Response(status_code=201)

        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("visitor_log.server.middleware.logfire_middleware.log_api_request"), patch(
            "visitor_log.server.middleware.logfire_middleware.SLOW_REQUEST_THRESHOLD_MS", -1
        ), patch("visitor_log.server.middleware.logfire_middleware.logger") as mock_logger:
            await middleware.dispatch(_mock_request("POST"), call_next)

        mock_logger.warning.assert_called_once()
        assert "Slow API request" in mock_logger.warning.call_args[0][0]

    @pytest.mark.asyncio
    async def test_request_state_is_left_untouched(self):
        async def call_next(request):
            return Response(status_code=200)

        request = _mock_request()
        request.state = State()
        middleware = LogfireMiddleware(app=AsyncMock())

        with patch("visitor_log.server.middleware.logfire_middleware.log_api_request"):
            await middleware.dispatch(request, call_next)

        assert request.state._state == {}
