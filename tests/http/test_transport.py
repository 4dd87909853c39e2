"""Tests for the HTTP transport."""

import httpx
import pytest
import respx

from sonar_cleaner.http import HttpResult, HttpTransport


class TestHttpResult:
    """Tests for HttpResult model."""

    def test_response(self) -> None:
        """Test a result carrying a response."""
        result = HttpResult(status_code=204)

        assert result.transport_failed is False
        assert result.has_status(204)
        assert not result.has_status(200)
        assert result.describe() == "HTTP 204: "

    def test_transport_failure(self) -> None:
        """Test a result without a response."""
        result = HttpResult(error="Connection refused")

        assert result.transport_failed is True
        assert not result.has_status(200)
        assert result.describe() == "transport error: Connection refused"


class TestHttpTransport:
    """Tests for HttpTransport."""

    @pytest.mark.asyncio
    async def test_context_manager(self) -> None:
        """Test async context manager."""
        transport = HttpTransport()

        assert transport._client is None

        async with transport:
            assert isinstance(transport._client, httpx.AsyncClient)

    @pytest.mark.asyncio
    async def test_not_initialized(self) -> None:
        """Test that requests require an open transport."""
        with pytest.raises(RuntimeError, match="not initialized"):
            await HttpTransport().get("https://example.test/", "token")

    @pytest.mark.asyncio
    async def test_closed_transport_reports_not_initialized(self) -> None:
        """Test that a transport used after exit fails like an unopened one."""
        transport = HttpTransport()
        async with transport:
            pass

        assert transport._client is None
        with pytest.raises(RuntimeError, match="not initialized"):
            await transport.post("https://example.test/", "token")

    @pytest.mark.asyncio
    @respx.mock(assert_all_called=False)
    async def test_non_ascii_token(self) -> None:
        """Test that a token that cannot be sent as a header becomes a failed result."""
        route = respx.get("https://example.test/file").mock(return_value=httpx.Response(200, text="content"))

        async with HttpTransport() as transport:
            result = await transport.get("https://example.test/file", "tökén")

        assert result.transport_failed
        assert result.error
        assert not route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_sends_bearer_token(self) -> None:
        """Test GET with bearer authentication."""
        route = respx.get("https://example.test/file").mock(return_value=httpx.Response(200, text="content"))

        async with HttpTransport() as transport:
            result = await transport.get("https://example.test/file", "secret")

        assert result == HttpResult(status_code=200, body="content")
        assert route.calls.last.request.headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_without_body(self) -> None:
        """Test POST sends no content."""
        route = respx.post("https://example.test/delete").mock(return_value=httpx.Response(204))

        async with HttpTransport() as transport:
            result = await transport.post("https://example.test/delete", "secret")

        assert result.status_code == 204
        request = route.calls.last.request
        assert request.content == b""
        assert request.headers["Authorization"] == "Bearer secret"

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_status_is_returned(self) -> None:
        """Test that error statuses are returned rather than raised."""
        respx.get("https://example.test/file").mock(return_value=httpx.Response(401, text="Unauthorized"))

        async with HttpTransport() as transport:
            result = await transport.get("https://example.test/file", "bad")

        assert result.status_code == 401
        assert result.body == "Unauthorized"

    @pytest.mark.asyncio
    @respx.mock
    async def test_connection_error(self) -> None:
        """Test that transport errors become results."""
        respx.get("https://example.test/file").mock(side_effect=httpx.ConnectError("Connection refused"))

        async with HttpTransport() as transport:
            result = await transport.get("https://example.test/file", "secret")

        assert result.transport_failed
        assert result.error == "Connection refused"

    @pytest.mark.asyncio
    async def test_malformed_url(self) -> None:
        """Test that a URL without scheme becomes a failed result."""
        async with HttpTransport() as transport:
            result = await transport.get("/rest/api/1.0/projects/X/repos/y/browse/pom.xml", "secret")

        assert result.transport_failed
        assert result.error
