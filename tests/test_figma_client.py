"""Tests for the Figma client service."""

import asyncio
import json

import httpx
import pytest

from figma_probe.services.figma_client import FigmaAPIError, FigmaClient


class TestFigmaClient:
    """Test cases for FigmaClient."""

    def setup_method(self):
        """Setup test fixtures."""
        self.client = FigmaClient(access_token="test_token")

    def test_extract_file_id_from_url(self):
        """Test extracting file ID from Figma URL."""
        url = "https://www.figma.com/file/ABC123xyz/My-Design-File"
        file_id = self.client.extract_file_id(url)
        assert file_id == "ABC123xyz"

    def test_extract_file_id_from_design_url(self):
        """Test extracting file ID from Figma design URL."""
        url = "https://www.figma.com/design/XYZ789abc/Another-Design"
        file_id = self.client.extract_file_id(url)
        assert file_id == "XYZ789abc"

    def test_extract_file_id_passthrough(self):
        """Test that raw file ID is returned as-is."""
        file_id = "ABC123xyz"
        result = self.client.extract_file_id(file_id)
        assert result == file_id

    def test_auth_header(self):
        assert self.client.headers == {"X-Figma-Token": "test_token"}

    def test_missing_token_raises(self, monkeypatch):
        """Test that a client cannot be built without a token."""
        from figma_probe.config import get_settings

        monkeypatch.setenv("FIGMA_ACCESS_TOKEN", "")
        get_settings.cache_clear()
        try:
            with pytest.raises(ValueError):
                FigmaClient()
        finally:
            get_settings.cache_clear()


class TestFigmaClientRequests:
    """Test cases for HTTP behaviour against a mock transport."""

    def test_get_file(self, make_client, file_response):
        client = make_client({"/v1/files/ABC123": [httpx.Response(200, json=file_response)]})

        data = asyncio.run(client.get_file("https://www.figma.com/design/ABC123/Name"))

        assert data["name"] == "Design System"
        request = client.handler.requests[0]
        assert request.method == "GET"
        assert request.headers["X-Figma-Token"] == "test_token"

    def test_get_file_nodes_joins_ids(self, make_client):
        client = make_client({"/v1/files/ABC123/nodes": [httpx.Response(200, json={"nodes": {}})]})

        asyncio.run(client.get_file_nodes("ABC123", ["1:2", "3:4"]))

        request = client.handler.requests[0]
        assert request.url.params["ids"] == "1:2,3:4"

    def test_endpoint_paths(self, make_client):
        client = make_client(
            {
                "/v1/files/ABC123/comments": [httpx.Response(200, json={"comments": []})],
                "/v1/files/ABC123/variables/local": [httpx.Response(200, json={"meta": {}})],
            }
        )

        assert asyncio.run(client.get_comments("ABC123")) == {"comments": []}
        assert asyncio.run(client.get_local_variables("ABC123")) == {"meta": {}}

    def test_post_comment_body(self, make_client):
        client = make_client({"/v1/files/ABC123/comments": [httpx.Response(200, json={"id": "c1"})]})

        result = asyncio.run(
            client.post_comment("ABC123", "Looks good", client_meta={"x": 1, "y": 2})
        )

        assert result == {"id": "c1"}
        request = client.handler.requests[0]
        assert request.method == "POST"
        assert json.loads(request.content) == {"message": "Looks good", "client_meta": {"x": 1, "y": 2}}

    def test_client_error_is_not_retried(self, make_client):
        client = make_client({"/v1/files/ABC123": [httpx.Response(403, json={"err": "Invalid token"})]})

        with pytest.raises(FigmaAPIError) as exc_info:
            asyncio.run(client.get_file("ABC123"))

        assert exc_info.value.status_code == 403
        assert exc_info.value.reason == "Forbidden"
        assert "403" in str(exc_info.value)
        assert "Invalid token" in exc_info.value.body
        assert len(client.handler.requests) == 1

    def test_server_error_is_retried(self, make_client, file_response):
        client = make_client(
            {
                "/v1/files/ABC123": [
                    httpx.Response(502),
                    httpx.Response(429),
                    httpx.Response(200, json=file_response),
                ]
            }
        )

        data = asyncio.run(client.get_file("ABC123"))

        assert data["version"] == "123456"
        assert len(client.handler.requests) == 3

    def test_retries_exhausted(self, make_client):
        client = make_client({"/v1/files/ABC123": [httpx.Response(500)]}, max_retries=2)

        with pytest.raises(FigmaAPIError) as exc_info:
            asyncio.run(client.get_file("ABC123"))

        assert exc_info.value.status_code == 500
        assert len(client.handler.requests) == 2

    def test_transport_error_wrapped(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = FigmaClient(
            access_token="test_token",
            max_retries=1,
            transport=httpx.MockTransport(handler),
        )

        with pytest.raises(FigmaAPIError) as exc_info:
            asyncio.run(client.get_file("ABC123"))

        assert exc_info.value.status_code is None
        assert exc_info.value.reason is None
        assert exc_info.value.is_retryable
