"""Shared fixtures for the test suite."""

from typing import Callable, Dict, List

import httpx
import pytest
from tenacity import wait_none

from figma_probe.services.figma_client import FigmaClient


@pytest.fixture
def document() -> Dict:
    """A small document tree: page with a frame holding a button."""
    return {
        "id": "0:0",
        "name": "Document",
        "type": "DOCUMENT",
        "children": [
            {
                "id": "0:1",
                "name": "Page 1",
                "type": "CANVAS",
                "children": [
                    {
                        "id": "1:2",
                        "name": "Login Screen",
                        "type": "FRAME",
                        "children": [
                            {
                                "id": "1:3",
                                "name": "Title",
                                "type": "TEXT",
                                "characters": "Welcome",
                            },
                            {
                                "id": "1:4",
                                "name": "Submit Button",
                                "type": "INSTANCE",
                                "fills": [{"type": "SOLID", "color": {"r": 1, "g": 0, "b": 0, "a": 1}}],
                                "boundVariables": {
                                    "fills": [{"type": "VARIABLE_ALIAS", "id": "VariableID:1:10"}]
                                },
                                "children": [],
                            },
                        ],
                    }
                ],
            },
            {"id": "0:2", "name": "Page 2", "type": "CANVAS", "children": []},
        ],
    }


@pytest.fixture
def file_response(document) -> Dict:
    return {
        "name": "Design System",
        "lastModified": "2024-05-01T10:00:00Z",
        "version": "123456",
        "document": document,
        "styles": {"S:1": {"name": "Primary"}, "S:2": {"name": "Secondary"}},
    }


class RecordingHandler:
    """httpx mock handler that replays canned responses by path."""

    def __init__(self, routes: Dict[str, List[httpx.Response]]):
        self.routes = {path: list(responses) for path, responses in routes.items()}
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        responses = self.routes.get(request.url.path)
        if not responses:
            return httpx.Response(404, json={"status": 404, "err": "Not found"})
        response = responses.pop(0) if len(responses) > 1 else responses[0]
        # Fresh copy so a replayed response is never consumed twice
        return httpx.Response(response.status_code, headers=response.headers, content=response.content)


@pytest.fixture
def make_client() -> Callable[..., FigmaClient]:
    """Build a FigmaClient whose HTTP calls hit canned responses."""

    def factory(routes: Dict[str, List[httpx.Response]], max_retries: int = 3) -> FigmaClient:
        handler = RecordingHandler(routes)
        client = FigmaClient(
            access_token="test_token",
            max_retries=max_retries,
            transport=httpx.MockTransport(handler),
        )
        client.retry_wait = wait_none()
        client.handler = handler
        return client

    return factory
