"""Figma API client for fetching files, nodes, comments and variables."""

import re
from typing import Optional, List, Dict, Any

import httpx
from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from figma_probe.config import get_settings
from figma_probe.logger import get_logger

logger = get_logger(__name__)


class FigmaAPIError(Exception):
    """Raised when a Figma API call does not succeed."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        reason: Optional[str] = None,
        url: Optional[str] = None,
        body: str = "",
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.url = url
        self.body = body

    @property
    def is_retryable(self) -> bool:
        # No response at all, 429 or 5xx
        return self.status_code is None or self.status_code == 429 or self.status_code >= 500


def _is_retryable(exc: BaseException) -> bool:
    return isinstance(exc, FigmaAPIError) and exc.is_retryable


class FigmaClient:
    """Client for interacting with the Figma API."""

    def __init__(
        self,
        access_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        settings = get_settings()
        self.access_token = access_token or settings.figma_access_token
        if not self.access_token:
            raise ValueError(
                "Figma access token not found. Set FIGMA_ACCESS_TOKEN in your .env file "
                "or environment variables."
            )
        self.base_url = (base_url or settings.figma_api_base_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout
        self.max_retries = max_retries if max_retries is not None else settings.max_retries
        self.headers = {"X-Figma-Token": self.access_token}
        self.transport = transport
        self.retry_wait = wait_exponential(multiplier=1, min=4, max=10)

    @staticmethod
    def extract_file_id(file_id_or_url: str) -> str:
        """Extract file ID from Figma URL or return as-is if already an ID."""
        url_pattern = r"figma\.com/(?:file|design)/([a-zA-Z0-9]+)"
        match = re.search(url_pattern, file_id_or_url)
        if match:
            return match.group(1)
        return file_id_or_url

    async def _send(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        logger.debug("%s %s params=%s", method, url, params)
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.request(
                    method,
                    url,
                    headers=self.headers,
                    params=params,
                    json=json_data,
                )
            except httpx.TransportError as e:
                logger.warning("Request to %s failed: %s", url, e)
                raise FigmaAPIError(f"Figma API request failed: {e}", url=url) from e

        if response.is_error:
            logger.warning("Figma API returned %s for %s", response.status_code, url)
            raise FigmaAPIError(
                f"Figma API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                reason=response.reason_phrase,
                url=url,
                body=response.text,
            )
        return response.json()

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        json_data: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Make a request, retrying transport errors, 429 and 5xx responses.

        Raises:
            FigmaAPIError: when the call does not succeed after all attempts
        """
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_retries),
            wait=self.retry_wait,
            retry=retry_if_exception(_is_retryable),
            reraise=True,
        ):
            with attempt:
                return await self._send(method, path, params=params, json_data=json_data)

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        """GET request to Figma API."""
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json_data: Dict[str, Any]) -> Any:
        """POST request to Figma API."""
        return await self.request("POST", path, json_data=json_data)

    async def get_file(self, file_id: str) -> Dict[str, Any]:
        """Fetch Figma file data."""
        file_id = self.extract_file_id(file_id)
        return await self.get(f"files/{file_id}")

    async def get_file_nodes(self, file_id: str, node_ids: List[str]) -> Dict[str, Any]:
        """Fetch specific nodes from a Figma file."""
        file_id = self.extract_file_id(file_id)
        return await self.get(f"files/{file_id}/nodes", params={"ids": ",".join(node_ids)})

    async def get_comments(self, file_id: str) -> Dict[str, Any]:
        """Fetch comments in a Figma file."""
        file_id = self.extract_file_id(file_id)
        return await self.get(f"files/{file_id}/comments")

    async def post_comment(
        self,
        file_id: str,
        message: str,
        client_meta: Optional[Dict[str, Any]] = None,
        comment_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Add a comment to a Figma file.

        Args:
            file_id: The file key or URL
            message: Comment text
            client_meta: Position metadata (x, y, node_id, node_offset)
            comment_id: Parent comment ID for replies

        Returns:
            Created comment data
        """
        file_id = self.extract_file_id(file_id)
        data: Dict[str, Any] = {"message": message}
        if client_meta:
            data["client_meta"] = client_meta
        if comment_id:
            data["comment_id"] = comment_id
        return await self.post(f"files/{file_id}/comments", json_data=data)

    async def get_local_variables(self, file_id: str) -> Dict[str, Any]:
        """Fetch local variables and variable collections of a Figma file."""
        file_id = self.extract_file_id(file_id)
        return await self.get(f"files/{file_id}/variables/local")
