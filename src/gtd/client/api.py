"""Typed async binding for the task API.

Every method returns parsed domain values or raises a ClientError subclass:
ResponseError for non-2xx answers, TransportError for network faults and
bodies that cannot be decoded.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from gtd.client.errors import ResponseError, TransportError
from gtd.tasks.types import Task, TaskPatch

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:3000"
DEFAULT_TIMEOUT_SECONDS = 10.0


class TaskApi:
    """HTTP client for the /task endpoints."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float | None = DEFAULT_TIMEOUT_SECONDS,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """Create the binding.

        Args:
            base_url: Server root, e.g. http://127.0.0.1:3000.
            timeout: Per-request timeout in seconds (None disables it).
            client: Pre-configured client to use instead of creating one.
                The caller keeps ownership and must close it.
        """
        if client is None:
            self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout)
            self._owns_client = True
        else:
            self._client = client
            self._owns_client = False

    async def __aenter__(self) -> TaskApi:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def create_task(self, title: str) -> Task:
        data = await self._request("POST", "/task", json={"title": title})
        return _parse_task(data)

    async def list_tasks(self) -> list[Task]:
        data = await self._request("GET", "/task")
        if not isinstance(data, list):
            raise TransportError(f"expected a task list, got {type(data).__name__}")
        return [_parse_task(item) for item in data]

    async def get_task(self, task_id: int) -> Task:
        data = await self._request("GET", f"/task/{task_id}")
        return _parse_task(data)

    async def update_task(self, task_id: int, patch: TaskPatch) -> Task:
        data = await self._request("PUT", f"/task/{task_id}", json=patch.to_dict())
        return _parse_task(data)

    async def delete_task(self, task_id: int) -> Task:
        data = await self._request("DELETE", f"/task/{task_id}")
        return _parse_task(data)

    async def delete_all_tasks(self) -> int:
        data = await self._request("DELETE", "/task")
        try:
            return int(data["count"])
        except (KeyError, TypeError, ValueError) as e:
            raise TransportError(f"malformed delete response: {data!r}") from e

    async def _request(
        self, method: str, path: str, json: dict[str, Any] | None = None
    ) -> Any:
        logger.debug("api_request method=%s path=%s", method, path)
        try:
            response = await self._client.request(method, path, json=json)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            raise ResponseError(response.status_code, _error_detail(response))

        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"{method} {path} returned invalid JSON") from e


def _parse_task(data: Any) -> Task:
    if not isinstance(data, dict):
        raise TransportError(f"expected a task object, got {type(data).__name__}")
    try:
        return Task.from_dict(data)
    except ValueError as e:
        raise TransportError(str(e)) from e


def _error_detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)
