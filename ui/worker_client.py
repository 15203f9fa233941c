"""Client for the generation worker.

The worker accepts `{"messages": [{"role", "content"}, ...]}` and answers
either with an OpenAI-style body (`choices[0].message.content`) or with a
plain `{"result": "..."}`. One attempt per call, no retries.
"""

from __future__ import annotations

import asyncio
from typing import Any, Callable

import requests
import structlog

from schemas import ChatMessage, WorkerRequest

logger = structlog.get_logger()


class GenerationError(Exception):
    kind = "generation_error"


class GenerationTimeout(GenerationError):
    kind = "timeout"


class RemoteError(GenerationError):
    kind = "remote_error"

    def __init__(self, status: int | None, message: str = "") -> None:
        self.status = status
        super().__init__(message or f"Worker error: {status}")


class MalformedResponse(GenerationError):
    kind = "malformed_response"


def extract_content(data: Any) -> str | None:
    if not isinstance(data, dict):
        return None
    content = None
    choices = data.get("choices")
    if isinstance(choices, list) and choices:
        first = choices[0]
        if isinstance(first, dict) and isinstance(first.get("message"), dict):
            content = first["message"].get("content")
    if content is None:
        content = data.get("result")
    if not isinstance(content, str) or not content:
        return None
    return content


class WorkerClient:
    def __init__(
        self,
        url: str,
        timeout_s: float = 30.0,
        post: Callable[..., requests.Response] | None = None,
    ) -> None:
        self.url = url
        self.timeout_s = float(timeout_s)
        self._post = post

    def _post_sync(self, body: dict) -> requests.Response:
        post = self._post or requests.post
        return post(
            self.url,
            json=body,
            headers={"Content-Type": "application/json"},
            timeout=self.timeout_s,
        )

    async def send(self, messages: list[ChatMessage]) -> str:
        body = WorkerRequest(messages=list(messages)).model_dump()
        try:
            return await asyncio.wait_for(self._send(body), timeout=self.timeout_s)
        except asyncio.TimeoutError as exc:
            err = GenerationTimeout(f"Worker did not answer within {self.timeout_s:g}s")
            logger.error("worker_call_failed", kind=err.kind, url=self.url)
            raise err from exc
        except GenerationError as exc:
            logger.error("worker_call_failed", kind=exc.kind, url=self.url, error=str(exc))
            raise

    async def _send(self, body: dict) -> str:
        try:
            resp = await asyncio.to_thread(self._post_sync, body)
        except requests.Timeout as exc:
            raise GenerationTimeout(str(exc)) from exc
        except requests.RequestException as exc:
            raise RemoteError(None, f"Transport error: {type(exc).__name__}") from exc

        if not resp.ok:
            raise RemoteError(resp.status_code)

        try:
            data = resp.json()
        except ValueError as exc:
            raise MalformedResponse("Worker returned a non-JSON body") from exc

        content = extract_content(data)
        if content is None:
            raise MalformedResponse("Unexpected response from worker")
        return content
