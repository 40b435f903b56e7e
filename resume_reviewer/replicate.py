"""Minimal async client for the Replicate prediction API."""

import asyncio
import logging
from typing import Any, Dict, List, Optional, Protocol

import httpx

from .config import DEFAULT_BASE_URL, Settings
from .errors import ServiceFailure

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = {"succeeded", "failed", "canceled", "aborted"}


class InferenceClient(Protocol):
    async def complete(self, prompt: str) -> str: ...


class ReplicateClient:
    """Runs a prompt through a Replicate-hosted language model.

    ``model`` is either ``owner/name`` (latest deployment of an official
    model) or ``owner/name:version``.
    """

    def __init__(
        self,
        api_token: Optional[str],
        model: str,
        *,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 120.0,
        poll_interval: float = 1.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.api_token = api_token
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.poll_interval = poll_interval
        self._owns_client = http_client is None
        self._http = http_client or httpx.AsyncClient(timeout=timeout)

    @classmethod
    def from_settings(cls, settings: Settings) -> "ReplicateClient":
        return cls(
            settings.replicate_api_token,
            settings.replicate_model,
            base_url=settings.replicate_base_url,
            timeout=settings.replicate_timeout,
            poll_interval=settings.replicate_poll_interval,
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._http.aclose()

    # ------------------------------------------------------------------

    def _headers(self, *, wait: bool = False) -> Dict[str, str]:
        headers = {
            "Authorization": f"Bearer {self.api_token}",
            "Content-Type": "application/json",
        }
        if wait:
            headers["Prefer"] = "wait"
        return headers

    def _create_request(self, prompt: str) -> tuple:
        name, _, version = self.model.partition(":")
        if version:
            url = f"{self.base_url}/predictions"
            body = {"version": version, "input": {"prompt": prompt}}
        else:
            url = f"{self.base_url}/models/{name}/predictions"
            body = {"input": {"prompt": prompt}}
        return url, body

    async def _send(self, method: str, url: str, **kwargs: Any) -> Dict[str, Any]:
        try:
            response = await self._http.request(method, url, **kwargs)
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPStatusError as exc:
            # Surface the actual Replicate error message
            try:
                detail = exc.response.json()
                msg = detail.get("detail", str(exc)) if isinstance(detail, dict) else detail
            except ValueError:
                msg = exc.response.text or str(exc)
            raise ServiceFailure(
                f"Replicate API error ({exc.response.status_code}): {msg}"
            ) from exc
        except httpx.HTTPError as exc:
            raise ServiceFailure(f"Could not reach Replicate: {exc}") from exc
        except ValueError as exc:
            raise ServiceFailure(f"Unexpected response from Replicate: {exc}") from exc

        if not isinstance(body, dict):
            raise ServiceFailure(
                f"Unexpected response from Replicate: {type(body).__name__} body"
            )
        return body

    async def run(self, prompt: str) -> List[str]:
        """Create a prediction, wait for it to finish and return its output."""
        if not self.api_token:
            raise ServiceFailure("REPLICATE_API_TOKEN is not configured.")

        url, body = self._create_request(prompt)
        prediction = await self._send(
            "POST", url, json=body, headers=self._headers(wait=True)
        )

        while prediction.get("status") not in TERMINAL_STATUSES:
            poll_url = (prediction.get("urls") or {}).get("get")
            if not poll_url:
                raise ServiceFailure("Replicate prediction has no status URL")
            await asyncio.sleep(self.poll_interval)
            prediction = await self._send("GET", poll_url, headers=self._headers())

        status = prediction["status"]
        if status != "succeeded":
            raise ServiceFailure(
                f"Replicate prediction {prediction.get('id')} {status}: "
                f"{prediction.get('error')}"
            )

        logger.info(
            "Replicate prediction %s succeeded (%s)",
            prediction.get("id"),
            self.model,
        )
        return _as_fragments(prediction.get("output"))

    async def complete(self, prompt: str) -> str:
        return "".join(await self.run(prompt))


def _as_fragments(output: Any) -> List[str]:
    if output is None:
        return []
    if isinstance(output, str):
        return [output]
    if isinstance(output, list):
        return [str(fragment) for fragment in output if fragment is not None]
    raise ServiceFailure(f"Unexpected Replicate output type: {type(output).__name__}")
