"""
Replicate Client - primary image provider.

Uses the Replicate predictions REST API.
API docs: https://replicate.com/docs/reference/http
"""
from typing import Optional

import httpx
from loguru import logger

from .base import ImageProvider, ProviderRequestError
from .models import PredictionJob


class ReplicateClient(ImageProvider):
    """
    Replicate predictions client (Stable Diffusion XL by default).

    One AsyncClient is kept for the life of the provider; call aclose()
    when done.
    """

    name = "replicate"

    API_BASE = "https://api.replicate.com/v1"

    def __init__(
        self,
        api_token: str,
        model_version: str,
        api_base: Optional[str] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize Replicate client.

        Args:
            api_token: Replicate API token
            model_version: Model version hash to run
            api_base: API base URL
            timeout: Per-request timeout in seconds
            http_client: Pre-built client (tests inject a MockTransport here)
        """
        if not api_token:
            raise ValueError("API token required for Replicate")

        self.model_version = model_version
        self.api_base = (api_base or self.API_BASE).rstrip("/")
        self._client = http_client or httpx.AsyncClient(timeout=timeout)
        self._headers = {
            "Content-Type": "application/json",
            "Authorization": f"Token {api_token}",
        }

    async def submit(
        self,
        prompt: str,
        negative_prompt: str,
        count: int,
        dimensions: str,
    ) -> str:
        body = {
            "version": self.model_version,
            "input": {
                "prompt": prompt,
                "negative_prompt": negative_prompt,
                "num_outputs": count,
                "image_dimensions": dimensions,
            },
        }
        logger.debug(f"Replicate submit: version={self.model_version[:12]}, outputs={count}")

        payload = await self._request("POST", "/predictions", json=body)
        job_id = payload.get("id")
        if not job_id:
            raise ProviderRequestError("Replicate response has no prediction id")

        logger.info(f"Replicate prediction submitted: {job_id}")
        return str(job_id)

    async def status(self, job_id: str) -> PredictionJob:
        payload = await self._request("GET", f"/predictions/{job_id}")
        return PredictionJob.from_payload({"id": job_id, **payload})

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, json: Optional[dict] = None) -> dict:
        """Send a request and return the decoded JSON body."""
        try:
            response = await self._client.request(
                method,
                f"{self.api_base}{path}",
                headers=self._headers,
                json=json,
            )
        except httpx.HTTPError as e:
            raise ProviderRequestError(f"Replicate request failed: {e}") from e

        if not response.is_success:
            raise ProviderRequestError(
                f"Replicate request failed {response.status_code}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise ProviderRequestError(f"Replicate returned invalid JSON: {e}") from e
        if not isinstance(payload, dict):
            raise ProviderRequestError("Replicate returned an unexpected payload")
        return payload
