"""
Image Provider Base - Abstract base class for asynchronous image providers.
"""
from abc import ABC, abstractmethod
from typing import Optional

from .models import PredictionJob, PredictionStatus


class GenerationError(Exception):
    """Base error for the primary generation path."""


class ProviderRequestError(GenerationError):
    """Submission or status request failed (transport or non-2xx)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class PredictionFailedError(GenerationError):
    """Job reached a failed or canceled terminal state."""

    def __init__(self, job_id: str, status: PredictionStatus, detail: Optional[str] = None):
        message = f"Prediction {job_id} {status.value}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
        self.job_id = job_id
        self.status = status


class PredictionTimeoutError(GenerationError):
    """Job did not reach a terminal state within the poll budget."""

    def __init__(self, job_id: str, attempts: int):
        super().__init__(f"Prediction {job_id} timed out after {attempts} polls")
        self.job_id = job_id
        self.attempts = attempts


class EmptyOutputError(GenerationError):
    """Job succeeded but produced no images."""


class ImageProvider(ABC):
    """
    Abstract base class for job-based image providers.

    Providers submit a job and expose its status; waiting is the
    poller's concern.
    """

    name: str = "provider"

    @abstractmethod
    async def submit(
        self,
        prompt: str,
        negative_prompt: str,
        count: int,
        dimensions: str,
    ) -> str:
        """
        Submit a generation job.

        Returns:
            Provider-assigned job id
        """
        pass

    @abstractmethod
    async def status(self, job_id: str) -> PredictionJob:
        """Fetch the current state of a job."""
        pass

    async def aclose(self) -> None:
        """Release network resources."""
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name})"
