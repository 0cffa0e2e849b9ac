"""
Write path for user-submitted mosques.

Submissions never touch resolved nearby results; they are queued as
`pending` for verification.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from app.config import Settings
from app.database import get_postgrest

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Terima kasih! Data masjid telah dikirim dan akan diverifikasi terlebih dahulu."
FAILURE_MESSAGE = "Terjadi kesalahan. Silakan coba lagi."


class SubmissionError(RuntimeError):
    """The sink could not store a submission."""


@dataclass
class SubmissionResult:
    success: bool
    message: str


class SubmissionSink(ABC):
    @abstractmethod
    async def submit(self, payload: dict) -> None:
        """Store the payload or raise SubmissionError."""


class LoggingSubmissionSink(SubmissionSink):
    """Stub sink: logs the payload after a simulated network delay."""

    def __init__(self, delay_seconds: float = 2.0):
        self.delay_seconds = delay_seconds

    async def submit(self, payload: dict) -> None:
        logger.info("Mosque submission received: %s", payload)
        await asyncio.sleep(self.delay_seconds)


class PostgrestSubmissionSink(SubmissionSink):
    """Inserts into `mosque_submissions` through the Supabase REST API."""

    table = "mosque_submissions"

    async def submit(self, payload: dict) -> None:
        client = get_postgrest()
        try:
            await client.from_(self.table).insert({**payload, "status": "pending"}).execute()
        except Exception as exc:
            raise SubmissionError(f"Insert into {self.table} failed: {exc}") from exc


def get_submission_sink(settings: Settings) -> SubmissionSink:
    """Supabase when configured, otherwise the logging stub."""
    if settings.SUPABASE_URL and settings.SUPABASE_SERVICE_KEY:
        return PostgrestSubmissionSink()
    return LoggingSubmissionSink(delay_seconds=settings.SUBMISSION_DELAY_SECONDS)


async def submit_mosque(payload: dict, sink: SubmissionSink) -> SubmissionResult:
    """Send a validated submission to the sink; failures are logged, not raised."""
    try:
        await sink.submit(payload)
    except asyncio.CancelledError:
        raise
    except Exception:
        logger.exception("Submission for %r failed", payload.get("name"))
        return SubmissionResult(success=False, message=FAILURE_MESSAGE)

    logger.info("Submission for %r accepted", payload.get("name"))
    return SubmissionResult(success=True, message=SUCCESS_MESSAGE)
