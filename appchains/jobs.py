"""Job submission and polling against the AppChains API."""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Callable, Dict, Optional

from pydantic import ValidationError
from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_result,
    stop_after_attempt,
    stop_after_delay,
    stop_never,
    wait_fixed,
)

from .errors import (
    InvalidJobIdError,
    JobSubmissionError,
    PollingError,
    PollTimeoutError,
    UnexpectedResponseError,
)
from .models import Job, RawJobResult
from .schemas import AppResults, JobSubmitted, ReportRequest
from .settings import settings
from .transport import Transport
from .urls import AppChainsUrls

logger = logging.getLogger(__name__)

TERMINAL_STATUSES = frozenset({"completed", "failed"})

def is_terminal(status_label: str) -> bool:
    return status_label.lower() in TERMINAL_STATUSES

class JobSubmitter:
    def __init__(self, transport: Transport, urls: AppChainsUrls) -> None:
        self.transport = transport
        self.urls = urls

    def submit(self, remote_method_name: str, request_body: str) -> Job:
        url = self.urls.job_submission(remote_method_name)
        response = self.transport.request("POST", url, request_body)

        if response.status_code != 200:
            logger.error(
                "Job submission rejected",
                extra={"remote_method": remote_method_name, "status": response.status_code},
            )
            raise JobSubmissionError(response.status_code, response.body)

        try:
            parsed = JobSubmitted.model_validate_json(response.body)
        except ValidationError as e:
            raise InvalidJobIdError(response.body) from e

        job = Job(job_id=parsed.job_id)
        logger.info("Job submitted", extra={"job_id": job.job_id, "remote_method": remote_method_name})
        return job

    def submit_application(self, remote_method_name: str, application_method_name: str, datasource_id: str) -> Job:
        body = ReportRequest.for_datasource(application_method_name, datasource_id).to_json()
        return self.submit(remote_method_name, body)

def _not_completed(result: RawJobResult) -> bool:
    return not result.completed

def _log_pending(retry_state: RetryCallState) -> None:
    result: RawJobResult = retry_state.outcome.result()
    logger.debug(
        "Job not finished yet",
        extra={"job_id": result.job_id, "status": result.status, "attempt": retry_state.attempt_number},
    )

class JobPoller:
    def __init__(
        self,
        transport: Transport,
        urls: AppChainsUrls,
        *,
        retry_interval: Optional[float] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        self.transport = transport
        self.urls = urls
        self.retry_interval = settings.retry_interval_seconds if retry_interval is None else retry_interval
        self._sleep = sleep or time.sleep

    def fetch(self, job: Job) -> RawJobResult:
        response = self.transport.request("GET", self.urls.job_results(job.job_id))
        if response.status_code != 200:
            raise UnexpectedResponseError(response.status_code, response.body)

        source: Dict[str, Any] = json.loads(response.body)
        if not isinstance(source, dict):
            raise ValueError(f"Unexpected job results payload: {type(source).__name__}")
        decoded = AppResults.model_validate(source)

        label = decoded.status.status
        return RawJobResult(
            job_id=job.job_id,
            completed=is_terminal(label),
            succeeded=bool(decoded.status.completed_successfully),
            status=label,
            source=source,
            result_props=list(decoded.result_props),
        )

    def poll(self, job: Job, *, max_wait: Optional[float] = None, max_attempts: Optional[int] = None) -> RawJobResult:
        # no cap unless asked for; hitting one raises PollTimeoutError
        stop = stop_never
        if max_wait is not None:
            stop = stop_after_delay(max_wait)
        if max_attempts is not None:
            stop = stop_after_attempt(max_attempts) if stop is stop_never else stop | stop_after_attempt(max_attempts)

        retrying = Retrying(
            retry=retry_if_result(_not_completed),
            wait=wait_fixed(self.retry_interval),
            stop=stop,
            sleep=self._sleep,
            before_sleep=_log_pending,
        )

        started = time.monotonic()
        try:
            result = retrying(self.fetch, job)
        except RetryError as e:
            attempts = e.last_attempt.attempt_number
            logger.warning("Job polling gave up", extra={"job_id": job.job_id, "attempts": attempts})
            raise PollTimeoutError(job.job_id, attempts, time.monotonic() - started) from e
        except Exception as e:
            logger.error("Job polling failed", extra={"job_id": job.job_id, "error": str(e)})
            raise PollingError(job.job_id, e) from e

        logger.info(
            "Job finished",
            extra={"job_id": job.job_id, "status": result.status, "succeeded": result.succeeded},
        )
        return result
