from __future__ import annotations

from typing import Optional

class AppChainsError(Exception):
    """Base class for every error raised by the client."""

class ConfigurationError(AppChainsError):
    pass

class TransportError(AppChainsError):
    """Connection could not be opened, request not sent or response not read."""

    def __init__(self, message: str, *, stage: str = "request", url: Optional[str] = None) -> None:
        super().__init__(message)
        self.stage = stage
        self.url = url

class UnsupportedMethodError(AppChainsError, ValueError):
    def __init__(self, method: str) -> None:
        super().__init__(f"HTTP method {method} is not supported")
        self.method = method

class UnexpectedResponseError(AppChainsError):
    def __init__(self, status_code: int, body: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"AppChains returned HTTP {status_code}: {body[:200]}")
        self.status_code = status_code
        self.body = body

class JobSubmissionError(UnexpectedResponseError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(
            status_code,
            body,
            f"AppChains returned error HTTP code {status_code} with message {body[:200]}",
        )

class InvalidJobIdError(AppChainsError):
    def __init__(self, body: str) -> None:
        super().__init__("AppChains returned invalid job identifier")
        self.body = body

class PollingError(AppChainsError):
    def __init__(self, job_id: int, cause: BaseException) -> None:
        super().__init__(f"Error processing job {job_id}: {cause}")
        self.job_id = job_id
        self.cause = cause

class PollTimeoutError(AppChainsError):
    def __init__(self, job_id: int, attempts: int, elapsed: float) -> None:
        super().__init__(
            f"Job {job_id} did not reach a terminal state after {attempts} attempts ({elapsed:.1f}s)"
        )
        self.job_id = job_id
        self.attempts = attempts
        self.elapsed = elapsed
