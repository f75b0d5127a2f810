from .client import AppChains
from .beacon import BeaconClient
from .errors import (
    AppChainsError,
    ConfigurationError,
    InvalidJobIdError,
    JobSubmissionError,
    PollingError,
    PollTimeoutError,
    TransportError,
    UnexpectedResponseError,
    UnsupportedMethodError,
)
from .jobs import JobPoller, JobSubmitter
from .models import (
    FileResultValue,
    HttpResponse,
    Job,
    RawJobResult,
    Report,
    Result,
    ResultType,
    ResultValue,
    TextResultValue,
)
from .report import ReportTransformer
from .settings import Settings
from .transport import Transport
from .urls import AppChainsUrls

__all__ = [
    "AppChains",
    "AppChainsError",
    "AppChainsUrls",
    "BeaconClient",
    "ConfigurationError",
    "FileResultValue",
    "HttpResponse",
    "InvalidJobIdError",
    "Job",
    "JobPoller",
    "JobSubmissionError",
    "JobSubmitter",
    "PollingError",
    "PollTimeoutError",
    "RawJobResult",
    "Report",
    "ReportTransformer",
    "Result",
    "ResultType",
    "ResultValue",
    "Settings",
    "TextResultValue",
    "Transport",
    "TransportError",
    "UnexpectedResponseError",
    "UnsupportedMethodError",
]
