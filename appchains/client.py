from __future__ import annotations

from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

import httpx

from .beacon import BeaconClient
from .errors import ConfigurationError
from .jobs import JobPoller, JobSubmitter
from .models import FileResultValue, Job, RawJobResult, Report
from .report import ReportTransformer
from .settings import Settings, settings
from .transport import Transport
from .urls import AppChainsUrls

class AppChains:
    """Entry point: submit a report job, wait for it and hand back a typed Report.

    Without a token only the beacon lookups are usable.
    """

    def __init__(
        self,
        token: Optional[str] = None,
        hostname: Optional[str] = None,
        *,
        config: Optional[Settings] = None,
        http_client: Optional[httpx.Client] = None,
        beacon_http_client: Optional[httpx.Client] = None,
        sleep: Optional[Callable[[float], None]] = None,
    ) -> None:
        cfg = config or settings
        self.config = cfg
        self.token = token if token is not None else cfg.token
        self.hostname = hostname or cfg.hostname
        if not self.hostname:
            raise ConfigurationError("AppChains hostname is required")

        self.urls = AppChainsUrls(self.hostname, scheme=cfg.scheme, port=cfg.port, version=cfg.protocol_version)
        self.transport = Transport(self.token, client=http_client, timeout=cfg.request_timeout_seconds)
        self.beacon = BeaconClient(
            Transport(client=beacon_http_client or http_client, timeout=cfg.request_timeout_seconds),
            hostname=cfg.beacon_hostname,
            scheme=cfg.scheme,
            port=cfg.port,
        )
        self.submitter = JobSubmitter(self.transport, self.urls)
        self.poller = JobPoller(self.transport, self.urls, retry_interval=cfg.retry_interval_seconds, sleep=sleep)
        self.transformer = ReportTransformer(self.urls, cfg.file_result_types)

    def close(self) -> None:
        self.transport.close()
        self.beacon.close()

    def __enter__(self) -> "AppChains":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # ----------------------------- reports ----------------------------------

    def get_report(self, remote_method_name: str, application_method_name: str, datasource_id: str,
                   *, max_wait: Optional[float] = None, max_attempts: Optional[int] = None) -> Report:
        job = self._submitter().submit_application(remote_method_name, application_method_name, datasource_id)
        return self.transformer.transform(self._wait(job, max_wait, max_attempts))

    def get_report_with_body(self, remote_method_name: str, request_body: str,
                             *, max_wait: Optional[float] = None, max_attempts: Optional[int] = None) -> Report:
        job = self._submitter().submit(remote_method_name, request_body)
        return self.transformer.transform(self._wait(job, max_wait, max_attempts))

    def get_raw_report(self, remote_method_name: str, application_method_name: str, datasource_id: str,
                       *, max_wait: Optional[float] = None, max_attempts: Optional[int] = None) -> Dict[str, Any]:
        job = self._submitter().submit_application(remote_method_name, application_method_name, datasource_id)
        return self._wait(job, max_wait, max_attempts).source

    def get_raw_report_with_body(self, remote_method_name: str, request_body: str,
                                 *, max_wait: Optional[float] = None, max_attempts: Optional[int] = None) -> Dict[str, Any]:
        job = self._submitter().submit(remote_method_name, request_body)
        return self._wait(job, max_wait, max_attempts).source

    def _submitter(self) -> JobSubmitter:
        if not self.token:
            raise ConfigurationError("A token is required for report operations")
        return self.submitter

    def _wait(self, job: Job, max_wait: Optional[float], max_attempts: Optional[int]) -> RawJobResult:
        return self.poller.poll(
            job,
            max_wait=max_wait if max_wait is not None else self.config.poll_max_wait_seconds,
            max_attempts=max_attempts if max_attempts is not None else self.config.poll_max_attempts,
        )

    # ----------------------------- files ------------------------------------

    def fetch_file(self, value: FileResultValue) -> bytes:
        return self.transport.download(value.url)

    def save_as(self, value: FileResultValue, path: Union[str, Path]) -> Path:
        return self.transport.download_to(value.url, path)

    def save_to(self, value: FileResultValue, directory: Union[str, Path]) -> Path:
        return self.transport.download_to(value.url, Path(directory) / value.name)

    # ----------------------------- beacons ----------------------------------

    def get_beacon(self, method_name: str, parameters: Union[Mapping[str, object], str]) -> str:
        return self.beacon.lookup(method_name, parameters)

    def get_sequencing_beacon(self, chrom: int, pos: int, allele: str) -> str:
        return self.beacon.sequencing_beacon(chrom, pos, allele)

    def get_public_beacon(self, chrom: int, pos: int, allele: str) -> str:
        return self.beacon.public_beacon(chrom, pos, allele)
