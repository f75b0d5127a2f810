from __future__ import annotations
from dataclasses import dataclass
from typing import Mapping
from urllib.parse import urlencode

@dataclass(frozen=True)
class AppChainsUrls:
    hostname: str
    scheme: str = "https"
    port: int = 443
    version: str = "v1"

    def base(self, context: str) -> str:
        return f"{self.scheme}://{self.hostname}:{self.port}/{self.version}/{context}"

    def job_submission(self, remote_method_name: str) -> str:
        return self.base(remote_method_name)

    def job_results(self, job_id: int) -> str:
        return self.base(f"GetAppResults?idJob={job_id}")

    def report_file(self, file_id: int) -> str:
        return self.base(f"GetReportFile?id={file_id}")

def query_string(parameters: Mapping[str, object]) -> str:
    return urlencode({k: str(v) for k, v in parameters.items()})

def beacon_url(method_name: str, query: str, *, hostname: str = "beacon.sequencing.com",
               scheme: str = "https", port: int = 443) -> str:
    return f"{scheme}://{hostname}:{port}/{method_name}/?{query}"
