from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union

@dataclass(frozen=True)
class Job:
    job_id: int

@dataclass(frozen=True)
class HttpResponse:
    status_code: int
    body: str

@dataclass
class RawJobResult:
    job_id: int
    completed: bool
    succeeded: bool
    status: str                  # server label, e.g. Processing|Completed|Failed
    source: Dict[str, Any] = field(default_factory=dict)
    result_props: List[Any] = field(default_factory=list)

class ResultType(str, Enum):
    TEXT = "text"
    FILE = "file"

@dataclass(frozen=True)
class TextResultValue:
    data: str

    @property
    def type(self) -> ResultType:
        return ResultType.TEXT

@dataclass(frozen=True)
class FileResultValue:
    name: str        # report_<jobId>.<extension>
    extension: str   # lowercased result type, e.g. 'pdf'
    url: str

    @property
    def type(self) -> ResultType:
        return ResultType.FILE

ResultValue = Union[TextResultValue, FileResultValue]

@dataclass(frozen=True)
class Result:
    name: str
    value: ResultValue

@dataclass(frozen=True)
class Report:
    succeeded: bool
    results: Tuple[Result, ...] = ()

    def get(self, name: str) -> Optional[ResultValue]:
        for r in self.results:
            if r.name == name:
                return r.value
        return None
