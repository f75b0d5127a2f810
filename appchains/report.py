from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Iterable, List, Optional

from .models import FileResultValue, RawJobResult, Report, Result, TextResultValue
from .urls import AppChainsUrls

logger = logging.getLogger(__name__)

PLAINTEXT = "plaintext"

def _parse_file_id(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, float):
        return int(value) if value.is_integer() and value >= 0 else None
    text = str(value).strip()
    return int(text) if text.isascii() and text.isdigit() else None

class ReportTransformer:
    """Turns a terminal RawJobResult into a Report.

    Properties missing Type/Value/Name, of an unknown type, or pointing at an
    unparseable file id are dropped; nothing here raises for bad properties.
    """

    def __init__(self, urls: AppChainsUrls, file_types: Iterable[str] = ("pdf",)) -> None:
        self.urls = urls
        self.file_types = frozenset(t.lower() for t in file_types)

    def transform(self, raw: RawJobResult) -> Report:
        results: List[Result] = []

        for prop in raw.result_props:
            if not isinstance(prop, Mapping):
                continue
            kind, value, name = prop.get("Type"), prop.get("Value"), prop.get("Name")
            if kind is None or value is None or name is None:
                continue

            kind = str(kind).lower()
            if kind == PLAINTEXT:
                results.append(Result(str(name), TextResultValue(str(value))))
            elif kind in self.file_types:
                file_id = _parse_file_id(value)
                if file_id is None:
                    logger.debug("Skipping file result with bad id", extra={"job_id": raw.job_id, "value": value})
                    continue
                file_value = FileResultValue(
                    name=f"report_{raw.job_id}.{kind}",
                    extension=kind,
                    url=self.urls.report_file(file_id),
                )
                results.append(Result(str(name), file_value))

        return Report(succeeded=raw.succeeded, results=tuple(results))
