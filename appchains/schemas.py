from __future__ import annotations
import re
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

_INTEGER = re.compile(r"[+-]?[0-9]+")

class ReportParameter(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., alias="Name")
    value: str = Field(..., alias="Value")

class ReportRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    app_code: str = Field(..., alias="AppCode")
    pars: List[ReportParameter] = Field(default_factory=list, alias="Pars")

    @classmethod
    def for_datasource(cls, application_method_name: str, datasource_id: str) -> "ReportRequest":
        return cls(
            app_code=application_method_name,
            pars=[ReportParameter(name="dataSourceId", value=datasource_id)],
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

class JobSubmitted(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    job_id: int = Field(..., alias="jobId")

    @field_validator("job_id", mode="before")
    @classmethod
    def _coerce_job_id(cls, v: Any) -> int:
        # server sends 17, 17.0 or "17"
        if isinstance(v, bool) or v is None:
            raise ValueError("jobId must be numeric")
        if isinstance(v, int):
            return v
        text = str(v).strip()
        try:
            if _INTEGER.fullmatch(text):
                return int(text)
            return int(float(text))
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"jobId is not numeric: {v!r}") from e

class JobStatusInfo(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    status: str = Field(..., alias="Status")
    completed_successfully: Optional[bool] = Field(None, alias="CompletedSuccesfully")

class AppResults(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    status: JobStatusInfo = Field(..., alias="Status")
    result_props: List[Any] = Field(default_factory=list, alias="ResultProps")

    @field_validator("result_props", mode="before")
    @classmethod
    def _missing_props_as_empty(cls, v: Any) -> Any:
        return [] if v is None else v
