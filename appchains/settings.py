from typing import Optional, Tuple

from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    token: Optional[str] = None
    hostname: str = "api.sequencing.com"

    scheme: str = "https"
    port: int = 443
    protocol_version: str = "v1"
    beacon_hostname: str = "beacon.sequencing.com"

    retry_interval_seconds: float = 1.0
    # no cap unless set: long-running jobs rely on the server reaching a terminal state
    poll_max_wait_seconds: Optional[float] = None
    poll_max_attempts: Optional[int] = None

    file_result_types: Tuple[str, ...] = ("pdf",)

    request_timeout_seconds: float = 60.0

    model_config = SettingsConfigDict(env_prefix="APPCHAINS_", env_file=".env", extra="ignore")

settings = Settings()
