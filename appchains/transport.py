"""Authenticated HTTP transport for the AppChains API."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import httpx

from .errors import TransportError, UnexpectedResponseError, UnsupportedMethodError
from .models import HttpResponse
from .settings import settings

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset({"GET", "POST"})

def _stage_of(exc: Exception) -> str:
    if isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout, httpx.PoolTimeout, httpx.UnsupportedProtocol)):
        return "connect"
    if isinstance(exc, (httpx.WriteError, httpx.WriteTimeout, httpx.LocalProtocolError)):
        return "send"
    if isinstance(exc, (httpx.ReadError, httpx.ReadTimeout, httpx.RemoteProtocolError, httpx.DecodingError)):
        return "read"
    return "request"

class Transport:
    def __init__(
        self,
        token: Optional[str] = None,
        *,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self._token = token
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=timeout if timeout is not None else settings.request_timeout_seconds
        )

    @property
    def authenticated(self) -> bool:
        return bool(self._token)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "Transport":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    def request(self, method: str, url: str, body: Optional[str] = None) -> HttpResponse:
        verb = (method or "").upper()
        if verb not in SUPPORTED_METHODS:
            raise UnsupportedMethodError(method)

        headers = self._headers()
        content: Optional[bytes] = None
        if verb == "POST":
            content = (body or "").encode("utf-8")
            headers["Content-Type"] = "application/json"
            headers["Content-Length"] = str(len(content))

        try:
            request = self._client.build_request(verb, url, content=content, headers=headers)
            response = self._client.send(request, stream=True)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            stage = _stage_of(e)
            logger.warning("AppChains request failed", extra={"method": verb, "url": url, "stage": stage})
            raise TransportError(f"Unable to connect to AppChains server: {e}", stage=stage, url=url) from e

        try:
            response.read()
            logger.debug("AppChains response", extra={"method": verb, "url": url, "status": response.status_code})
            return HttpResponse(status_code=response.status_code, body=response.text)
        except httpx.HTTPError as e:
            raise TransportError(
                f"Unable to read response from the AppChains server: {e}", stage="read", url=url
            ) from e
        finally:
            response.close()

    def download(self, url: str) -> bytes:
        chunks = []
        try:
            with self._client.stream("GET", url, headers=self._headers()) as response:
                _raise_for_download_status(response)
                for chunk in response.iter_bytes():
                    chunks.append(chunk)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Unable to download {url}: {e}", stage=_stage_of(e), url=url) from e
        return b"".join(chunks)

    def download_to(self, url: str, destination: Union[str, Path]) -> Path:
        path = Path(destination)
        try:
            with self._client.stream("GET", url, headers=self._headers()) as response:
                _raise_for_download_status(response)
                try:
                    with path.open("wb") as fh:
                        for chunk in response.iter_bytes():
                            fh.write(chunk)
                except httpx.HTTPError:
                    path.unlink(missing_ok=True)
                    raise
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"Unable to download {url}: {e}", stage=_stage_of(e), url=url) from e
        logger.info("Report file saved", extra={"url": url, "path": str(path)})
        return path

def _raise_for_download_status(response: httpx.Response) -> None:
    if response.status_code == 200:
        return
    response.read()
    raise UnexpectedResponseError(response.status_code, response.text)
