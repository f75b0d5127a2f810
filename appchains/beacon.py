from __future__ import annotations

import logging
from typing import Mapping, Optional, Union

from .settings import settings
from .transport import Transport
from .urls import beacon_url, query_string

logger = logging.getLogger(__name__)

class BeaconClient:
    """Unauthenticated lookups against the sequencing beacon host."""

    def __init__(
        self,
        transport: Optional[Transport] = None,
        *,
        hostname: Optional[str] = None,
        scheme: Optional[str] = None,
        port: Optional[int] = None,
    ) -> None:
        self.transport = transport or Transport()
        self.hostname = hostname or settings.beacon_hostname
        self.scheme = scheme or settings.scheme
        self.port = port or settings.port

    def close(self) -> None:
        self.transport.close()

    def lookup(self, endpoint_name: str, parameters: Union[Mapping[str, object], str]) -> str:
        query = parameters if isinstance(parameters, str) else query_string(parameters)
        url = beacon_url(endpoint_name, query, hostname=self.hostname, scheme=self.scheme, port=self.port)
        logger.debug("Beacon lookup", extra={"endpoint": endpoint_name})
        return self.transport.request("GET", url).body

    def sequencing_beacon(self, chrom: int, pos: int, allele: str) -> str:
        return self.lookup("SequencingBeacon", _beacon_parameters(chrom, pos, allele))

    def public_beacon(self, chrom: int, pos: int, allele: str) -> str:
        return self.lookup("PublicBeacons", _beacon_parameters(chrom, pos, allele))

def _beacon_parameters(chrom: int, pos: int, allele: str) -> dict:
    return {"chrom": chrom, "pos": pos, "allele": allele}
