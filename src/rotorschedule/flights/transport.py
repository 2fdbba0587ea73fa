"""HTTP transport used by the schedule sources."""

import asyncio
import logging
from typing import Any, Mapping, Optional, Protocol, Tuple, Union, runtime_checkable

import requests

from rotorschedule.flights.config import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


@runtime_checkable
class Transport(Protocol):
    """Protocol for performing a single HTTP request."""

    async def perform_request(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        data: Optional[Union[str, bytes]] = None,
    ) -> Tuple[bytes, int]:
        """Return (body, status_code). Raises on transport failure or error status."""
        ...


class RequestsTransport:
    """Transport backed by requests, run in a worker thread so calls can overlap."""

    def __init__(self, timeout: int = DEFAULT_TIMEOUT, session: Optional[requests.Session] = None):
        self.timeout = timeout
        self._session = session

    async def perform_request(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        data: Optional[Union[str, bytes]] = None,
    ) -> Tuple[bytes, int]:
        return await asyncio.to_thread(self._send, method, url, params, headers, data)

    def _send(
        self,
        method: str,
        url: str,
        params: Optional[Mapping[str, Any]],
        headers: Optional[Mapping[str, str]],
        data: Optional[Union[str, bytes]],
    ) -> Tuple[bytes, int]:
        request = self._session.request if self._session is not None else requests.request
        resp = request(
            method,
            url,
            params=dict(params) if params else None,
            headers=dict(headers) if headers else None,
            data=data,
            timeout=self.timeout,
        )
        logger.info("%s %s finished with code: %s", method, url, resp.status_code)
        resp.raise_for_status()
        return resp.content, resp.status_code
