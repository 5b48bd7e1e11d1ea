from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Dict, Mapping

import httpx

from .config import AUTHORIZATION_HEADER, Settings
from .errors import TransportError
from .models import SignedRequest
from .signer import authorization_header, verify_credentials
from .utils import request_timestamps, utc_now

logger = logging.getLogger(__name__)


class SESClient:
    """Signed POST requests against the SES Query API."""

    def __init__(
        self,
        settings: Settings,
        *,
        transport: httpx.BaseTransport | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self._settings = settings
        self._clock = clock
        self._client = httpx.Client(
            base_url=settings.base_url,
            timeout=settings.timeout,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "SESClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def build_signed_request(self, path: str, params: Mapping[str, str]) -> SignedRequest:
        settings = self._settings
        verify_credentials(settings.access_key, settings.secret_key)

        timestamps = request_timestamps(self._clock())
        body: Dict[str, str] = dict(params)
        body["Timestamp"] = timestamps.iso
        body["Version"] = settings.version
        body["AWSAccessKeyId"] = settings.access_key

        headers = {
            AUTHORIZATION_HEADER: authorization_header(
                settings.access_key, settings.secret_key, timestamps.http_date
            ),
            "Date": timestamps.http_date,
        }
        return SignedRequest(path=path, params=body, headers=headers, timestamps=timestamps)

    def signed_post(self, path: str = "/", params: Mapping[str, str] | None = None) -> httpx.Response:
        request = self.build_signed_request(path, params or {})
        logger.debug("POST %s%s Action=%s", self._settings.base_url, path, request.params.get("Action"))
        try:
            return self._client.post(request.path, data=request.params, headers=request.headers)
        except httpx.RequestError as exc:
            raise TransportError(f"SES request failed: {exc}") from exc
