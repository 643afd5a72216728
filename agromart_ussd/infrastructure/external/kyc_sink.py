# agromart_ussd/infrastructure/external/kyc_sink.py
"""Hand-off of completed USSD KYC records.

The dialogue engine calls ``submit(role, fields)`` once per completed flow
and never waits on the outcome: failures are logged here and the caller
still receives the success message.
"""

from __future__ import annotations

from typing import Mapping, Protocol

import httpx
from loguru import logger

from agromart_ussd.core.config import settings
from agromart_ussd.domain.models.session import Role
from agromart_ussd.domain.services.pii_masking import mask_kyc_fields


class KycSink(Protocol):
    async def submit(self, role: Role, fields: Mapping[str, str]) -> None: ...


class LogKycSink:
    """Record submissions in the application log only."""

    async def submit(self, role: Role, fields: Mapping[str, str]) -> None:
        logger.info("{} KYC submitted: {}", role.value, mask_kyc_fields(fields))


class HttpKycSink:
    """POST submissions to the web application's KYC endpoint."""

    def __init__(self, url: str, timeout: float = 10.0, transport: httpx.AsyncBaseTransport | None = None):
        if not url:
            raise RuntimeError("KYC_SUBMIT_URL is not set")
        self.url = url
        self.timeout = timeout
        self._transport = transport

    def _payload(self, role: Role, fields: Mapping[str, str]) -> dict:
        return {"type": role.name, "source": "ussd", **fields}

    async def submit(self, role: Role, fields: Mapping[str, str]) -> None:
        payload = self._payload(role, fields)
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.url, json=payload)
                resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "{} KYC submission rejected: {} - {}",
                role.value, exc.response.status_code, exc.response.text,
            )
            return
        except httpx.HTTPError as exc:
            logger.error("{} KYC submission failed: {}", role.value, exc)
            return

        logger.info("{} KYC forwarded to {}: {}", role.value, self.url, mask_kyc_fields(fields))


_sink: KycSink | None = None


def get_kyc_sink() -> KycSink:
    global _sink
    if _sink is None:
        if settings.KYC_SUBMIT_URL:
            _sink = HttpKycSink(settings.KYC_SUBMIT_URL, settings.KYC_SUBMIT_TIMEOUT_SECONDS)
        else:
            _sink = LogKycSink()
    return _sink
