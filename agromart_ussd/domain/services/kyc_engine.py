# agromart_ussd/domain/services/kyc_engine.py
"""Generic role step engine for the USSD KYC flow.

The current step is derived from the resent path, never stored:
``step = level - 2`` (the KYC menu token and the role token come first).
"""

from __future__ import annotations

from typing import Sequence

from loguru import logger

from agromart_ussd.domain.models.session import UssdSession
from agromart_ussd.domain.services.kyc_roles import RoleSpec
from agromart_ussd.domain.services.ussd_text import CON, end
from agromart_ussd.infrastructure.external.kyc_sink import KycSink


async def advance(
    spec: RoleSpec,
    path: Sequence[str],
    session: UssdSession,
    sink: KycSink,
) -> str:
    """Store the newest token for ``spec`` and return the next response."""
    level = len(path)
    step = level - 2

    if step < 1 or step > spec.terminal_step:
        logger.info(
            "Session {}: invalid {} step {} (terminal {})",
            session.session_id, spec.role.value, step, spec.terminal_step,
        )
        return end("INVALID_STEP")

    current = spec.steps[step - 1]
    session.step = step
    if current.field:
        session.kyc_data[current.field] = path[level - 1]

    if step == spec.terminal_step:
        await sink.submit(spec.role, dict(session.kyc_data))
        return end("KYC_SUCCESS", role=spec.role.value)

    return f"{CON} {current.prompt}"
