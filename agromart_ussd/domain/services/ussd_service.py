# agromart_ussd/domain/services/ussd_service.py
"""USSD dialogue router.

Top-level menu::

    1  Browse listings
    2  My orders
    3  Help
    4  KYC Registration  -> role menu -> per-role step engine
    5  Track Order

Every response starts with ``CON`` (keep prompting) or ``END`` (close).
Errors are answered as ``END`` texts; nothing here raises for bad input.
"""

from __future__ import annotations

from typing import List

from loguru import logger

from agromart_ussd.domain.models.session import UssdSession
from agromart_ussd.domain.services import kyc_engine
from agromart_ussd.domain.services.input_parser import parse
from agromart_ussd.domain.services.kyc_roles import ROLE_BY_CHOICE, ROLE_SPECS
from agromart_ussd.domain.services.ussd_text import con, end
from agromart_ussd.infrastructure.cache.session_store import SessionStore, get_session_store
from agromart_ussd.infrastructure.external.kyc_sink import KycSink, get_kyc_sink

BROWSE = "1"
ORDERS = "2"
HELP = "3"
KYC = "4"
TRACK_ORDER = "5"


async def handle_ussd(
    session_id: str,
    raw_text: str,
    *,
    store: SessionStore | None = None,
    sink: KycSink | None = None,
) -> str:
    """Return the response for one gateway request."""
    if store is None:
        store = get_session_store()
    if sink is None:
        sink = get_kyc_sink()

    session = await store.get_or_create(session_id)

    text = (raw_text or "").strip()
    if not text:
        return con("MAIN_MENU")

    path = parse(text)
    choice = path[0]

    if choice == BROWSE:
        return _browse(path)
    if choice == ORDERS:
        return end("ORDERS_SMS")
    if choice == HELP:
        return end("HELP")
    if choice == TRACK_ORDER:
        return end("TRACK_ORDER")
    if choice == KYC:
        response = await _kyc(path, session, sink)
        await store.save(session)
        return response

    logger.info("Session {}: invalid top-level selection {!r}", session_id, choice)
    return end("INVALID_SELECTION")


def _browse(path: List[str]) -> str:
    level = len(path)
    if level == 1:
        return con("BROWSE_MENU")
    if level == 2:
        return end("BROWSE_COMING_SOON")
    return end("INVALID_SELECTION")


async def _kyc(path: List[str], session: UssdSession, sink: KycSink) -> str:
    level = len(path)

    if level == 1:
        return con("ROLE_MENU")

    if level == 2:
        role = ROLE_BY_CHOICE.get(path[1])
        if role is None:
            logger.info("Session {}: invalid role selection {!r}", session.session_id, path[1])
            return end("INVALID_SELECTION")
        # Fresh KYC flow: same session id, empty answers
        session.role = role
        session.kyc_data = {}
        session.step = 1
        return con("ROLE_START", role=role.value)

    if session.role is None:
        logger.info("Session {}: KYC step without a role", session.session_id)
        return end("INVALID_ROLE")

    return await kyc_engine.advance(ROLE_SPECS[session.role], path, session, sink)
