# agromart_ussd/infrastructure/cache/session_store.py
"""Process-wide USSD session storage.

Two backends share one contract:

* ``InMemorySessionStore`` -- dict keyed by session id, idle entries swept
  after ``ttl_seconds``.
* ``RedisSessionStore`` -- JSON under ``ussd:session:<id>`` with the TTL as
  key expiry, for deployments running several workers.
"""

from __future__ import annotations

import time
from typing import Dict, Protocol, Tuple

import redis.asyncio as redis
from loguru import logger
from pydantic import ValidationError

from agromart_ussd.core.config import settings
from agromart_ussd.domain.models.session import UssdSession

# ---------------------------------------------------------------------------
# TTL constants
# ---------------------------------------------------------------------------
DEFAULT_TTL_SECONDS = 60 * 60  # 1 hour idle expiry


class SessionStore(Protocol):
    async def get_or_create(self, session_id: str) -> UssdSession: ...

    async def save(self, session: UssdSession) -> None: ...

    async def clear(self, session_id: str) -> None: ...


class InMemorySessionStore:
    def __init__(
        self,
        ttl_seconds: int = DEFAULT_TTL_SECONDS,
        clock=time.monotonic,
        sweep_interval_seconds: float | None = None,
    ):
        self.ttl_seconds = ttl_seconds
        # Full sweeps run at most once per interval; accessed entries are
        # checked individually on every call.
        self.sweep_interval_seconds = (
            ttl_seconds if sweep_interval_seconds is None else sweep_interval_seconds
        )
        self._clock = clock
        self._sessions: Dict[str, Tuple[UssdSession, float]] = {}
        self._last_sweep = clock()

    def __len__(self) -> int:
        return len(self._sessions)

    def _is_expired(self, last_ts: float, now: float) -> bool:
        return now - last_ts > self.ttl_seconds

    def _maybe_sweep(self, now: float) -> None:
        if now - self._last_sweep < self.sweep_interval_seconds:
            return
        self._last_sweep = now
        expired = [
            sid for sid, (_, last_ts) in self._sessions.items()
            if self._is_expired(last_ts, now)
        ]
        for sid in expired:
            del self._sessions[sid]
        if expired:
            logger.debug("Evicted {} idle USSD sessions", len(expired))

    async def get_or_create(self, session_id: str) -> UssdSession:
        now = self._clock()
        self._maybe_sweep(now)
        entry = self._sessions.get(session_id)
        if entry is None or self._is_expired(entry[1], now):
            session = UssdSession(session_id=session_id)
        else:
            session = entry[0]
        self._sessions[session_id] = (session, now)
        return session

    async def save(self, session: UssdSession) -> None:
        self._sessions[session.session_id] = (session, self._clock())

    async def clear(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)


class RedisSessionStore:
    def __init__(self, redis_url: str, ttl_seconds: int = DEFAULT_TTL_SECONDS):
        if not redis_url:
            raise RuntimeError("REDIS_URL is not set")
        self.ttl_seconds = ttl_seconds
        self._r = redis.from_url(redis_url, decode_responses=True)

    def _key(self, session_id: str) -> str:
        return f"ussd:session:{session_id}"

    async def get_or_create(self, session_id: str) -> UssdSession:
        raw = await self._r.get(self._key(session_id))
        if raw:
            try:
                return UssdSession.model_validate_json(raw)
            except ValidationError:
                logger.warning("Discarding unreadable USSD session {}", session_id)
        session = UssdSession(session_id=session_id)
        await self.save(session)
        return session

    async def save(self, session: UssdSession) -> None:
        await self._r.set(
            self._key(session.session_id),
            session.model_dump_json(),
            ex=self.ttl_seconds,
        )

    async def clear(self, session_id: str) -> None:
        await self._r.delete(self._key(session_id))


_store: SessionStore | None = None


def build_session_store(backend: str, *, redis_url: str, ttl_seconds: int) -> SessionStore:
    backend = (backend or "").strip().lower()
    if backend == "memory":
        return InMemorySessionStore(ttl_seconds)
    if backend == "redis":
        return RedisSessionStore(redis_url, ttl_seconds)
    raise ValueError(f"Unknown SESSION_BACKEND: {backend!r}")


def get_session_store() -> SessionStore:
    global _store
    if _store is None:
        _store = build_session_store(
            settings.SESSION_BACKEND,
            redis_url=settings.REDIS_URL,
            ttl_seconds=settings.SESSION_TTL_SECONDS,
        )
    return _store
