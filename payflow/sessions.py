import logging
import time
import uuid
from collections import OrderedDict
from typing import Callable, Optional, Tuple
from .config import settings
from .session import CheckoutSession, Gateway

logger = logging.getLogger(__name__)

SESSION_COOKIE = "payflow_page"


class SessionStore:
    """
    In-process page sessions keyed by cookie. Lost on restart.

    A session only lives across the redirect that follows a submit or a
    return from the provider; sessions idle for longer than ``ttl`` seconds
    are dropped and at most ``max_sessions`` are kept, oldest first out.
    """

    def __init__(self, ttl: float = 900.0, max_sessions: int = 10000, clock: Callable[[], float] = time.monotonic):
        self.ttl = ttl
        self.max_sessions = max_sessions
        self.clock = clock
        # session_id -> (last touched, session), least recently touched first
        self._sessions: "OrderedDict[str, Tuple[float, CheckoutSession]]" = OrderedDict()

    def _evict(self) -> None:
        now = self.clock()
        while self._sessions:
            session_id, (touched, _) = next(iter(self._sessions.items()))
            if now - touched <= self.ttl and len(self._sessions) <= self.max_sessions:
                break
            del self._sessions[session_id]
            logger.debug(f"Evicted page session {session_id}")

    def create(self, gateway: Optional[Gateway] = None) -> Tuple[str, CheckoutSession]:
        session_id = uuid.uuid4().hex
        session = CheckoutSession(gateway=gateway)
        self.put(session_id, session)
        logger.debug(f"New page session {session_id}")
        return session_id, session

    def put(self, session_id: str, session: CheckoutSession) -> None:
        self._sessions[session_id] = (self.clock(), session)
        self._sessions.move_to_end(session_id)
        self._evict()

    def get(self, session_id: Optional[str]) -> Optional[CheckoutSession]:
        self._evict()
        if not session_id or session_id not in self._sessions:
            return None
        _, session = self._sessions[session_id]
        self.put(session_id, session)
        return session

    def pop(self, session_id: Optional[str]) -> Optional[CheckoutSession]:
        self._evict()
        if not session_id:
            return None
        entry = self._sessions.pop(session_id, None)
        return entry[1] if entry else None

    def discard(self, session_id: str) -> None:
        # page navigated away; its state goes with it
        self._sessions.pop(session_id, None)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def __len__(self) -> int:
        return len(self._sessions)


store = SessionStore(ttl=settings.page_session_ttl, max_sessions=settings.page_session_limit)
