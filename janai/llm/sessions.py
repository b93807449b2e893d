import logging
import threading
from collections import OrderedDict
from typing import Callable

from janai.llm.companion import CivicCompanion

logger = logging.getLogger("janai.llm")


class CompanionSessions:
    """
    One CivicCompanion per chat session, least recently used evicted first.
    Nothing is persisted; a restart clears every conversation.
    """

    def __init__(self, factory: Callable[[], CivicCompanion], max_sessions: int = 1000):
        if max_sessions <= 0:
            raise ValueError("max_sessions must be positive")
        self.factory = factory
        self.max_sessions = max_sessions
        self._sessions: "OrderedDict[str, CivicCompanion]" = OrderedDict()
        self._lock = threading.Lock()

    def get(self, session_id: str) -> CivicCompanion:
        with self._lock:
            companion = self._sessions.get(session_id)
            if companion is not None:
                self._sessions.move_to_end(session_id)
                return companion

        # factory may raise ConfigurationError; nothing is stored in that case
        companion = self.factory()
        with self._lock:
            existing = self._sessions.get(session_id)
            if existing is not None:
                self._sessions.move_to_end(session_id)
                return existing
            self._sessions[session_id] = companion
            while len(self._sessions) > self.max_sessions:
                evicted, _ = self._sessions.popitem(last=False)
                logger.debug("chat session %s evicted", evicted)
        return companion

    def clear(self) -> None:
        with self._lock:
            self._sessions.clear()

    def __contains__(self, session_id: str) -> bool:
        with self._lock:
            return session_id in self._sessions

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)
