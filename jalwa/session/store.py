from __future__ import annotations

from collections import OrderedDict

import structlog

from jalwa.assistant import Assistant
from jalwa.session.chat import ChatSession
from jalwa.voice.capture import SpeechRecognizer

logger = structlog.get_logger(__name__)


class SessionStore:
    """In-process registry of chat sessions, keyed by session id.

    Sessions are never written anywhere; when ``max_sessions`` is exceeded
    the least recently used one is dropped.
    """

    def __init__(
        self,
        assistant: Assistant,
        reply_delay: float = 0.8,
        max_sessions: int = 1000,
        recognizer: SpeechRecognizer | None = None,
    ) -> None:
        self.assistant = assistant
        self.reply_delay = reply_delay
        self.max_sessions = max(1, max_sessions)
        self.recognizer = recognizer
        self._sessions: OrderedDict[str, ChatSession] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._sessions

    def get(self, session_id: str) -> ChatSession | None:
        session = self._sessions.get(session_id)
        if session is not None:
            self._sessions.move_to_end(session_id)
        return session

    def get_or_create(self, session_id: str | None = None) -> ChatSession:
        if session_id:
            existing = self.get(session_id)
            if existing is not None:
                return existing

        session = ChatSession(
            self.assistant,
            reply_delay=self.reply_delay,
            session_id=session_id,
            recognizer=self.recognizer,
        )
        self._sessions[session.session_id] = session
        while len(self._sessions) > self.max_sessions:
            evicted_id, _ = self._sessions.popitem(last=False)
            logger.info("chat_session_evicted", evicted=evicted_id)
        return session
