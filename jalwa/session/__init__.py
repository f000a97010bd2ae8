from jalwa.session.chat import ChatSession
from jalwa.session.models import Message, Sender
from jalwa.session.store import SessionStore

__all__ = ["ChatSession", "Message", "Sender", "SessionStore"]
