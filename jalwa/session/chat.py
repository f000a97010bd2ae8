from __future__ import annotations

import uuid
from pathlib import Path

import anyio
import structlog

from jalwa.assistant import WELCOME_TEXT, Assistant, Reply, is_blank
from jalwa.session.models import Message, Sender
from jalwa.voice.capture import SpeechRecognizer, VoiceCapture

logger = structlog.get_logger(__name__)


class ChatSession:
    """One visitor's conversation with the assistant.

    Holds the message log and delivers each reply after ``reply_delay``
    seconds so the widget can show a typing indicator. The assistant itself
    sees every utterance in isolation.
    """

    def __init__(
        self,
        assistant: Assistant,
        reply_delay: float = 0.8,
        session_id: str | None = None,
        recognizer: SpeechRecognizer | None = None,
    ) -> None:
        self.assistant = assistant
        self.reply_delay = max(0.0, reply_delay)
        self.session_id = session_id or uuid.uuid4().hex
        self.is_typing = False
        self.last_reply: Reply | None = None
        self.voice = VoiceCapture(recognizer)
        self._messages: list[Message] = [Message(text=WELCOME_TEXT, sender=Sender.bot)]

    @property
    def history(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    @property
    def is_listening(self) -> bool:
        return self.voice.listening

    def _append(self, text: str, sender: Sender) -> Message:
        message = Message(text=text, sender=sender)
        self._messages.append(message)
        return message

    async def submit(self, text: str) -> Message | None:
        if is_blank(text):
            return None

        self._append(text, Sender.user)
        self.is_typing = True
        try:
            if self.reply_delay:
                await anyio.sleep(self.reply_delay)
            reply = self.assistant.respond(text)
        finally:
            self.is_typing = False

        self.last_reply = reply
        logger.info(
            "chat_reply",
            session=self.session_id,
            intent=reply.intent.value,
            messages=len(self._messages) + 1,
        )
        return self._append(reply.text, Sender.bot)

    async def submit_voice(
        self,
        audio_path: str | Path,
        language: str | None = None,
    ) -> tuple[str | None, Message | None]:
        """Transcribe a recording and feed the transcript through ``submit``.

        Recognition errors propagate as ``VoiceCaptureError``; a blank
        transcript leaves the history untouched.
        """
        transcript = await self.voice.listen(audio_path, language)
        if transcript is None:
            return None, None
        return transcript, await self.submit(transcript)
