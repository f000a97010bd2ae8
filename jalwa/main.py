from __future__ import annotations

import os
import shutil
import tempfile
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

import structlog
from fastapi import FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError, field_validator
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from jalwa.assistant import Assistant, Intent
from jalwa.catalog import ALL_CATEGORIES, load_catalog
from jalwa.core.config import settings
from jalwa.core.errors import VoiceCaptureBusyError, VoiceCaptureError
from jalwa.core.logging import configure_logging, request_context, session_context
from jalwa.core.validation import MAX_SESSION_ID_LENGTH, sanitize_session_id, sanitize_utterance
from jalwa.session import ChatSession, Message, SessionStore
from jalwa.voice import WhisperRecognizer

configure_logging(settings.log_level)
logger = structlog.get_logger(__name__)

catalog = load_catalog(settings.catalog_path)
assistant = Assistant(
    catalog,
    fuzzy_threshold=settings.fuzzy_threshold,
    chef_name=settings.chef_name,
)
sessions = SessionStore(
    assistant,
    reply_delay=settings.reply_delay_ms / 1000,
    max_sessions=settings.max_sessions,
    recognizer=WhisperRecognizer(),
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("service_started", items=len(catalog), environment=settings.environment)
    if not settings.openai_api_key:
        logger.warning("openai_api_key_missing", feature="voice_input")
    yield


app = FastAPI(title=settings.app_name, lifespan=lifespan)
limiter = Limiter(key_func=get_remote_address, enabled=settings.rate_limit_enabled)
app.state.limiter = limiter
app.add_middleware(SlowAPIMiddleware)

CLIENT_ERROR_REASONS = {"unsupported_language", "no_audio", "too_large"}


class ChatRequest(BaseModel):
    message: str = Field(..., min_length=1)
    session_id: str | None = None

    @field_validator("message")
    @classmethod
    def validate_message(cls, value: str) -> str:
        return sanitize_utterance(value, max_length=settings.max_utterance_length)

    @field_validator("session_id")
    @classmethod
    def validate_session_id(cls, value: str | None) -> str | None:
        return sanitize_session_id(value)


class ChatResponse(BaseModel):
    session_id: str
    reply: str
    intent: Intent | None = None
    item_id: str | None = None
    messages: list[Message] = Field(default_factory=list)


class VoiceChatResponse(ChatResponse):
    transcript: str


@app.middleware("http")
async def add_request_context(request: Request, call_next):
    request_id = request.headers.get("x-request-id") or str(uuid.uuid4())
    with request_context(request_id):
        response = await call_next(request)

    response.headers["x-request-id"] = request_id
    return response


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning("request_validation_failed", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=422, content={"detail": jsonable_errors(exc)})


@app.exception_handler(ValidationError)
async def pydantic_validation_handler(request: Request, exc: ValidationError):
    logger.warning("pydantic_validation_failed", path=request.url.path, error=str(exc))
    return JSONResponse(status_code=422, content={"detail": jsonable_errors(exc)})


@app.exception_handler(VoiceCaptureError)
async def voice_capture_handler(request: Request, exc: VoiceCaptureError):
    logger.warning("voice_capture_error", path=request.url.path, reason=exc.reason)
    if isinstance(exc, VoiceCaptureBusyError):
        status_code = 409
    elif exc.reason in CLIENT_ERROR_REASONS:
        status_code = 422
    else:
        status_code = 503
    return JSONResponse(status_code=status_code, content={"detail": str(exc), "reason": exc.reason})


@app.exception_handler(RateLimitExceeded)
async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    logger.warning("rate_limit_exceeded", path=request.url.path)
    return JSONResponse(
        status_code=429,
        content={"detail": "Rate limit exceeded. Please slow down."},
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("unhandled_exception", path=request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Internal Server Error"})


def jsonable_errors(exc: RequestValidationError | ValidationError) -> list[dict[str, object]]:
    # ctx may carry the raw ValueError raised by a validator
    return [
        {key: value for key, value in error.items() if key != "ctx"}
        for error in exc.errors()
    ]


def _build_response(session: ChatSession) -> ChatResponse:
    reply = session.last_reply
    history = list(session.history)
    return ChatResponse(
        session_id=session.session_id,
        reply=history[-1].text,
        intent=reply.intent if reply else None,
        item_id=reply.item.id if reply and reply.item else None,
        messages=history,
    )


@app.get("/health")
async def health() -> dict[str, str]:
    logger.info("health_check")
    return {"status": "ok"}


@app.get("/contact")
async def contact() -> dict[str, object]:
    return catalog.contact.model_dump()


@app.get("/menu/categories")
async def menu_categories() -> list[str]:
    return catalog.categories()


@app.get("/menu")
async def menu(category: str = ALL_CATEGORIES) -> list[dict[str, object]]:
    return [item.model_dump(by_alias=True) for item in catalog.in_category(category)]


@app.post("/chat", response_model=ChatResponse)
@limiter.limit(settings.chat_rate_limit)
async def chat(request: Request, payload: ChatRequest) -> ChatResponse:
    session = sessions.get_or_create(payload.session_id)
    with session_context(session.session_id):
        await session.submit(payload.message)
    return _build_response(session)


@app.post("/chat/voice", response_model=VoiceChatResponse)
@limiter.limit(settings.voice_rate_limit)
async def chat_voice(
    request: Request,
    file: UploadFile = File(...),
    session_id: str | None = Form(default=None, max_length=MAX_SESSION_ID_LENGTH),
    language: str | None = Form(default=None),
) -> VoiceChatResponse | JSONResponse:
    session = sessions.get_or_create(sanitize_session_id(session_id))
    suffix = Path(file.filename or "audio").suffix
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as tmp_file:
        shutil.copyfileobj(file.file, tmp_file)
        temp_path = tmp_file.name

    try:
        with session_context(session.session_id):
            transcript, _ = await session.submit_voice(temp_path, language)
    finally:
        os.unlink(temp_path)

    if transcript is None:
        return JSONResponse(
            status_code=422,
            content={"detail": "No speech detected", "session_id": session.session_id},
        )
    response = _build_response(session)
    return VoiceChatResponse(transcript=transcript, **response.model_dump())

