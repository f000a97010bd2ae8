from __future__ import annotations

import logging

from jalwa.core.logging import (
    QUIET_LOGGERS,
    _add_context_fields,
    configure_logging,
    request_context,
    session_context,
    session_id_ctx,
)


def test_context_ids_added_only_while_bound() -> None:
    with request_context("req-1"), session_context("visitor-1"):
        inside = _add_context_fields(None, "info", {"event": "chat_reply"})
    outside = _add_context_fields(None, "info", {"event": "chat_reply"})

    assert inside == {"event": "chat_reply", "request_id": "req-1", "session_id": "visitor-1"}
    assert outside == {"event": "chat_reply"}


def test_nested_session_context_restores_outer_id() -> None:
    with session_context("outer"):
        with session_context("inner"):
            assert session_id_ctx.get() == "inner"
        assert session_id_ctx.get() == "outer"
    assert session_id_ctx.get() is None


def test_explicit_field_wins_over_context() -> None:
    with session_context("visitor-1"):
        event = _add_context_fields(None, "info", {"session_id": "evicted-7"})

    assert event["session_id"] == "evicted-7"


def test_configure_logging_quiets_transport_loggers() -> None:
    configure_logging("DEBUG")
    try:
        for name in QUIET_LOGGERS:
            assert logging.getLogger(name).level == logging.WARNING
    finally:
        configure_logging("WARNING")
