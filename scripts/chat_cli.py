from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

import anyio

from jalwa.assistant import WELCOME_TEXT, Assistant
from jalwa.catalog import load_catalog
from jalwa.core.config import settings
from jalwa.core.logging import configure_logging
from jalwa.session import ChatSession

PROMPT = "you> "


async def run_chat(
    catalog_path: Path | None = None,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> None:
    catalog = load_catalog(catalog_path or settings.catalog_path)
    assistant = Assistant(
        catalog,
        fuzzy_threshold=settings.fuzzy_threshold,
        chef_name=settings.chef_name,
    )
    session = ChatSession(assistant, reply_delay=settings.reply_delay_ms / 1000)

    stdout.write(f"bot> {WELCOME_TEXT}\n")
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        message = await session.submit(line.strip())
        if message is None:
            continue
        for text in message.text.split("\n"):
            stdout.write(f"bot> {text}\n")


if __name__ == "__main__":
    configure_logging("WARNING")
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    anyio.run(run_chat, path)
