from __future__ import annotations

import io

import anyio

from jalwa.assistant import WELCOME_TEXT
from jalwa.catalog import load_catalog

from scripts.chat_cli import PROMPT, run_chat


def _run(lines: str) -> str:
    stdin = io.StringIO(lines)
    stdout = io.StringIO()
    anyio.run(run_chat, None, stdin, stdout)
    return stdout.getvalue()


def test_cli_prints_welcome_and_replies() -> None:
    output = _run("do you have parking\n")

    assert output.startswith(f"bot> {WELCOME_TEXT}\n")
    assert "bot> There is street parking available" in output
    assert output.endswith(PROMPT)


def test_cli_prefixes_every_line_of_multiline_reply() -> None:
    output = _run("what are your hours\n")

    assert "bot> We are open:\n" in output
    for line in load_catalog().contact.hours:
        assert f"bot> {line}\n" in output


def test_cli_skips_blank_lines() -> None:
    output = _run("\n   \n")

    assert output.count("bot> ") == 1
    assert output.count(PROMPT) == 3
