"""Shared fixtures and test doubles."""

import logging
from collections.abc import Sequence
from pathlib import Path

import pytest

from env_creator.interfaces.editor import BaseInteractiveEditor
from env_creator.interfaces.prompter import BasePrompter, PickItem
from env_creator.interfaces.template import PlaceholderMarker


class ScriptedPrompter(BasePrompter):
    """Answers prompts from a fixed script and records everything shown.

    ``answers`` is consumed in order by every call that expects an answer
    (pick, info/warning with choices, ask). ``None`` in the script means
    the prompt was dismissed.
    """

    def __init__(self, answers: Sequence[object] = ()) -> None:
        self.answers = list(answers)
        self.messages: list[tuple[str, str]] = []
        self.picks: list[list[PickItem]] = []
        self.questions: list[tuple[str, str]] = []

    def _next(self):
        assert self.answers, "prompter ran out of scripted answers"
        return self.answers.pop(0)

    def pick(self, items, placeholder):
        self.picks.append(list(items))
        return self._next()

    def info(self, message, *choices):
        self.messages.append(("info", message))
        return self._next() if choices else None

    def warning(self, message, *choices):
        self.messages.append(("warning", message))
        return self._next() if choices else None

    def error(self, message):
        self.messages.append(("error", message))

    def ask(self, message, default=""):
        self.questions.append((message, default))
        return self._next()

    def by_level(self, level: str) -> list[str]:
        return [text for kind, text in self.messages if kind == level]


class RecordingEditor(BaseInteractiveEditor):
    """Remembers calls instead of touching the terminal."""

    def __init__(self) -> None:
        self.opened: list[Path] = []
        self.inserts: list[tuple[Path, str, tuple[PlaceholderMarker, ...]]] = []

    def open(self, path):
        self.opened.append(path)

    def insert_interactive_template(self, target, snippet, stops: Sequence[PlaceholderMarker]):
        self.inserts.append((target, snippet, tuple(stops)))


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Put back the root logger handlers and level after each test.

    setup_logging replaces the root handlers with one writing to the
    current stderr, which the CLI runner closes after every invocation.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level

    yield

    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def editor() -> RecordingEditor:
    return RecordingEditor()


@pytest.fixture
def write_file():
    """Write UTF-8 text without newline translation, creating parents."""

    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def make_prompter():
    """Build a ScriptedPrompter from a list of answers."""
    return ScriptedPrompter
