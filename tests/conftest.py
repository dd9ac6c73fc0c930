"""Shared fixtures for stepbar tests."""

import logging

import pytest

from stepbar.core.config import set_config


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def tick(self, seconds: float) -> None:
        self.now += seconds


class RecordingStream:
    """Text stream that keeps every write separately."""

    def __init__(self):
        self.writes = []
        self.flushes = 0

    def write(self, text: str) -> int:
        self.writes.append(text)
        return len(text)

    def flush(self) -> None:
        self.flushes += 1

    def getvalue(self) -> str:
        return "".join(self.writes)


@pytest.fixture
def clock():
    """Fake clock starting at an arbitrary timestamp."""
    return FakeClock()


@pytest.fixture
def stream():
    """Stream recording each render as one write."""
    return RecordingStream()


@pytest.fixture(autouse=True)
def reset_state():
    """Restore default configuration and logging after each test."""
    yield
    set_config(None)
    root_logger = logging.getLogger("stepbar")
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()
    root_logger.setLevel(logging.NOTSET)


def replay_on_terminal(text: str) -> list:
    """
    Rows left on screen by a dumb terminal receiving ``text``.

    Backspace moves the cursor left without clearing, newline starts a new
    row and any other character overwrites the cell under the cursor.
    """
    rows = [[]]
    column = 0
    for char in text:
        row = rows[-1]
        if char == "\b":
            column = max(0, column - 1)
        elif char == "\n":
            rows.append([])
            column = 0
        else:
            if column < len(row):
                row[column] = char
            else:
                row.extend(" " * (column - len(row)))
                row.append(char)
            column += 1
    return ["".join(row) for row in rows]


@pytest.fixture
def screen():
    """Replay written text on a dumb terminal and return its rows."""
    return replay_on_terminal
