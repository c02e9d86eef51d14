"""Progress and statistics of one typing exercise."""

import math
from dataclasses import dataclass
from enum import Enum


class CharState(Enum):
    """How a character of the exercise is shown."""

    PENDING = "pending"
    CURRENT = "current"
    CORRECT = "correct"
    WRONG = "wrong"


def format_number(value):
    """Format a number with three significant digits."""
    return f"{value:.3g}"


def count_words(text):
    """Count the space-separated words of a text, empty parts included."""
    return len(text.split(" "))


def _rate(count, seconds):
    if seconds:
        return count / seconds
    return math.copysign(math.inf, count) if count else math.nan


@dataclass(frozen=True)
class Stats:
    """Elapsed time, speeds and accuracy of an exercise."""

    elapsed: float = 0.0
    chars_per_second: float = 0.0
    words_per_second: float = 0.0
    accuracy: int = 100

    def labels(self):
        """Return the status bar texts for these statistics."""
        return (
            f"Время: {format_number(self.elapsed)}",
            f"CPS: {format_number(self.chars_per_second)}",
            f"WPS: {format_number(self.words_per_second)}",
            f"Аккуратность: {self.accuracy}%",
        )


class TypingSession:
    """Tracks a cursor moving over a text as the user types it."""

    def __init__(self, text, skip=0):
        if not 0 <= skip <= len(text):
            raise ValueError(f"skip {skip} outside text of length {len(text)}")
        self.text = text
        self.skip = skip
        self.position = skip
        self.correct_chars = 0
        self.words = 0
        self.inputs = 0
        self.total_input = 0
        self.started_at = None
        self._marks = [CharState.PENDING] * (len(text) - skip)
        self._finished = False

    @property
    def char_count(self):
        return len(self.text) - self.skip

    @property
    def word_count(self):
        return count_words(self.text[self.skip:])

    @property
    def current(self):
        """The character under the cursor, or an empty string at the end."""
        return self.text[self.position] if self.position < len(self.text) else ""

    def _mark(self, state):
        if self.position < len(self.text):
            self._marks[self.position - self.skip] = state

    def _check_done(self):
        if self.started_at is not None and self.total_input == self.char_count:
            self._finished = True

    def type_char(self, char, now):
        """Handle one typed character at time ``now`` (seconds)."""
        if self._finished or not char:
            return
        if not (char[0].isalpha() or char[0] in " -"):
            return
        self.inputs += 1
        if self.started_at is None:
            self.started_at = now

        if char == self.current:
            self._mark(CharState.CORRECT)
            self.position = min(self.position + 1, len(self.text))
            self.total_input += 1
            self.correct_chars += 1
            if self.current == " ":
                self.words += 1
                self.correct_chars -= 1
        else:
            if self.current == " ":
                return
            self._mark(CharState.WRONG)
            self.position = min(self.position + 1, len(self.text))
            self.total_input += 1
        self._check_done()

    def backspace(self):
        """Move the cursor one character back."""
        if self._finished:
            return
        self.total_input -= 1
        at_end = self.position >= len(self.text)
        self._mark(CharState.PENDING)
        self.position = max(self.skip, self.position - (2 if at_end else 1))
        self._mark(CharState.PENDING)
        self._check_done()

    def states(self):
        """Return the display state of every character to be typed."""
        return [
            CharState.CURRENT if index == self.position else mark
            for index, mark in enumerate(self._marks, start=self.skip)
        ]

    def finished(self):
        return self._finished

    def stats(self, now):
        """Return the statistics at time ``now`` (seconds)."""
        if self.started_at is None or self.inputs == 0:
            return Stats()
        seconds = round((now - self.started_at) * 1000) / 1000
        return Stats(
            elapsed=seconds,
            chars_per_second=_rate(self.correct_chars, seconds),
            words_per_second=_rate(self.words + 1, seconds),
            accuracy=(self.correct_chars + self.words) * 100 // self.inputs,
        )