"""Prompt widget for the REPL.

Reads one line at a time with prompt_toolkit. Up/down recall entries from
the REPL's HistoryNavigator, and a validator rejects scripts that name
unknown commands before they can be submitted.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Protocol

from prompt_toolkit import PromptSession
from prompt_toolkit.buffer import Buffer
from prompt_toolkit.document import Document
from prompt_toolkit.key_binding import KeyBindings, KeyPressEvent
from prompt_toolkit.styles import Style
from prompt_toolkit.validation import ValidationError, Validator

from cmdloop.core.history import HistoryNavigator

logger = logging.getLogger(__name__)

# Returns True for valid input, or a message describing the problem
ScriptCheck = Callable[[str], bool | str]


class LineReader(Protocol):
    """What the REPL loop needs from an input source.

    read_line raises KeyboardInterrupt when the user cancels the prompt and
    EOFError when input is exhausted.
    """

    async def read_line(self, message: str, validate: ScriptCheck) -> str: ...

    def close(self) -> None: ...


class ScriptValidator(Validator):
    """prompt_toolkit validator backed by a script check function."""

    def __init__(self, check: ScriptCheck) -> None:
        self._check = check

    def validate(self, document: Document) -> None:
        outcome = self._check(document.text)
        if outcome is not True:
            raise ValidationError(
                message=str(outcome) if outcome else "invalid input",
                cursor_position=len(document.text),
            )


def set_input_text(buffer: Buffer, text: str) -> None:
    """Replace the buffer content, cursor at the end."""
    buffer.document = Document(text, cursor_position=len(text))


class PromptReader:
    """LineReader backed by a prompt_toolkit PromptSession.

    A new PromptSession is created for every line and released when the
    read finishes, including when the user cancels it.
    """

    def __init__(self, history: HistoryNavigator, prompt_style: str = "bold ansicyan") -> None:
        self.history = history
        self._style = Style.from_dict({"prompt": prompt_style})
        self._key_bindings = self._create_key_bindings()
        self._session: PromptSession[str] | None = None

    @property
    def active(self) -> bool:
        """True while a prompt is waiting for input."""
        return self._session is not None

    def _create_key_bindings(self) -> KeyBindings:
        kb = KeyBindings()

        @kb.add("up")
        def recall_previous(event: KeyPressEvent) -> None:
            buffer = event.current_buffer
            set_input_text(buffer, self.history.recall_previous(buffer.text))
            event.app.invalidate()

        @kb.add("down")
        def recall_next(event: KeyPressEvent) -> None:
            buffer = event.current_buffer
            set_input_text(buffer, self.history.recall_next(buffer.text))
            event.app.invalidate()

        return kb

    async def read_line(self, message: str, validate: ScriptCheck) -> str:
        """Prompt for one line.

        Raises:
            KeyboardInterrupt: The user cancelled the prompt (Ctrl-C).
            EOFError: The user pressed Ctrl-D on an empty line.
        """
        self.history.reset_cursor()
        self._session = PromptSession(
            validator=ScriptValidator(validate),
            validate_while_typing=False,
            key_bindings=self._key_bindings,
            style=self._style,
        )
        try:
            return await self._session.prompt_async([("class:prompt", f"{message}> ")])
        finally:
            self.close()

    def close(self) -> None:
        """Release the active prompt, if any."""
        if self._session is not None:
            logger.debug("Prompt released")
        self._session = None
