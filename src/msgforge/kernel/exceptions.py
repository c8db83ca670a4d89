"""Unified exception hierarchy for msgforge.

All library exceptions inherit from MsgForgeException, enabling unified
error handling.

Categories:
- BusinessException: errors meant to be shown to the end user, built
  from one or more localized messages (ApplicationException)
- MessageException: misuse or misconfiguration of the message subsystem
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from msgforge.message.message import Message


# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------


class MsgForgeException(Exception):
    """Base exception for all msgforge errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "MESSAGE_001").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# ---------------------------------------------------------------------------
# Business
# ---------------------------------------------------------------------------


class BusinessException(MsgForgeException):
    """Domain rule violations and business logic errors."""


class ApplicationException(BusinessException):
    """Carries localized messages describing why an operation was rejected.

    Messages are formatted lazily, so ``str(exc)`` reflects the language
    pinned at the time it is rendered rather than when it was raised.

    Usage::

        raise ApplicationException(Message(MessageLevel.ERROR, required, ["name"]))
    """

    def __init__(self, *messages: Message, code: str | None = None, context: dict | None = None) -> None:
        super().__init__("", code=code, context=context)
        self._messages: list[Message] = list(messages)

    @property
    def messages(self) -> tuple[Message, ...]:
        return tuple(self._messages)

    def add_messages(self, messages: Iterable[Message]) -> None:
        self._messages.extend(messages)

    def has_messages(self) -> bool:
        return bool(self._messages)

    def __str__(self) -> str:
        return "\n".join(m.format_message() for m in self._messages)


# ---------------------------------------------------------------------------
# Message subsystem
# ---------------------------------------------------------------------------


class MessageException(MsgForgeException):
    """Base for failures raised by the message subsystem itself."""


class MessageRecursionException(MessageException):
    """Nested message options exceeded the configured depth.

    Usually a message that (transitively) contains itself as an option.
    """


class FormatterConfigurationException(MessageException):
    """The configured formatter could not be imported or instantiated."""
