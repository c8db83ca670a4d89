# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Message — a localized, leveled message with substitution options."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from contextvars import ContextVar
from typing import Any, ClassVar

from msgforge.context.language_context import LanguageContext
from msgforge.kernel.exceptions import MessageRecursionException
from msgforge.message.formatter import MessageFormatterHolder
from msgforge.message.level import MessageLevel
from msgforge.message.ports.outbound import StringResource

_logger = logging.getLogger(__name__)

_depth: ContextVar[int] = ContextVar("msgforge_message_depth", default=0)

_UNHASHABLE = 0


def _hash_option(option: Any) -> int:
    try:
        return hash(option)
    except TypeError:
        return _UNHASHABLE


class Message:
    """Binds a :class:`MessageLevel`, a :class:`StringResource` and options.

    The template is resolved for the current language each time
    :meth:`format_message` is called, so one instance can be rendered in
    several languages. Options that are themselves messages are formatted
    recursively; :class:`StringResource` options are resolved for the
    same language. Everything else is handed to the active formatter as is.

    Instances are immutable. Equality is structural but also requires the
    exact same class, so a subclass never equals a base-class instance.

    A message must not contain itself, directly or through nested options.
    Nesting beyond :attr:`max_depth` raises
    :class:`~msgforge.kernel.exceptions.MessageRecursionException`.
    """

    max_depth: ClassVar[int] = 64

    __slots__ = ("_level", "_resource", "_options")

    def __init__(
        self,
        level: MessageLevel | None,
        resource: StringResource | None,
        options: Sequence[Any] | None = None,
    ) -> None:
        self._level = level
        self._resource = resource
        self._options: tuple[Any, ...] = tuple(options) if options is not None else ()

    @property
    def level(self) -> MessageLevel | None:
        return self._level

    @property
    def message_id(self) -> str:
        """Id of the backing resource, or ``""`` when there is none."""
        if self._resource is None:
            return ""
        return self._resource.id

    @property
    def options(self) -> tuple[Any, ...]:
        return self._options

    def format_message(self) -> str:
        """Render the message in the current language.

        Exceptions raised by a custom formatter propagate unchanged.
        """
        depth = _depth.get()
        if depth >= self.max_depth:
            raise MessageRecursionException(
                f"Message '{self.message_id}' nested deeper than {self.max_depth} levels",
                code="MESSAGE_RECURSION",
                context={"message_id": self.message_id, "max_depth": self.max_depth},
            )

        token = _depth.set(depth + 1)
        try:
            language = LanguageContext.resolve_language()
            template = self._resolve_template(language)
            options = [self._resolve_option(option, language) for option in self._options]
            return MessageFormatterHolder.get().format(template, options)
        finally:
            _depth.reset(token)

    def _resolve_template(self, language: str) -> str:
        if self._resource is None:
            _logger.debug("Message has no string resource, formatting an empty template")
            return ""
        template = self._resource.get_value(language)
        if template is None:
            _logger.debug("No template for message '%s' in language '%s'", self._resource.id, language)
            return ""
        return template

    @staticmethod
    def _resolve_option(option: Any, language: str) -> Any:
        if isinstance(option, Message):
            return option.format_message()
        if isinstance(option, StringResource):
            value = option.get_value(language)
            return "" if value is None else value
        return option

    # ------------------------------------------------------------------
    # Value semantics
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Message):
            return NotImplemented
        if type(self) is not type(other):
            return False
        return (
            self._level == other._level
            and (self._resource is None) == (other._resource is None)
            and self.message_id == other.message_id
            and self._options == other._options
        )

    def __hash__(self) -> int:
        return hash(
            (
                type(self),
                self._level,
                self._resource is None,
                self.message_id,
                tuple(_hash_option(o) for o in self._options),
            )
        )

    def __str__(self) -> str:
        return self.format_message()

    def __repr__(self) -> str:
        level = self._level.name if self._level is not None else None
        return f"{type(self).__name__}(level={level}, id={self.message_id!r}, options={self._options!r})"
