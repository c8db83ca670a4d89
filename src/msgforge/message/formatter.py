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
"""Built-in message formatter and the process-wide formatter registry."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any, ClassVar

from msgforge.message.ports.outbound import MessageFormatter

_logger = logging.getLogger(__name__)

_INDEX_RE = re.compile(r"\{(\d+)\}")
_NAME_RE = re.compile(r"\{([^{}]+)\}")


def _to_text(value: Any) -> str:
    return "null" if value is None else str(value)


class BasicMessageFormatter:
    """Default formatter with ``{0}``-style positional placeholders.

    Rules:

    - a ``None`` template yields ``""``;
    - without options the template is returned untouched;
    - a single :class:`~collections.abc.Mapping` option switches to named
      placeholders, so ``{field}`` is replaced by ``options[0]["field"]``;
    - otherwise ``{N}`` is replaced by ``options[N]``.

    Placeholders that have no matching option are left as they are.
    """

    def format(self, template: str | None, options: Sequence[Any]) -> str:
        if template is None:
            return ""
        if not options:
            return template

        if len(options) == 1 and isinstance(options[0], Mapping):
            return self._format_named(template, options[0])
        return self._format_indexed(template, options)

    @staticmethod
    def _format_indexed(template: str, options: Sequence[Any]) -> str:
        def _replace(match: re.Match[str]) -> str:
            index = int(match.group(1))
            if index < len(options):
                return _to_text(options[index])
            return match.group(0)

        return _INDEX_RE.sub(_replace, template)

    @staticmethod
    def _format_named(template: str, values: Mapping[Any, Any]) -> str:
        def _replace(match: re.Match[str]) -> str:
            name = match.group(1)
            if name in values:
                return _to_text(values[name])
            return match.group(0)

        return _NAME_RE.sub(_replace, template)


class MessageFormatterHolder:
    """Process-wide slot for the active :class:`MessageFormatter`.

    Setting a formatter is a global side effect visible to every caller;
    configure it during startup (or in a test fixture) and call
    :meth:`clear` to fall back to :class:`BasicMessageFormatter`.
    """

    _default: ClassVar[MessageFormatter] = BasicMessageFormatter()
    _formatter: ClassVar[MessageFormatter | None] = None

    @classmethod
    def get(cls) -> MessageFormatter:
        if cls._formatter is None:
            return cls._default
        return cls._formatter

    @classmethod
    def set(cls, formatter: MessageFormatter) -> None:
        if not isinstance(formatter, MessageFormatter):
            raise TypeError(f"{type(formatter).__name__} does not implement MessageFormatter")
        cls._formatter = formatter
        _logger.debug("Message formatter set: %s", type(formatter).__name__)

    @classmethod
    def clear(cls) -> None:
        cls._formatter = None
        _logger.debug("Message formatter cleared, using BasicMessageFormatter")

    @classmethod
    def is_customized(cls) -> bool:
        return cls._formatter is not None
