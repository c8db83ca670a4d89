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
"""Ambient language context backed by contextvars.

Plays the role a ThreadLocal plays in servlet-style frameworks: the
current language is pinned per request (or per asyncio task) and read
by every :meth:`Message.format_message` call.
"""

from __future__ import annotations

import locale
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import ClassVar

_language: ContextVar[str | None] = ContextVar("msgforge_language", default=None)

_logger = logging.getLogger(__name__)

FALLBACK_LANGUAGE = "en"

_SUBTAG_SEPARATORS = ("_", "-")


def normalize_language(language: str) -> str:
    """Strip *language* and lower-case its language subtag.

    Region and variant subtags keep their case and separator, so
    ``"JA_JP"`` becomes ``"ja_JP"`` and ``"en-US"`` stays ``"en-US"``.
    """
    tag = language.strip()
    for index, char in enumerate(tag):
        if char in _SUBTAG_SEPARATORS:
            return tag[:index].lower() + tag[index:]
    return tag.lower()


def _system_language() -> str:
    """Language part of the interpreter locale, e.g. ``"ja"`` for ``ja_JP``."""
    try:
        tag = locale.getlocale()[0]
    except ValueError:
        tag = None
    if not tag or tag in ("C", "POSIX"):
        return FALLBACK_LANGUAGE
    return normalize_language(tag.replace("-", "_").split("_")[0])


class LanguageContext:
    """Reads and pins the language used to resolve message templates.

    The per-task language lives in a :class:`~contextvars.ContextVar`; the
    default language is process-wide and applies when none is pinned.
    """

    _default_language: ClassVar[str | None] = None

    # ── per-task language ──────────────────────────────────────

    @staticmethod
    def get_language() -> str | None:
        return _language.get()

    @staticmethod
    def set_language(language: str) -> None:
        _language.set(normalize_language(language))
        _logger.debug("Language set: %s", language)

    @staticmethod
    def clear() -> None:
        _language.set(None)

    @staticmethod
    @contextmanager
    def use_language(language: str) -> Iterator[str]:
        """Pin *language* for the duration of the ``with`` block."""
        normalized = normalize_language(language)
        token = _language.set(normalized)
        try:
            yield normalized
        finally:
            _language.reset(token)

    # ── process-wide default ───────────────────────────────────

    @classmethod
    def get_default_language(cls) -> str:
        if cls._default_language is None:
            cls._default_language = _system_language()
        return cls._default_language

    @classmethod
    def set_default_language(cls, language: str) -> None:
        cls._default_language = normalize_language(language)

    @classmethod
    def reset_default_language(cls) -> None:
        cls._default_language = None

    @classmethod
    def resolve_language(cls) -> str:
        """The pinned language, or the default language when none is pinned."""
        language = _language.get()
        if language is None:
            return cls.get_default_language()
        return language
