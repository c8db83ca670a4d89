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
"""Dict-backed StringResource."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from msgforge.context.language_context import normalize_language


class BasicStringResource:
    """A :class:`StringResource` holding its templates in a plain mapping.

    Usage::

        resource = BasicStringResource("E0001", {"en": "{0} is required", "ja": "{0}は必須です"})
        resource.get_value("en")   # "{0} is required"
        resource.get_value("fr")   # None

    Keys and lookups go through :func:`normalize_language`, so the
    language subtag is case-insensitive while the region is matched as given.
    """

    __slots__ = ("_id", "_values")

    def __init__(self, id: str, values: Mapping[str, str] | None = None) -> None:  # noqa: A002
        self._id = id
        self._values: dict[str, str] = {normalize_language(k): v for k, v in (values or {}).items()}

    @property
    def id(self) -> str:
        return self._id

    @property
    def languages(self) -> frozenset[str]:
        return frozenset(self._values)

    def get_value(self, language: str) -> str | None:
        return self._values.get(normalize_language(language))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BasicStringResource):
            return NotImplemented
        return self._id == other._id and self._values == other._values

    def __hash__(self) -> int:
        return hash((self._id, frozenset(self._values.items())))

    def __repr__(self) -> str:
        return f"BasicStringResource(id={self._id!r}, languages={sorted(self._values)!r})"
