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
"""StringResource and MessageFormatter protocols — ports consumed by Message."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class StringResource(Protocol):
    """A locale-keyed template source for a single message id.

    Implementations are owned by whatever catalog supplies them; a
    :class:`~msgforge.message.message.Message` only holds a reference.
    """

    @property
    def id(self) -> str: ...

    def get_value(self, language: str) -> str | None:
        """Return the template for exactly *language*, or ``None``.

        No fallback to other languages is performed.
        """
        ...


@runtime_checkable
class MessageFormatter(Protocol):
    """Combines a template with ordered substitution values.

    Must be deterministic and free of side effects.
    """

    def format(self, template: str, options: Sequence[Any]) -> str: ...
