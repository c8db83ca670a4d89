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
"""LoggingPort — how the message subsystem reaches the application's logging."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from msgforge.core.config import Config

if TYPE_CHECKING:
    from msgforge.message.message import Message


@runtime_checkable
class LoggingPort(Protocol):
    """Configures logging from ``msgforge.logging`` and emits messages as log events."""

    def configure(self, config: Config) -> None: ...
    def get_logger(self, name: str) -> Any: ...
    def set_level(self, name: str, level: str) -> None: ...

    def log_message(self, message: Message, logger_name: str = "msgforge.message") -> None:
        """Emit *message* at the log level matching its :class:`MessageLevel`."""
        ...
