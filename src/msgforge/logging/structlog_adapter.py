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
"""StructlogAdapter — LoggingPort backed by structlog."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Any

import structlog

from msgforge.context.language_context import LanguageContext
from msgforge.core.config import Config

if TYPE_CHECKING:
    from msgforge.message.message import Message

# MessageLevel name -> structlog method
_LEVEL_METHODS = {"INFO": "info", "WARN": "warning", "ERROR": "error"}


def add_language(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    """Processor recording the language messages are resolved in."""
    event_dict.setdefault("language", LanguageContext.resolve_language())
    return event_dict


class StructlogAdapter:
    """Logging adapter backed by structlog.

    Settings::

        msgforge:
          logging:
            format: json            # or console (default)
            level:
              root: INFO
              msgforge.message: DEBUG

    Every event carries the ``language`` in effect, so a logged message can
    be matched with the text the user saw.
    """

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        section = dict(config.get_section("msgforge.logging.level"))
        self._root_level = str(section.pop("root", "INFO")).upper()
        self._module_levels = {str(k): str(v).upper() for k, v in section.items()}
        self._format = str(config.get("msgforge.logging.format", "console")).lower()

        self._setup_structlog()
        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))

    def log_message(self, message: Message, logger_name: str = "msgforge.message") -> None:
        """Format *message* in the current language and log it.

        A message without a level is logged at INFO.
        """
        level = message.level.name if message.level is not None else "INFO"
        emit = getattr(self.get_logger(logger_name), _LEVEL_METHODS[level])
        emit(message.format_message(), message_id=message.message_id, message_level=level)

    def _setup_structlog(self) -> None:
        processors: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            add_language,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.UnicodeDecoder(),
        ]
        if self._format == "json":
            processors.append(structlog.processors.JSONRenderer())
        else:
            processors.append(structlog.dev.ConsoleRenderer())

        structlog.configure(
            processors=processors,
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(
            format="%(message)s",
            stream=sys.stdout,
            level=getattr(logging, self._root_level, logging.INFO),
            force=True,
        )
