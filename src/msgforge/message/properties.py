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
"""Message subsystem configuration — binding and application."""

from __future__ import annotations

import importlib
import logging

from pydantic import BaseModel, ConfigDict, Field

from msgforge.context.language_context import LanguageContext
from msgforge.core.config import Config, config_properties
from msgforge.kernel.exceptions import FormatterConfigurationException
from msgforge.logging.port import LoggingPort
from msgforge.logging.structlog_adapter import StructlogAdapter
from msgforge.message.formatter import MessageFormatterHolder
from msgforge.message.message import Message
from msgforge.message.ports.outbound import MessageFormatter

_logger = logging.getLogger(__name__)


@config_properties(prefix="msgforge.message")
class MessageProperties(BaseModel):
    """Settings under ``msgforge.message``.

    Example ``msgforge.yaml``::

        msgforge:
          message:
            default-language: ja
            formatter: myapp.formatting:DollarFormatter
            max-depth: 32
    """

    model_config = ConfigDict(extra="ignore")

    default_language: str | None = None
    formatter: str | None = None
    max_depth: int = Field(default=64, ge=1)


def load_formatter(path: str) -> MessageFormatter:
    """Import and instantiate the formatter class named by *path*.

    Accepts ``package.module:ClassName`` or ``package.module.ClassName``.
    """
    if ":" in path:
        module_name, _, attr = path.partition(":")
    else:
        module_name, _, attr = path.rpartition(".")

    if not module_name or not attr:
        raise FormatterConfigurationException(
            f"Invalid formatter path '{path}'", code="FORMATTER_PATH", context={"formatter": path}
        )

    try:
        formatter_cls = getattr(importlib.import_module(module_name), attr)
    except (ImportError, AttributeError) as exc:
        raise FormatterConfigurationException(
            f"Cannot import formatter '{path}': {exc}", code="FORMATTER_IMPORT", context={"formatter": path}
        ) from exc

    try:
        formatter = formatter_cls()
    except TypeError as exc:
        raise FormatterConfigurationException(
            f"Cannot instantiate formatter '{path}': {exc}", code="FORMATTER_INIT", context={"formatter": path}
        ) from exc
    if not isinstance(formatter, MessageFormatter):
        raise FormatterConfigurationException(
            f"'{path}' does not implement MessageFormatter", code="FORMATTER_TYPE", context={"formatter": path}
        )
    return formatter


def configure_messages(config: Config, logging_port: LoggingPort | None = None) -> MessageProperties:
    """Apply ``msgforge.message`` settings to the process-wide state.

    Logging is configured first: through *logging_port* when given,
    otherwise through a :class:`StructlogAdapter` when the config has a
    ``msgforge.logging`` section. Meant to run once at startup, before
    any message is formatted.
    """
    if logging_port is None and config.get_section("msgforge.logging"):
        logging_port = StructlogAdapter()
    if logging_port is not None:
        logging_port.configure(config)

    props = config.bind(MessageProperties)

    if props.default_language:
        LanguageContext.set_default_language(props.default_language)
    if props.formatter:
        MessageFormatterHolder.set(load_formatter(props.formatter))
    Message.max_depth = props.max_depth

    _logger.info(
        "Message subsystem configured: default_language=%s formatter=%s max_depth=%d",
        LanguageContext.get_default_language(),
        type(MessageFormatterHolder.get()).__name__,
        props.max_depth,
    )
    return props
