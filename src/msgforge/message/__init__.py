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
"""msgforge messages — localized, leveled messages with pluggable formatting.

Usage::

    from msgforge.message import BasicStringResource, Message, MessageLevel

    required = BasicStringResource("E0001", {"en": "{0} is required."})
    Message(MessageLevel.ERROR, required, ["name"]).format_message()
"""

from msgforge.message.formatter import BasicMessageFormatter, MessageFormatterHolder
from msgforge.message.level import MessageLevel
from msgforge.message.message import Message
from msgforge.message.ports.outbound import MessageFormatter, StringResource
from msgforge.message.properties import MessageProperties, configure_messages, load_formatter
from msgforge.message.resource import BasicStringResource

__all__ = [
    "BasicMessageFormatter",
    "BasicStringResource",
    "Message",
    "MessageFormatter",
    "MessageFormatterHolder",
    "MessageLevel",
    "MessageProperties",
    "StringResource",
    "configure_messages",
    "load_formatter",
]
