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
"""msgforge — localized message resolution and formatting."""

from msgforge.context.language_context import LanguageContext
from msgforge.kernel.exceptions import ApplicationException
from msgforge.message import (
    BasicMessageFormatter,
    BasicStringResource,
    Message,
    MessageFormatter,
    MessageFormatterHolder,
    MessageLevel,
    StringResource,
    configure_messages,
)

__version__ = "0.1.0"

__all__ = [
    "ApplicationException",
    "BasicMessageFormatter",
    "BasicStringResource",
    "LanguageContext",
    "Message",
    "MessageFormatter",
    "MessageFormatterHolder",
    "MessageLevel",
    "StringResource",
    "configure_messages",
]
