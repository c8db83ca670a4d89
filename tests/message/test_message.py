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
"""Tests for Message — template resolution, nesting, formatting and equality."""

import pytest

from msgforge.context.language_context import LanguageContext
from msgforge.kernel.exceptions import MessageRecursionException
from msgforge.message.formatter import MessageFormatterHolder
from msgforge.message.level import MessageLevel
from msgforge.message.message import Message
from msgforge.message.resource import BasicStringResource


def _resource(id: str, template: str) -> BasicStringResource:
    """Resource with a single template for the default language ("ja")."""
    return BasicStringResource(id, {"ja": template})


class _IdOnlyResource:
    """StringResource without value equality, compared by identity only."""

    def __init__(self, id: str, template: str) -> None:
        self._id = id
        self._template = template

    @property
    def id(self) -> str:
        return self._id

    def get_value(self, language: str) -> str | None:
        return self._template


class DollarFormatter:
    def format(self, template, options):
        result = template
        for i, option in enumerate(options):
            result = result.replace("${" + str(i) + "}", str(option))
        return result


class ExplodingFormatter:
    def format(self, template, options):
        raise RuntimeError("formatter failed")


class TestMessageConstruction:
    def test_with_options(self):
        inner = _resource("0001", "testInner")
        message = Message(MessageLevel.INFO, _resource("1001", "{0},{1}"), ["test", inner])
        assert message.message_id == "1001"
        assert message.format_message() == "test,testInner"
        assert message.level is MessageLevel.INFO

    def test_without_options_warn(self):
        message = Message(MessageLevel.WARN, _resource("1001", "test message"))
        assert message.message_id == "1001"
        assert message.format_message() == "test message"
        assert message.level is MessageLevel.WARN

    def test_without_options_error(self):
        message = Message(MessageLevel.ERROR, _resource("1001", "test message"))
        assert message.message_id == "1001"
        assert message.format_message() == "test message"
        assert message.level is MessageLevel.ERROR

    def test_none_options_behave_as_empty(self):
        message = Message(MessageLevel.INFO, _resource("1001", "plain"), None)
        assert message.options == ()
        assert message.format_message() == "plain"

    def test_options_are_a_read_only_copy(self):
        source = ["a", "b"]
        message = Message(MessageLevel.INFO, _resource("1001", "{0}{1}"), source)
        source.append("c")
        assert message.options == ("a", "b")
        assert isinstance(message.options, tuple)

    def test_resource_without_value_equality_is_accepted(self):
        message = Message(MessageLevel.INFO, _IdOnlyResource("2001", "hi {0}"), ["there"])
        assert message.message_id == "2001"
        assert message.format_message() == "hi there"


class TestMessageFormatting:
    @pytest.fixture
    def message(self):
        outer = BasicStringResource("1001", {"ja": "テスト {0}", "en": "test {0}"})
        inner = BasicStringResource("0001", {"ja": "テストインナー", "en": "testInner"})
        return Message(MessageLevel.ERROR, outer, [Message(MessageLevel.ERROR, inner)])

    def test_default_language(self, message):
        assert message.message_id == "1001"
        assert message.format_message() == "テスト テストインナー"

    def test_switching_language_without_reconstruction(self, message):
        assert message.format_message() == "テスト テストインナー"

        LanguageContext.set_language("en")

        assert message.message_id == "1001"
        assert message.format_message() == "test testInner"
        assert message.level is MessageLevel.ERROR

    def test_use_language_block(self, message):
        with LanguageContext.use_language("en"):
            assert message.format_message() == "test testInner"
        assert message.format_message() == "テスト テストインナー"

    def test_deeply_nested_messages(self):
        leaf = Message(MessageLevel.INFO, _resource("3", "leaf"))
        middle = Message(MessageLevel.INFO, _resource("2", "<{0}>"), [leaf])
        top = Message(MessageLevel.INFO, _resource("1", "[{0}|{1}]"), [middle, 7])
        assert top.format_message() == "[<leaf>|7]"

    def test_str_formats(self):
        message = Message(MessageLevel.INFO, _resource("1", "hello {0}"), ["world"])
        assert str(message) == "hello world"

    def test_repr_does_not_format(self):
        message = Message(MessageLevel.WARN, _resource("1", "hello"), ["x"])
        assert repr(message) == "Message(level=WARN, id='1', options=('x',))"


class TestRegionLanguages:
    @pytest.fixture
    def message(self):
        resource = BasicStringResource("1001", {"ja_JP": "JP {0}", "en-US": "US {0}"})
        return Message(MessageLevel.INFO, resource, ["x"])

    def test_pinned_region_language(self, message):
        with LanguageContext.use_language("ja_JP"):
            assert message.format_message() == "JP x"

    def test_default_region_language(self, message):
        LanguageContext.set_default_language("en-US")
        assert message.format_message() == "US x"

    def test_language_subtag_is_case_insensitive(self, message):
        with LanguageContext.use_language("JA_JP"):
            assert message.format_message() == "JP x"

    def test_region_is_matched_exactly(self, message):
        with LanguageContext.use_language("ja-JP"):
            assert message.format_message() == ""
        with LanguageContext.use_language("ja"):
            assert message.format_message() == ""


class TestMissingTemplate:
    def test_none_resource_formats_to_empty(self):
        message = Message(MessageLevel.ERROR, None)
        assert message.message_id == ""
        assert message.format_message() == ""

    def test_none_resource_with_options(self):
        message = Message(MessageLevel.ERROR, None, ["a", "b"])
        assert message.format_message() == ""

    def test_template_missing_for_language(self):
        message = Message(MessageLevel.ERROR, BasicStringResource("1001", {"en": "english only"}))
        assert message.format_message() == ""
        LanguageContext.set_language("en")
        assert message.format_message() == "english only"

    def test_string_resource_option_missing_for_language(self):
        inner = BasicStringResource("0001", {"en": "inner"})
        message = Message(MessageLevel.ERROR, _resource("1001", "[{0}]"), [inner])
        assert message.format_message() == "[]"


class TestEquality:
    def test_same_object(self):
        one = Message(MessageLevel.ERROR, _resource("0001", ""))
        assert one == one

    def test_equal_object(self):
        one = Message(MessageLevel.ERROR, _resource("0001", ""))
        another = Message(MessageLevel.ERROR, _resource("0001", ""))
        assert one == another
        assert hash(one) == hash(another)

    def test_equal_by_resource_id(self):
        one = Message(MessageLevel.ERROR, _IdOnlyResource("0001", ""))
        another = Message(MessageLevel.ERROR, _IdOnlyResource("0001", ""))
        assert one == another
        assert hash(one) == hash(another)

    def test_equal_without_resource(self):
        one = Message(MessageLevel.ERROR, None)
        another = Message(MessageLevel.ERROR, None)
        assert one == another
        assert hash(one) == hash(another)

    def test_equal_without_level(self):
        one = Message(None, _resource("0001", ""))
        another = Message(None, _resource("0001", ""))
        assert one == another
        assert hash(one) == hash(another)

    def test_equal_with_unhashable_options(self):
        one = Message(MessageLevel.INFO, _resource("0001", ""), [["a"], {"k": 1}])
        another = Message(MessageLevel.INFO, _resource("0001", ""), [["a"], {"k": 1}])
        assert one == another
        assert hash(one) == hash(another)

    def test_usable_in_sets(self):
        messages = {
            Message(MessageLevel.ERROR, _resource("0001", "")),
            Message(MessageLevel.ERROR, _resource("0001", "")),
            Message(MessageLevel.WARN, _resource("0001", "")),
        }
        assert len(messages) == 2


class TestInequality:
    @staticmethod
    def _assert_not_equal(one, another):
        assert one != another
        assert not (one == another)
        assert hash(one) != hash(another)

    def test_compare_to_none(self):
        assert Message(None, None) != None  # noqa: E711
        assert (Message(None, None) == None) is False  # noqa: E711

    def test_compare_to_other_type(self):
        assert Message(MessageLevel.ERROR, None) != "Message"

    def test_subclass_differs(self):
        class CustomMessage(Message):
            __slots__ = ()

        one = Message(MessageLevel.ERROR, None)
        another = CustomMessage(MessageLevel.ERROR, None)
        assert one != another
        assert another != one

    def test_level_differs(self):
        self._assert_not_equal(Message(MessageLevel.ERROR, None), Message(MessageLevel.WARN, None))

    def test_resource_differs(self):
        self._assert_not_equal(
            Message(MessageLevel.ERROR, _resource("0001", "")),
            Message(MessageLevel.ERROR, _resource("9999", "")),
        )

    def test_level_none_on_one_side(self):
        self._assert_not_equal(
            Message(MessageLevel.ERROR, _resource("0001", "")),
            Message(None, _resource("0001", "")),
        )

    def test_resource_none_on_one_side(self):
        self._assert_not_equal(
            Message(MessageLevel.ERROR, None),
            Message(MessageLevel.ERROR, _resource("9999", "")),
        )

    def test_resource_none_on_other_side(self):
        self._assert_not_equal(
            Message(MessageLevel.ERROR, _resource("0001", "")),
            Message(MessageLevel.ERROR, None),
        )

    def test_none_resource_differs_from_empty_id(self):
        self._assert_not_equal(
            Message(MessageLevel.ERROR, None),
            Message(MessageLevel.ERROR, _resource("", "")),
        )

    def test_option_differs(self):
        self._assert_not_equal(
            Message(MessageLevel.ERROR, _resource("0001", ""), ["foo", "bar"]),
            Message(MessageLevel.ERROR, _resource("0001", ""), ["foo", "baz"]),
        )

    def test_option_order_differs(self):
        self._assert_not_equal(
            Message(MessageLevel.ERROR, _resource("0001", ""), ["foo", "bar"]),
            Message(MessageLevel.ERROR, _resource("0001", ""), ["bar", "foo"]),
        )


class TestCustomFormatter:
    def test_custom_formatter_is_used(self):
        MessageFormatterHolder.set(DollarFormatter())
        message = Message(MessageLevel.ERROR, _resource("id", "${0}-${0}-${1}"), ["1", "2"])
        assert message.format_message() == "1-1-2"

    def test_default_resumes_after_clear(self):
        message = Message(MessageLevel.ERROR, _resource("id", "${0}-{0}"), ["1"])
        MessageFormatterHolder.set(DollarFormatter())
        assert message.format_message() == "1-{0}"
        MessageFormatterHolder.clear()
        assert message.format_message() == "$1-1"

    def test_custom_formatter_receives_formatted_nested_messages(self):
        MessageFormatterHolder.set(DollarFormatter())
        inner = Message(MessageLevel.INFO, _resource("2", "inner"))
        message = Message(MessageLevel.ERROR, _resource("1", "(${0})"), [inner])
        assert message.format_message() == "(inner)"

    def test_formatter_errors_propagate(self):
        MessageFormatterHolder.set(ExplodingFormatter())
        message = Message(MessageLevel.ERROR, _resource("1", "x"))
        with pytest.raises(RuntimeError, match="formatter failed"):
            message.format_message()


class TestRecursionGuard:
    def test_self_referencing_message_raises(self):
        # Options are copied on construction, so a cycle has to be patched in.
        cyclic = Message(MessageLevel.ERROR, _resource("loop", "{0}"))
        cyclic._options = (cyclic,)

        with pytest.raises(MessageRecursionException) as exc_info:
            cyclic.format_message()
        assert exc_info.value.code == "MESSAGE_RECURSION"
        assert exc_info.value.context["message_id"] == "loop"

    def test_depth_limit_is_configurable(self):
        Message.max_depth = 2
        leaf = Message(MessageLevel.INFO, _resource("3", "leaf"))
        middle = Message(MessageLevel.INFO, _resource("2", "{0}"), [leaf])
        top = Message(MessageLevel.INFO, _resource("1", "{0}"), [middle])

        assert middle.format_message() == "leaf"
        with pytest.raises(MessageRecursionException):
            top.format_message()

    def test_depth_resets_after_failure(self):
        Message.max_depth = 1
        inner = Message(MessageLevel.INFO, _resource("2", "inner"))
        outer = Message(MessageLevel.INFO, _resource("1", "{0}"), [inner])
        with pytest.raises(MessageRecursionException):
            outer.format_message()
        assert inner.format_message() == "inner"
