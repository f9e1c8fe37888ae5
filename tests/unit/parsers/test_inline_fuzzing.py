"""Property-based tests for the inline converter.

This test module uses Hypothesis to generate random input and validate the
guarantees the converter makes for every input:

- Conversion never raises and always returns a string
- Text without markup characters converts to itself
- Escaping of plain text happens exactly once
- Backslash escapes never trigger lower-precedence constructs
- Contexts can be shared between threads
"""

import re
from concurrent.futures import ThreadPoolExecutor

import pytest
from hypothesis import given, settings, strategies as st

from mdinline import IdDef, InlineOptions, convert, resolve_context
from mdinline.constants import ESCAPABLE_CHARS

MARKUP_CHARS = "\\*_`[<&~{"

CONTEXTS = [
    resolve_context(),
    resolve_context(InlineOptions(gfm=False, pedantic=True)),
    resolve_context(InlineOptions(gfm=False, pedantic=False), {"id1": IdDef("url 1", "title 1")}),
]

plain_text = st.text(alphabet=st.characters(exclude_characters=MARKUP_CHARS + ">"), max_size=200)


@pytest.mark.unit
@pytest.mark.fuzzing
class TestInlineConverterProperties:
    """Property-based tests for conversion totality and escaping."""

    @given(st.text(max_size=300), st.sampled_from(CONTEXTS))
    def test_arbitrary_text_never_raises(self, text, context):
        """Property: any string converts to a string."""
        result = convert(text, context)
        assert isinstance(result, str)

    @given(st.text(alphabet="*_`[]()!<>{}~\\ \n&abc", max_size=120), st.sampled_from(CONTEXTS))
    def test_markup_heavy_text_never_raises(self, text, context):
        """Property: dense delimiter soup degrades gracefully."""
        assert isinstance(convert(text, context), str)

    @given(plain_text, st.sampled_from(CONTEXTS))
    def test_literal_text_round_trips(self, text, context):
        """Property: text without markup characters is returned unchanged."""
        # Two spaces before a newline are a line break, not literal text
        text = re.sub(r" {2,}\n", " \n", text)
        assert convert(text, context) == text

    @given(st.text(alphabet=st.characters(exclude_characters=MARKUP_CHARS), max_size=100).filter(
        lambda s: "  \n" not in s
    ))
    def test_greater_than_is_escaped_once(self, text):
        """Property: '>' is escaped exactly once in plain text."""
        assert convert(text) == text.replace(">", "&gt;")

    @given(st.sampled_from(sorted(set(ESCAPABLE_CHARS))), st.sampled_from(CONTEXTS))
    def test_escaped_punctuation_is_literal(self, char, context):
        """Property: a backslash escape yields the bare (HTML-safe) character."""
        expected = "&gt;" if char == ">" else char
        assert convert("\\" + char, context) == expected


@pytest.mark.unit
class TestSharedContext:
    """Tests for sharing one context between threads."""

    def test_concurrent_conversions_agree(self, pedantic_context):
        inputs = ["a [my link][id1] link", "hello *world*", "the `printf` function", "![x][img1]"] * 25
        expected = [convert(text, pedantic_context) for text in inputs]

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(lambda text: convert(text, pedantic_context), inputs))

        assert results == expected


@pytest.mark.unit
@pytest.mark.fuzzing
class TestDeepNesting:
    """Tests for pathologically deep delimiter nesting."""

    @pytest.mark.parametrize("delimiter", ["*", "_", "**", "~~"])
    @pytest.mark.parametrize("context", CONTEXTS)
    def test_deep_delimiter_runs_do_not_raise(self, delimiter, context):
        text = delimiter * 2000 + "a" + delimiter * 2000
        result = convert(text, context)
        assert isinstance(result, str)
        assert "a" in result

    @given(st.integers(min_value=1, max_value=2500), st.sampled_from(CONTEXTS))
    @settings(max_examples=20, deadline=5000)
    def test_any_run_length_converts(self, depth, context):
        """Property: delimiter runs of any length convert without error."""
        assert isinstance(convert("*" * depth + "a" + "*" * depth, context), str)
