#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for individual inline rules and rule set construction."""

import pytest

from mdinline import IdDef, InlineOptions, LinkTable
from mdinline.parsers.rules import (
    AutolinkRule,
    CodeSpanRule,
    DelimitedRule,
    EscapeRule,
    InlineImageRule,
    InlineLinkRule,
    InlineMatch,
    InlineRule,
    LineBreakRule,
    RawHtmlRule,
    ReferenceImageRule,
    ReferenceLinkRule,
    ReferenceRule,
    RubyRule,
    ShorthandReferenceRule,
    build_rule_set,
)


def _identity(text: str) -> str:
    return text


def _names(options: InlineOptions) -> list[str]:
    return [rule.name for rule in build_rule_set(options, LinkTable())]


@pytest.mark.unit
class TestBuildRuleSet:
    """Tests for precedence order and mode gating."""

    def test_extended_mode_order(self) -> None:
        assert _names(InlineOptions()) == [
            "escape",
            "line_break",
            "ruby",
            "autolink",
            "code",
            "image",
            "link",
            "reference_image",
            "reference_link",
            "shorthand_reference",
            "strong",
            "emphasis",
            "strikethrough",
            "html",
        ]

    def test_strikethrough_only_in_extended_mode(self) -> None:
        assert "strikethrough" not in _names(InlineOptions(gfm=False))

    def test_html_is_last(self) -> None:
        assert _names(InlineOptions(gfm=False, pedantic=True))[-1] == "html"

    def test_extended_escapes_include_tilde_and_pipe(self) -> None:
        escape = build_rule_set(InlineOptions(), LinkTable())[0]
        assert isinstance(escape, EscapeRule)
        assert "~" in escape.escapable and "|" in escape.escapable

    def test_classic_escapes_exclude_tilde(self) -> None:
        escape = build_rule_set(InlineOptions(gfm=False), LinkTable())[0]
        assert "~" not in escape.escapable

    def test_resolution_is_deterministic(self) -> None:
        options = InlineOptions(pedantic=True)
        first = [repr(rule) for rule in build_rule_set(options, LinkTable())]
        second = [repr(rule) for rule in build_rule_set(options, LinkTable())]
        assert first == second

    def test_pedantic_takes_precedence_for_emphasis_strictness(self) -> None:
        rules = build_rule_set(InlineOptions(gfm=True, pedantic=True), LinkTable())
        emphasis = next(rule for rule in rules if rule.name == "emphasis")
        assert emphasis.try_match("* x *", 0, _identity) is None


@pytest.mark.unit
class TestInlineMatch:
    def test_zero_length_is_rejected(self) -> None:
        with pytest.raises(ValueError):
            InlineMatch(0, lambda: "")


@pytest.mark.unit
class TestIndividualRules:
    """Tests for rules matched in isolation."""

    def test_escape_consumes_two_characters(self) -> None:
        match = EscapeRule("*").try_match("a\\*b", 1, _identity)
        assert match is not None
        assert match.length == 2
        assert match.render() == "*"

    def test_escape_declines_other_characters(self) -> None:
        assert EscapeRule("*").try_match("\\x", 0, _identity) is None

    def test_code_span_length_covers_delimiters(self) -> None:
        match = CodeSpanRule().try_match("``a ` b`` tail", 0, _identity)
        assert match is not None
        assert match.length == len("``a ` b``")
        assert match.render() == '<code class="inline">a ` b</code>'

    def test_autolink_requires_angle_brackets(self) -> None:
        assert AutolinkRule().try_match("http://x.com", 0, _identity) is None

    def test_autolink_with_mailto_scheme_is_a_url(self) -> None:
        match = AutolinkRule().try_match("<mailto:a@b.c>", 0, _identity)
        assert match is not None
        assert match.render() == '<a href="mailto:a@b.c">mailto:a@b.c</a>'

    def test_raw_html_is_verbatim(self) -> None:
        match = RawHtmlRule().try_match('<em class="x">', 0, _identity)
        assert match is not None
        assert match.render() == '<em class="x">'

    def test_raw_html_requires_tag_name(self) -> None:
        assert RawHtmlRule().try_match("<=>", 0, _identity) is None

    def test_reference_link_declines_undefined_id(self) -> None:
        rule = ReferenceLinkRule(LinkTable({"a": IdDef("/a")}))
        assert rule.try_match("[x][b]", 0, _identity) is None

    def test_reference_link_uses_converter_for_label(self) -> None:
        rule = ReferenceLinkRule(LinkTable({"a": IdDef("/a")}))
        match = rule.try_match("[x][A]", 0, str.upper)
        assert match is not None
        assert match.render() == '<a href="/a">X</a>'

    def test_shorthand_declines_when_followed_by_bracket(self) -> None:
        rule = ShorthandReferenceRule(LinkTable({"a": IdDef("/a")}))
        assert rule.try_match("[a] [b]", 0, _identity) is None

    def test_delimited_rule_wraps_converted_body(self) -> None:
        rule = build_rule_set(InlineOptions(), LinkTable())[-2]
        assert isinstance(rule, DelimitedRule)
        match = rule.try_match("~~gone~~", 0, str.upper)
        assert match is not None
        assert match.render() == "<del>GONE</del>"

    def test_word_boundary_looks_before_cursor(self) -> None:
        emphasis = next(rule for rule in build_rule_set(InlineOptions(), LinkTable()) if rule.name == "emphasis")
        assert emphasis.try_match("a_b_ c", 1, _identity) is None
        assert emphasis.try_match("a _b_ c", 2, _identity) is not None


@pytest.mark.unit
class TestRuleClasses:
    """Tests for the rule class hierarchy."""

    def test_base_rule_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            InlineRule(RawHtmlRule().pattern)

    def test_rule_without_accept_cannot_be_built(self) -> None:
        class Incomplete(InlineRule):
            name = "incomplete"

        with pytest.raises(TypeError):
            Incomplete(RawHtmlRule().pattern)

    @pytest.mark.parametrize(
        "rule_class",
        [
            EscapeRule,
            LineBreakRule,
            RubyRule,
            AutolinkRule,
            CodeSpanRule,
            InlineImageRule,
            InlineLinkRule,
            ReferenceRule,
            ReferenceImageRule,
            ReferenceLinkRule,
            ShorthandReferenceRule,
            DelimitedRule,
            RawHtmlRule,
        ],
    )
    def test_every_rule_is_documented(self, rule_class) -> None:
        assert rule_class.__doc__

    def test_only_rules_converting_sub_text_nest(self) -> None:
        rules = build_rule_set(InlineOptions(), LinkTable())
        assert {rule.name for rule in rules if rule.nests} == {
            "link",
            "reference_image",
            "reference_link",
            "shorthand_reference",
            "strong",
            "emphasis",
            "strikethrough",
        }
