#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the HTML fragment builders."""

import pytest

from mdinline.renderers.html import (
    render_anchor,
    render_code,
    render_emphasis,
    render_image,
    render_line_break,
    render_ruby,
)


@pytest.mark.unit
class TestAnchor:
    def test_href_before_title(self) -> None:
        assert render_anchor("/x", "body", "T") == '<a href="/x" title="T">body</a>'

    def test_no_title(self) -> None:
        assert render_anchor("/x", "body") == '<a href="/x">body</a>'

    def test_empty_title_is_omitted(self) -> None:
        assert render_anchor("/x", "body", "") == '<a href="/x">body</a>'

    def test_body_is_not_escaped(self) -> None:
        assert render_anchor("/x", "<em>b</em>") == '<a href="/x"><em>b</em></a>'

    def test_attribute_values_are_escaped(self) -> None:
        result = render_anchor('/x?a="1"&b', "b", "<t>")
        assert result == '<a href="/x?a=&quot;1&quot;&amp;b" title="&lt;t&gt;">b</a>'


@pytest.mark.unit
class TestImage:
    def test_attribute_order(self) -> None:
        assert render_image("/i.png", "alt", "T") == '<img src="/i.png" alt="alt" title="T"/>'

    def test_no_title(self) -> None:
        assert render_image("/i.png", "alt") == '<img src="/i.png" alt="alt"/>'

    def test_alt_is_escaped(self) -> None:
        assert render_image("/i.png", 'a "b" <c>') == '<img src="/i.png" alt="a &quot;b&quot; &lt;c&gt;"/>'


@pytest.mark.unit
class TestOtherFragments:
    def test_code_escapes_body(self) -> None:
        assert render_code("a < b && c") == '<code class="inline">a &lt; b &amp;&amp; c</code>'

    def test_code_keeps_quotes(self) -> None:
        assert render_code('"q"') == '<code class="inline">"q"</code>'

    @pytest.mark.parametrize("tag", ["em", "strong", "del"])
    def test_emphasis_tags(self, tag) -> None:
        assert render_emphasis(tag, "x") == f"<{tag}>x</{tag}>"

    def test_unknown_emphasis_tag_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="Unsupported emphasis tag"):
            render_emphasis("script", "x")

    def test_ruby(self) -> None:
        assert render_ruby("漢字", "かんじ") == "<ruby>漢字<rt>かんじ</rt></ruby>"

    def test_line_break(self) -> None:
        assert render_line_break() == "<br/>"
