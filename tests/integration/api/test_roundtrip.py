#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/integration/api/test_roundtrip.py
"""Round-trip tests for HTML -> document -> HTML.

The conversion is lossy, so the first round trip normalizes the markup.
From then on converting again must not change anything.

"""

import html

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from flowdoc import document_to_html, html_to_document
from flowdoc.ast import ValidationVisitor
from flowdoc.exceptions import ParsingError


def _normalize(markup: str) -> str:
    return document_to_html(html_to_document(markup), standalone=False)


_TEXT = st.text(alphabet="ab <>&\"'\n\t é", max_size=6).map(html.escape)

_LEAVES = st.one_of(
    _TEXT,
    st.just("<br>"),
    st.just('<img src="x.png" width="10">'),
    st.just('<img src="y.png" height="abc">'),
    st.just("<!-- c -->"),
)

_TAGS = [
    "p",
    "h1",
    "h2",
    "h4",
    "h6",
    "b",
    "strong",
    "i",
    "em",
    "ul",
    "ol",
    "li",
    "span",
    "div",
    'a href="u?a=1&amp;b=2"',
    "a",
    'font color="red" size="12"',
    'font face="Arial" weight="bold" decoration="underline"',
    'font style="italic" color="#00FF0080" decoration="none"',
    "font",
]


def _wrap(item: tuple[str, list[str]]) -> str:
    tag, children = item
    name = tag.split()[0]
    return f"<{tag}>{''.join(children)}</{name}>"


_MARKUP = st.recursive(
    _LEAVES,
    lambda children: st.tuples(st.sampled_from(_TAGS), st.lists(children, max_size=4)).map(_wrap),
    max_leaves=25,
)

_FRAGMENTS = st.lists(_MARKUP, max_size=4).map("".join)


@pytest.mark.integration
class TestExamples:
    """Round trips of small documents."""

    @pytest.mark.parametrize(
        "markup,expected",
        [
            ("<p>Hello</p>", "<p>Hello</p>"),
            ("<h2>Title</h2>", "<h2>Title</h2>"),
            ("<ul><li>A</li><li>B</li></ul>", "<ul><li>A</li><li>B</li></ul>"),
            ('<font color="#FF0000" weight="bold">X</font>', '<p><font color="#FF0000" weight="bold">X</font></p>'),
            ("hi  there", "<p>hi there</p>"),
            ('<img width="abc" height="20">', '<p><img src="" height="20"></p>'),
            ("<strong>s</strong> <em>e</em>", "<p><b>s</b></p><p><i>e</i></p>"),
            ("<ol><li><p>x</p></li></ol>", "<ol><li>x</li></ol>"),
            ('<font color="red">r</font>', '<p><font color="#FF0000">r</font></p>'),
            ("<font>plain</font>", "<p>plain</p>"),
            ("<p><ul><li>x</li></ul></p>", "<p><ul><li>x</li></ul></p>"),
            ("<div><p>gone</p></div><p>kept</p>", "<p>kept</p>"),
            ("<p>a &amp; b &lt;c&gt;</p>", "<p>a &amp; b &lt;c&gt;</p>"),
            ("", ""),
        ],
    )
    def test_normalized_output(self, markup, expected) -> None:
        """Test the normalized markup for representative inputs."""
        assert _normalize(markup) == expected

    @pytest.mark.parametrize(
        "markup",
        [
            "<ul><li>a<b>b</b></li></ul>",
            "<p>a<!-- x -->b</p>",
            '<font color="red"><b>x</b></font>',
            "<b><h1>T</h1></b>",
            "<li>stray</li>",
            "<ul>loose text</ul>",
        ],
    )
    def test_second_round_trip_is_stable(self, markup) -> None:
        """Test that normalized markup normalizes to itself."""
        once = _normalize(markup)
        assert _normalize(once) == once


@pytest.mark.integration
class TestProperties:
    """Property-based round-trip tests."""

    @given(_FRAGMENTS)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_fixed_point_after_one_round_trip(self, markup) -> None:
        """Test that the document stops changing after one round trip."""
        second = html_to_document(document_to_html(html_to_document(markup)))
        third = html_to_document(document_to_html(second))
        assert second == third
        assert document_to_html(second) == document_to_html(third)

    @given(_FRAGMENTS)
    @settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
    def test_documents_are_well_typed(self, markup) -> None:
        """Test that parsed documents always satisfy the container invariants."""
        validator = ValidationVisitor(strict=False)
        html_to_document(markup).accept(validator)
        assert validator.errors == []

    @given(st.text(max_size=200))
    @settings(deadline=None)
    def test_arbitrary_text_never_crashes(self, text) -> None:
        """Test that any input gives a document or a ParsingError."""
        try:
            doc = html_to_document(text)
        except ParsingError:
            return
        assert len(doc.blocks) == 1
        document_to_html(doc)
