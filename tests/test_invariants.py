"""Property-based tests for parser and transformer invariants using Hypothesis.

These verify the never-raises and determinism guarantees for arbitrary
input, including input made only of markup punctuation.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from prettyparse import parse, pretty_print, render
from prettyparse.nodes import Element, Fragment, Node, Text
from prettyparse.parser import Parser
from prettyparse.renderers import OutlineRenderer
from prettyparse.serialization import from_json, to_json

_MARKUP = st.text(alphabet="<>!-/='\" \nabpBR", max_size=200)
_NO_SLASH_MARKUP = st.text(alphabet="<>!-='\" \nabpBR", max_size=200)


def _count_elements(node: Node) -> int:
    match node:
        case Fragment():
            return sum(_count_elements(c) for c in node.children)
        case Element():
            inner = _count_elements(node.children) if node.children is not None else 0
            return 1 + inner
        case _:
            return 0


class TestNeverRaises:
    """Any text produces a tree."""

    @given(st.text(max_size=500))
    @settings(max_examples=200)
    def test_arbitrary_text(self, source: str) -> None:
        tree = render(parse(source))
        assert tree is not None

    @given(_MARKUP)
    @settings(max_examples=300)
    def test_markup_punctuation(self, source: str) -> None:
        assert isinstance(pretty_print(source), str)
        assert isinstance(OutlineRenderer().render(render(parse(source))), str)

    @given(_NO_SLASH_MARKUP)
    @settings(max_examples=100)
    def test_input_without_close_marker_fully_read(self, source: str) -> None:
        parser = Parser(source)
        parser.parse()
        assert parser.scanner.at_end

    @given(_MARKUP)
    @settings(max_examples=100)
    def test_parse_ends_at_input_end_or_close_marker(self, source: str) -> None:
        parser = Parser(source)
        parser.parse()
        remainder = parser.scanner.remainder
        assert remainder == "" or remainder.startswith("</")


class TestStructure:
    """Shape guarantees."""

    @given(st.text(min_size=1, max_size=300).filter(lambda s: "<" not in s))
    @settings(max_examples=100)
    def test_text_without_brackets_is_single_text_node(self, source: str) -> None:
        assert parse(source) == Fragment((Text(source),))

    @given(_MARKUP)
    @settings(max_examples=100)
    def test_element_count_bounded_by_brackets(self, source: str) -> None:
        assert _count_elements(parse(source)) <= source.count("<")

    @given(_MARKUP)
    @settings(max_examples=100)
    def test_no_adjacent_text_nodes(self, source: str) -> None:
        def check(fragment: Fragment) -> None:
            previous_text = False
            for child in fragment.children:
                is_text = isinstance(child, Text)
                assert not (is_text and previous_text)
                previous_text = is_text
                if isinstance(child, Element) and child.children is not None:
                    check(child.children)

        check(parse(source))


class TestDeterminism:
    """Repeated parses and renders agree."""

    @given(_MARKUP)
    @settings(max_examples=100)
    def test_rewind_reproduces_fresh_parse(self, source: str) -> None:
        parser = Parser(source)
        parser.parse()
        parser.scanner.rewind()
        assert parser.parse() == Parser(source).parse()

    @given(_MARKUP)
    @settings(max_examples=100)
    def test_render_twice_equal(self, source: str) -> None:
        fragment = parse(source)
        assert render(fragment) == render(fragment)

    @given(_MARKUP)
    @settings(max_examples=50)
    def test_json_round_trip(self, source: str) -> None:
        tree = render(parse(source))
        assert from_json(to_json(tree)) == tree
