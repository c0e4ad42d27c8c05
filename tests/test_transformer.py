"""Tests for the pretty transformer (generic tree -> presentation tree)."""

from collections.abc import Sequence

import pytest

from prettyparse import parse, render
from prettyparse.errors import RenderError
from prettyparse.nodes import Attribute, Comment, Element, Fragment, Text
from prettyparse.presentation import PPFragment, PPKind, PPNode
from prettyparse.transformer import PrettyTransformer


def _only(source: str) -> PPNode:
    tree = render(parse(source))
    assert isinstance(tree, PPFragment)
    assert len(tree.children) == 1
    return tree.children[0]


def _kinds(node: PPNode) -> list[PPKind]:
    return [child.kind for child in node.children]


def _depth(node: PPNode) -> int:
    nested = [_depth(c) for c in node.children if c.kind is PPKind.ELEMENT]
    return 1 + max(nested, default=0)


class TestElements:
    """Element wrappers, open tags and close tags."""

    def test_well_formed_element(self) -> None:
        element = _only('<tag attr="v">text</tag>')
        assert element.kind is PPKind.ELEMENT
        assert _kinds(element) == [PPKind.OPEN_TAG, PPKind.TEXT, PPKind.CLOSE_TAG]

        open_tag, text, close_tag = element.children
        assert not open_tag.empty
        assert open_tag.children[0] == PPNode(PPKind.TAG_NAME, text="tag")
        attribute = open_tag.children[1]
        assert attribute.kind is PPKind.ATTRIBUTE
        assert attribute.find(PPKind.ATTR_NAME).text == "attr"
        assert attribute.find(PPKind.ATTR_VALUE).text == "v"
        assert text.text == "text"
        assert close_tag.children == (PPNode(PPKind.TAG_NAME, text="tag"),)

    @pytest.mark.parametrize("source", ["<br>", '<img src="x">', "<foo/>", "<p></p>"])
    def test_childless_elements_have_empty_open_tag_only(self, source: str) -> None:
        element = _only(source)
        assert _kinds(element) == [PPKind.OPEN_TAG]
        assert element.children[0].empty
        assert element.find(PPKind.CLOSE_TAG) is None

    @pytest.mark.parametrize("children", [None, Fragment()])
    def test_constructed_element_without_content(self, children: Fragment | None) -> None:
        element = PrettyTransformer().render(Element("p", (Attribute("id", "x"),), children))
        assert _kinds(element) == [PPKind.OPEN_TAG]
        assert element.children[0].empty
        assert _kinds(element.children[0]) == [PPKind.TAG_NAME, PPKind.ATTRIBUTE]

    def test_constructed_element_with_content(self) -> None:
        element = PrettyTransformer().render(Element("p", (), Fragment((Text("x"),))))
        assert _kinds(element) == [PPKind.OPEN_TAG, PPKind.TEXT, PPKind.CLOSE_TAG]
        assert not element.children[0].empty

    def test_void_element_keeps_attributes(self) -> None:
        open_tag = _only('<img src="x">').children[0]
        assert _kinds(open_tag) == [PPKind.TAG_NAME, PPKind.ATTRIBUTE]

    def test_names_are_lowercased_values_are_not(self) -> None:
        element = _only('<DIV ID="MixedCase">y</DIV>')
        open_tag = element.children[0]
        assert open_tag.find(PPKind.TAG_NAME).text == "div"
        attribute = open_tag.find(PPKind.ATTRIBUTE)
        assert attribute.find(PPKind.ATTR_NAME).text == "id"
        assert attribute.find(PPKind.ATTR_VALUE).text == "MixedCase"
        assert element.find(PPKind.CLOSE_TAG).children[0].text == "div"

    def test_close_tag_name_is_a_copy(self) -> None:
        element = _only("<p>x</p>")
        opened = element.children[0].find(PPKind.TAG_NAME)
        closed = element.find(PPKind.CLOSE_TAG).find(PPKind.TAG_NAME)
        assert opened == closed
        assert opened is not closed

    def test_children_are_spliced_between_tags(self) -> None:
        element = _only("<p>a<br>b<!--c--></p>")
        assert _kinds(element) == [
            PPKind.OPEN_TAG,
            PPKind.TEXT,
            PPKind.ELEMENT,
            PPKind.TEXT,
            PPKind.COMMENT,
            PPKind.CLOSE_TAG,
        ]

    def test_nesting_depth_is_preserved(self) -> None:
        assert _depth(_only("<div><span>x</span></div>")) == 2
        assert _depth(_only("<a><b><c><d></d></c></b></a>")) == 4


class TestAttributes:
    """Attribute name and value nodes."""

    def test_attribute_without_value_has_no_value_node(self) -> None:
        attribute = _only("<input disabled>").children[0].find(PPKind.ATTRIBUTE)
        assert attribute.children == (PPNode(PPKind.ATTR_NAME, text="disabled"),)

    def test_explicit_empty_value_has_no_value_node(self) -> None:
        attribute = _only('<input value="">').children[0].find(PPKind.ATTRIBUTE)
        assert _kinds(attribute) == [PPKind.ATTR_NAME]

    def test_attributes_keep_order(self) -> None:
        open_tag = _only("<a z=1 y=2 x=3>").children[0]
        names = [a.find(PPKind.ATTR_NAME).text for a in open_tag.find_all(PPKind.ATTRIBUTE)]
        assert names == ["z", "y", "x"]

    def test_render_attribute_directly(self) -> None:
        node = render(Attribute("Href", "/"))
        assert node == PPNode(
            PPKind.ATTRIBUTE,
            children=(
                PPNode(PPKind.ATTR_NAME, text="href"),
                PPNode(PPKind.ATTR_VALUE, text="/"),
            ),
        )


class TestLeaves:
    """Text, comments and fragments."""

    def test_text_is_verbatim(self) -> None:
        assert render(Text(" a & <b> ")) == PPNode(PPKind.TEXT, text=" a & <b> ")

    def test_comment(self) -> None:
        assert _only("<!-- never closed") == PPNode(PPKind.COMMENT, text=" never closed")

    def test_fragment_is_sibling_group(self) -> None:
        tree = render(parse("a<br>b"))
        assert isinstance(tree, PPFragment)
        assert [c.kind for c in tree.children] == [PPKind.TEXT, PPKind.ELEMENT, PPKind.TEXT]

    def test_empty_fragment(self) -> None:
        assert render(Fragment()) == PPFragment()


class TestPurity:
    """Rendering is pure and rejects foreign objects."""

    def test_rendering_twice_is_equal_but_fresh(self) -> None:
        fragment = parse('<p class="x">y</p>')
        first = render(fragment)
        second = render(fragment)
        assert first == second
        assert first is not second
        assert first.children[0] is not second.children[0]

    def test_input_tree_unchanged(self) -> None:
        fragment = parse("<p>y</p>")
        snapshot = Fragment((Element("p", (), Fragment((Text("y"),))),))
        render(fragment)
        assert fragment == snapshot

    @pytest.mark.parametrize("value", ["text", 42, None, PPNode(PPKind.TEXT, text="x")])
    def test_unknown_node_raises(self, value: object) -> None:
        with pytest.raises(RenderError):
            render(value)  # type: ignore[arg-type]


class _TupleBuilder:
    """Builds ``(tag, payload)`` tuples, standing in for a host tree."""

    def create_element(
        self, kind: PPKind, children: Sequence[object] = (), *, empty: bool = False
    ) -> tuple:
        flat: list[object] = []
        for child in children:
            if isinstance(child, list):
                flat.extend(child)
            else:
                flat.append(child)
        tag = kind.tag + (".empty" if empty else "")
        return (tag, flat)

    def create_text(self, kind: PPKind, content: str) -> tuple:
        return (kind.tag, content)

    def create_fragment(self, children: Sequence[object]) -> list:
        return list(children)

    def clone(self, node: tuple) -> tuple:
        return tuple(node)


class TestCustomBuilder:
    """The transformer only depends on the TreeBuilder capability."""

    def test_builds_host_nodes(self) -> None:
        tree = PrettyTransformer(_TupleBuilder()).render(parse("<b>x</b><br>"))
        assert tree == [
            (
                "pp-element",
                [
                    ("pp-opentag", [("pp-tagname", "b")]),
                    ("pp-text", "x"),
                    ("pp-closetag", [("pp-tagname", "b")]),
                ],
            ),
            ("pp-element", [("pp-opentag.empty", [("pp-tagname", "br")])]),
        ]

    def test_builder_property(self) -> None:
        builder = _TupleBuilder()
        assert PrettyTransformer(builder).builder is builder

    def test_render_accepts_builder(self) -> None:
        assert render(Comment("c"), builder=_TupleBuilder()) == ("pp-comment", "c")
