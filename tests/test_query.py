"""
Tests for the tree query primitive.
"""

import pytest

from explorer_parser.exceptions import MissingAttribute, NotFound
from explorer_parser.query import Class, Name, parse_document

HTML = """
<div class="card outer">
  <table><tbody class="list">
    <tr id="r1"><td class="label">First   row</td><td><a href="/x">X</a></td></tr>
    <tr id="r2"><td class="label">Second</td><td><span class="badge">B</span></td></tr>
  </tbody></table>
  <div class="list-group"><tr-like></tr-like></div>
</div>
"""


@pytest.fixture
def doc():
    return parse_document(HTML)


class TestSelectors:

    def test_descriptions(self):
        assert str(Name("TR")) == "tr"
        assert str(Class("list")) == ".list"
        assert str(Class("list").descendant(Name("tr"))) == ".list tr"
        assert str(Class("a").child(Class("b"))) == ".a > .b"

    def test_class_matches_whole_token_only(self, doc):
        lists = list(doc.find(Class("list")))
        assert len(lists) == 1
        assert lists[0].name == "tbody"

    def test_descendant_in_document_order(self, doc):
        rows = list(doc.find(Class("list").descendant(Name("tr"))))
        assert [r.attr("id") for r in rows] == ["r1", "r2"]

    def test_child_requires_direct_parent(self, doc):
        assert list(doc.find(Class("list").child(Name("td")))) == []
        assert len(list(doc.find(Name("tr").child(Name("td"))))) == 4

    def test_find_is_lazy(self, doc):
        rows = doc.find(Name("tr"))
        first = next(rows)
        assert first.attr("id") == "r1"


class TestNode:

    def test_text_collapses_whitespace(self, doc):
        label = doc.first(Class("label"), field="label")
        assert label.text() == "First row"

    def test_children_skip_text_nodes(self, doc):
        row = doc.first(Name("tr"), field="row")
        assert [c.name for c in row.children()] == ["td", "td"]

    def test_first_child_may_be_text(self):
        doc = parse_document("<p> hello <b>x</b></p>")
        child = doc.first(Name("p"), field="p").first_child()
        assert child.is_text
        assert child.text() == "hello"

    def test_first_not_found_carries_context(self, doc):
        row = doc.first(Name("tr"), field="row")
        with pytest.raises(NotFound) as exc:
            row.first(Class("missing"), field="overview.signature")
        assert exc.value.selector == ".missing"
        assert exc.value.field == "overview.signature"
        assert exc.value.path.endswith("tbody.list > tr")

    def test_attr_and_require_attr(self, doc):
        link = doc.first(Name("a"), field="link")
        assert link.attr("href") == "/x"
        assert link.attr("title") is None
        with pytest.raises(MissingAttribute) as exc:
            link.require_attr("title", field="token.url")
        assert exc.value.attribute == "title"
        assert "token.url" in exc.value.message

    def test_path_includes_classes(self, doc):
        badge = doc.first(Class("badge"), field="badge")
        assert badge.path().startswith("html > body > div.card.outer")

    def test_parent_and_classes(self, doc):
        tbody = doc.first(Class("list"), field="list")
        assert tbody.parent().name == "table"
        assert tbody.classes() == ["list"]

    def test_nodes_compare_by_element(self, doc):
        assert doc.first(Name("tr"), field="a") == next(doc.find(Name("tr")))


def test_parse_document_inserts_tbody_like_a_browser():
    doc = parse_document('<table class="list"><tr><td>1</td></tr></table>')
    rows = list(doc.find(Class("list").descendant(Name("tr"))))
    assert len(rows) == 1
    assert rows[0].parent().name == "tbody"
