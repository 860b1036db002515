"""
Tree Query primitive: declarative selectors over a parsed HTML tree.

Every parser in this package is written against the small surface defined
here (Node + Name/Class selectors) rather than against BeautifulSoup
directly, so the selectors stay printable and testable on their own and the
error raised for a failed lookup always names the selector, the logical
field being extracted, and where in the tree the lookup started.

    rows = card.find(Class("list").descendant(Name("tr")))
    program = row.first(Name("a"), field="instruction.program").text()

Nodes are read-only views; nothing here mutates the underlying soup.
"""

import re
from typing import Iterator, Optional

from bs4 import BeautifulSoup, NavigableString, Tag

from .exceptions import MissingAttribute, NotFound
from .logger import get_module_logger

logger = get_module_logger("query")

WHITESPACE_RUN = re.compile(r'\s+')


# --- Selectors ---

class Selector:
    """Base predicate over bs4 elements.  Subclasses implement matches()."""

    def matches(self, elem: Tag) -> bool:
        raise NotImplementedError

    def descendant(self, other: "Selector") -> "Selector":
        """Match `other` elements that have an ancestor matching self."""
        return Descendant(self, other)

    def child(self, other: "Selector") -> "Selector":
        """Match `other` elements whose parent matches self."""
        return Child(self, other)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self)!r})"


class Name(Selector):
    """Match by tag name."""

    def __init__(self, name: str):
        self.name = name.lower()

    def matches(self, elem: Tag) -> bool:
        return elem.name == self.name

    def __str__(self) -> str:
        return self.name


class Class(Selector):
    """Match elements carrying a class token (not a substring)."""

    def __init__(self, class_name: str):
        self.class_name = class_name

    def matches(self, elem: Tag) -> bool:
        return self.class_name in (elem.get('class') or [])

    def __str__(self) -> str:
        return f".{self.class_name}"


class Descendant(Selector):
    def __init__(self, ancestor: Selector, target: Selector):
        self.ancestor = ancestor
        self.target = target

    def matches(self, elem: Tag) -> bool:
        if not self.target.matches(elem):
            return False
        return any(isinstance(p, Tag) and self.ancestor.matches(p) for p in elem.parents)

    def __str__(self) -> str:
        return f"{self.ancestor} {self.target}"


class Child(Selector):
    def __init__(self, parent: Selector, target: Selector):
        self.parent = parent
        self.target = target

    def matches(self, elem: Tag) -> bool:
        parent = elem.parent
        return (self.target.matches(elem) and isinstance(parent, Tag)
                and self.parent.matches(parent))

    def __str__(self) -> str:
        return f"{self.parent} > {self.target}"


# --- Nodes ---

class Node:
    """Read-only view over a bs4 element or text node."""

    __slots__ = ('_elem',)

    def __init__(self, elem):
        self._elem = elem

    @property
    def is_text(self) -> bool:
        return isinstance(self._elem, NavigableString)

    @property
    def name(self) -> Optional[str]:
        return None if self.is_text else self._elem.name

    def children(self) -> list["Node"]:
        """Element children, skipping the whitespace text between cells."""
        if self.is_text:
            return []
        return [Node(c) for c in self._elem.children if isinstance(c, Tag)]

    def first_child(self) -> Optional["Node"]:
        """First child node, which may be a text node."""
        if self.is_text:
            return None
        for child in self._elem.children:
            if isinstance(child, NavigableString) and not str(child).strip():
                continue
            return Node(child)
        return None

    def parent(self) -> Optional["Node"]:
        parent = self._elem.parent
        return Node(parent) if isinstance(parent, Tag) else None

    def find(self, selector: Selector) -> Iterator["Node"]:
        """Lazily yield matching descendants in document order."""
        if self.is_text:
            return
        for desc in self._elem.descendants:
            if isinstance(desc, Tag) and selector.matches(desc):
                yield Node(desc)

    def first(self, selector: Selector, field: str) -> "Node":
        """First match of `selector`, or NotFound naming `field`."""
        for node in self.find(selector):
            return node
        raise NotFound(str(selector), field, self.path())

    def attr(self, name: str) -> Optional[str]:
        if self.is_text:
            return None
        value = self._elem.get(name)
        if isinstance(value, list):
            # bs4 splits multi-valued attributes such as class
            return ' '.join(value)
        return value

    def require_attr(self, name: str, field: str) -> str:
        value = self.attr(name)
        if value is None:
            raise MissingAttribute(name, field, self.path())
        return value

    def classes(self) -> list[str]:
        if self.is_text:
            return []
        return list(self._elem.get('class') or [])

    def text(self) -> str:
        """Text content with whitespace runs collapsed and ends trimmed."""
        raw = str(self._elem) if self.is_text else self._elem.get_text()
        return WHITESPACE_RUN.sub(' ', raw).strip()

    def path(self) -> str:
        """Ancestor chain such as 'html > body > div.card > table > tbody.list'."""
        if self.is_text:
            parent = self.parent()
            return f"{parent.path()} > #text" if parent else "#text"

        parts = []
        for elem in [self._elem, *self._elem.parents]:
            if not isinstance(elem, Tag) or elem.name == '[document]':
                continue
            classes = elem.get('class') or []
            parts.append(elem.name + ''.join(f".{c}" for c in classes))
        return ' > '.join(reversed(parts)) or '[document]'

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self._elem is other._elem

    def __hash__(self) -> int:
        return id(self._elem)

    def __repr__(self) -> str:
        return f"Node({self.path()})"


def parse_document(html: str) -> Node:
    """
    Parse an HTML snapshot into a root Node.

    Parser fallback chain: html5lib → lxml → html.parser.  html5lib builds
    the same tree a browser would (it inserts <tbody>, fixes misnesting),
    which is what the rendered snapshot was serialized from.
    """
    try:
        soup = BeautifulSoup(html, 'html5lib')
    except Exception as e:
        logger.warning(f"html5lib parsing failed, trying lxml: {e}")
        try:
            soup = BeautifulSoup(html, 'lxml')
        except Exception as e2:
            logger.warning(f"lxml parsing also failed: {e2}")
            soup = BeautifulSoup(html, 'html.parser')
    return Node(soup)
