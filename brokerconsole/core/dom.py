"""The module contains the document model the console forms are rendered
into. The tree is built by BeautifulSoup, while the elements add
the lookups and the markup accessors the widgets rely on.
"""

import functools
from typing import TYPE_CHECKING

from bs4 import BeautifulSoup, Tag
from bs4.dammit import EntitySubstitution
from bs4.formatter import HTMLFormatter

from brokerconsole.core.exceptions import NodeNotFound

if TYPE_CHECKING:
    from collections.abc import Iterator, Mapping

    from bs4 import PageElement
    from typing_extensions import Self

    from brokerconsole.types import AttrValue


class _MarkupFormatter(HTMLFormatter):
    """The class renders void elements without the closing slash and
    empty attributes as bare ones, keeping the attributes in their
    original order.
    """

    def attributes(self: 'Self', tag: 'Tag') -> list[tuple[str, str | None]]:
        return [(name, None if value == '' else value) for name, value in tag.attrs.items()]


FORMATTER = _MarkupFormatter(
    entity_substitution=EntitySubstitution.substitute_xml,
    void_element_close_prefix=None,
)


class Element(Tag):
    """The class implements an element node."""

    def __repr__(self: 'Self') -> str:
        """Return a system representation of the element."""
        if self.id:
            return f'<Element {self.tag}#{self.id}>'

        return f'<Element {self.tag}>'

    #
    # Attributes
    #

    @property
    def id(self: 'Self') -> str:
        """Return the id attribute of the element."""
        return self.attrs.get('id', '')

    @property
    def tag(self: 'Self') -> str:
        """Return the name of the element."""
        return self.name

    def get_attribute(self: 'Self', name: str, default: str | None = None) -> str | None:
        """Return the value of the specified attribute."""
        return self.attrs.get(name, default)

    def has_attribute(self: 'Self', name: str) -> bool:
        """Check if the element carries the specified attribute."""
        return self.has_attr(name)

    def set_attribute(self: 'Self', name: str, value: 'AttrValue') -> None:
        """Set the value of the specified attribute. True renders as a bare
        attribute, while False and None remove the attribute.
        """
        if value is None or value is False:
            self.attrs.pop(name, None)
        elif value is True:
            self.attrs[name] = ''
        else:
            self.attrs[name] = str(value)

    #
    # Tree
    #

    def append(self: 'Self', child: 'PageElement') -> 'PageElement':
        """Append the specified node to the children of the element."""
        if self.can_be_empty_element:
            msg = f'<{self.tag}> is a void element and cannot have children'
            raise ValueError(msg)

        super().append(child)
        return child

    def remove(self: 'Self') -> None:
        """Detach the element from its parent. Detached elements are left intact."""
        self.extract()

    def contains(self: 'Self', node: 'PageElement | None') -> bool:
        """Check if the specified node is the element itself or one
        of its descendants.
        """
        if node is None:
            return False

        return node is self or any(parent is self for parent in node.parents)

    def iter_elements(self: 'Self') -> 'Iterator[Element]':
        """Iterate over the descendant elements in document order."""
        for node in self.descendants:
            if isinstance(node, Element):
                yield node

    def get_by_id(self: 'Self', element_id: str) -> 'Element | None':
        """Return the first descendant element with the specified id."""
        return self.find(id=element_id)

    #
    # Markup
    #

    @property
    def inner_html(self: 'Self') -> str:
        """Return the markup of the children of the element."""
        return self.decode_contents(formatter=FORMATTER)

    @inner_html.setter
    def inner_html(self: 'Self', markup: str) -> None:
        """Replace the children of the element with the parsed markup."""
        self.clear()
        for child in list(Document(markup).contents):
            self.append(child)

    @property
    def outer_html(self: 'Self') -> str:
        """Return the markup of the element including the element itself."""
        return self.decode(formatter=FORMATTER)

    @property
    def text_content(self: 'Self') -> str:
        """Return the concatenated text of the descendants."""
        return self.get_text()


class Document(Element, BeautifulSoup):
    """The class implements the root of a document."""

    def __init__(self: 'Self', markup: str = '') -> None:
        """Initialize a document object."""
        super().__init__(
            markup,
            'html.parser',
            element_classes={Tag: Element},
            multi_valued_attributes=None,
        )

    def __repr__(self: 'Self') -> str:
        """Return a system representation of the document."""
        return f'<{self.__class__.__name__}>'

    @classmethod
    def from_markup(cls: 'type[Self]', markup: str) -> 'Self':
        """Create a document from the specified markup."""
        return cls(markup)

    @property
    def outer_html(self: 'Self') -> str:
        """Return the markup of the document."""
        return self.inner_html

    def by_id(self: 'Self', element_id: str) -> 'Element':
        """Return the element with the specified id or raise NodeNotFound."""
        element = self.get_by_id(element_id)
        if element is None:
            msg = f'The document does not contain an element with the id {element_id!r}'
            raise NodeNotFound(msg)

        return element


@functools.cache
def _get_factory() -> 'Document':
    return Document()


def create_element(
    tag: str,
    attrs: 'Mapping[str, AttrValue] | None' = None,
    parent: 'Element | None' = None,
) -> 'Element':
    """Create an element and append it to the parent if the one is specified."""
    element = _get_factory().new_tag(tag.lower())
    for name, value in (attrs or {}).items():
        element.set_attribute(name, value)

    if parent is not None:
        parent.append(element)

    return element
