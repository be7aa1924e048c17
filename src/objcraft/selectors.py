"""Fluent builder for CSS selector strings.

A selector is assembled from typed fragments that must appear in a fixed
order::

    element#id.class[attr]:pseudoClass::pseudoElement

Class, attribute and pseudo-class fragments may repeat. Element, id and
pseudo-element fragments may appear only once.

Example:
    >>> from objcraft import css_selector_builder as builder
    >>> builder.id('main').class_('container').class_('editable').stringify()
    '#main.container.editable'

"""

from enum import Enum

import logfire
import rich.repr

from objcraft.exceptions import OccurrenceViolation, OrderViolation


class FragmentKind(Enum):
    """Kind of selector fragment with its rank, cardinality and rendering."""

    TAG = (1, True, '{}')
    ID = (2, True, '#{}')
    CLASS = (3, False, '.{}')
    ATTRIBUTE = (4, False, '[{}]')
    PSEUDO_CLASS = (5, False, ':{}')
    PSEUDO_ELEMENT = (6, True, '::{}')

    def __init__(self, rank: int, singleton: bool, template: str):
        self.rank = rank
        self.singleton = singleton
        self.template = template

    def render(self, value: str) -> str:
        """Return the fragment text for a raw value."""
        return self.template.format(value)


@rich.repr.auto
class SelectorBuilder:
    """A single selector under construction.

    Attributes:
        text: Fragment text accumulated so far
        last_rank: Rank of the most recently appended fragment (0 when empty)

    """

    def __init__(self):
        """Create an empty selector."""
        self.text = ''
        self.last_rank = 0

    def __rich_repr__(self) -> rich.repr.Result:
        """Describe the builder without consuming its text."""
        yield 'text', self.text
        yield 'last_rank', self.last_rank

    def _append(self, kind: FragmentKind, value: str) -> 'SelectorBuilder':
        """Append a fragment after checking its order and occurrence.

        Args:
            kind: Kind of the fragment to append
            value: Raw fragment value, inserted literally

        Returns:
            This builder, for chaining.

        Raises:
            OrderViolation: If the fragment ranks below the last one.
            OccurrenceViolation: If a singleton kind repeats.

        """
        if kind.rank < self.last_rank:
            logfire.debug('Selector order violation', kind=kind.name, rank=kind.rank, last_rank=self.last_rank)
            raise OrderViolation(kind, self.last_rank, self.text)
        if kind.rank == self.last_rank and kind.singleton:
            logfire.debug('Selector occurrence violation', kind=kind.name, rank=kind.rank)
            raise OccurrenceViolation(kind, self.last_rank, self.text)

        self.text += kind.render(value)
        self.last_rank = kind.rank
        return self

    def tag(self, value: str) -> 'SelectorBuilder':
        """Append an element type selector (``div``)."""
        return self._append(FragmentKind.TAG, value)

    element = tag

    def id(self, value: str) -> 'SelectorBuilder':
        """Append an id selector (``#main``)."""
        return self._append(FragmentKind.ID, value)

    def class_(self, value: str) -> 'SelectorBuilder':
        """Append a class selector (``.container``)."""
        return self._append(FragmentKind.CLASS, value)

    def attr(self, value: str) -> 'SelectorBuilder':
        """Append an attribute selector (``[href]``)."""
        return self._append(FragmentKind.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> 'SelectorBuilder':
        """Append a pseudo-class selector (``:focus``)."""
        return self._append(FragmentKind.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> 'SelectorBuilder':
        """Append a pseudo-element selector (``::before``)."""
        return self._append(FragmentKind.PSEUDO_ELEMENT, value)

    @staticmethod
    def combine(selector1: 'SelectorBuilder', combinator: str, selector2: 'SelectorBuilder') -> 'SelectorBuilder':
        """Join two selectors with a combinator, see :func:`combine`."""
        return combine(selector1, combinator, selector2)

    def stringify(self) -> str:
        """Return the selector text and reset the builder.

        Rendering is destructive: a second call returns an empty string.
        """
        text = self.text
        self.text = ''
        self.last_rank = 0
        return text


def combine(selector1: SelectorBuilder, combinator: str, selector2: SelectorBuilder) -> SelectorBuilder:
    """Join two built selectors with a combinator token.

    Both operands are rendered (and therefore reset). The combinator is
    inserted literally between single spaces, so ``' '`` yields three
    spaces. The result has no ordering state of its own.

    Args:
        selector1: Left-hand selector
        combinator: Token placed between the selectors (``' '``, ``'>'``, ``'+'``, ``'~'``)
        selector2: Right-hand selector

    Returns:
        A new builder holding the combined selector text.

    """
    logfire.debug('Combining selectors', combinator=combinator)
    combined = SelectorBuilder()
    combined.text = f'{selector1.stringify()} {combinator} {selector2.stringify()}'
    return combined


class SelectorFacade:
    """Stateless entry point for selector chains.

    Every fragment method starts a new, independent :class:`SelectorBuilder`,
    so one facade can be shared freely between chains.
    """

    __slots__ = ()

    def tag(self, value: str) -> SelectorBuilder:
        """Start a selector with an element type."""
        return SelectorBuilder().tag(value)

    element = tag

    def id(self, value: str) -> SelectorBuilder:
        """Start a selector with an id."""
        return SelectorBuilder().id(value)

    def class_(self, value: str) -> SelectorBuilder:
        """Start a selector with a class."""
        return SelectorBuilder().class_(value)

    def attr(self, value: str) -> SelectorBuilder:
        """Start a selector with an attribute."""
        return SelectorBuilder().attr(value)

    def pseudo_class(self, value: str) -> SelectorBuilder:
        """Start a selector with a pseudo-class."""
        return SelectorBuilder().pseudo_class(value)

    def pseudo_element(self, value: str) -> SelectorBuilder:
        """Start a selector with a pseudo-element."""
        return SelectorBuilder().pseudo_element(value)

    def combine(self, selector1: SelectorBuilder, combinator: str, selector2: SelectorBuilder) -> SelectorBuilder:
        """Join two selectors with a combinator, see :func:`combine`."""
        return combine(selector1, combinator, selector2)


css_selector_builder = SelectorFacade()
