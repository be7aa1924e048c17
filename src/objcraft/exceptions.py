"""Custom exceptions for objcraft."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objcraft.selectors import FragmentKind


class ObjcraftError(Exception):
    """Base class for all objcraft exceptions."""

    pass


class SelectorError(ObjcraftError):
    """Raised when a fragment cannot be appended to a selector."""

    message = 'Invalid selector fragment'

    def __init__(self, kind: 'FragmentKind', last_rank: int, selector: str):
        """Initialize selector error with the rejected fragment details.

        Args:
            kind: Fragment kind that was rejected
            last_rank: Rank of the fragment appended before the failed call
            selector: Selector text accumulated before the failed call

        """
        self.kind = kind
        self.last_rank = last_rank
        self.selector = selector
        super().__init__(self.message)


class OrderViolation(SelectorError):
    """Raised when a fragment is appended after a higher-ranked one."""

    message = (
        'Selector parts should be arranged in the following order: '
        'element, id, class, attribute, pseudo-class, pseudo-element'
    )


class OccurrenceViolation(SelectorError):
    """Raised when a tag, id or pseudo-element is appended twice."""

    message = 'Element, id and pseudo-element should not occur more then one time inside the selector'


class DeserializationError(ObjcraftError, ValueError):
    """Raised when serialized text cannot be parsed."""

    def __init__(self, text: str, reason: str):
        """Initialize deserialization error.

        Args:
            text: Text that failed to parse
            reason: Parser error message

        """
        self.text = text
        self.reason = reason
        super().__init__(f'Cannot deserialize {text[:40]!r}: {reason}')
