"""
objcraft - Object Construction Utilities
========================================

Small helpers for building objects and strings in a controlled way.

Main Components:
    - css_selector_builder: Fluent CSS selector builder with order checks
    - rectangle: Rectangle record factory with a computed area
    - serialize / deserialize: JSON round-tripping onto a given class

Example:
    >>> from objcraft import css_selector_builder as builder
    >>> builder.tag('a').attr('href$=".png"').pseudo_class('focus').stringify()
    'a[href$=".png"]:focus'
"""

__version__ = '0.1.0'

from objcraft.exceptions import (
    DeserializationError,
    ObjcraftError,
    OccurrenceViolation,
    OrderViolation,
    SelectorError,
)
from objcraft.records import Rectangle, rectangle
from objcraft.selectors import (
    FragmentKind,
    SelectorBuilder,
    SelectorFacade,
    combine,
    css_selector_builder,
)
from objcraft.serialization import SerializerConfig, deserialize, serialize

__all__ = [
    # Selector builder
    'css_selector_builder',
    'combine',
    'FragmentKind',
    'SelectorBuilder',
    'SelectorFacade',
    # Records
    'Rectangle',
    'rectangle',
    # Serialization
    'SerializerConfig',
    'serialize',
    'deserialize',
    # Exceptions
    'ObjcraftError',
    'SelectorError',
    'OrderViolation',
    'OccurrenceViolation',
    'DeserializationError',
]
