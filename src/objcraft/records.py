"""Pydantic record models."""

from pydantic import BaseModel, ConfigDict, Field


class Rectangle(BaseModel):
    """Rectangle record with a computed area.

    Attributes:
        width: Horizontal size
        height: Vertical size

    """

    model_config = ConfigDict(extra='allow')

    width: int | float = Field(description='Horizontal size')
    height: int | float = Field(description='Vertical size')

    def get_area(self) -> int | float:
        """Return width multiplied by height."""
        return self.width * self.height


def rectangle(width: int | float, height: int | float) -> Rectangle:
    """Create a rectangle record.

    Example:
        >>> r = rectangle(10, 20)
        >>> r.width, r.height, r.get_area()
        (10, 20, 200)

    """
    return Rectangle(width=width, height=height)
