"""External value objects exchanged with the presentation layer."""

from dto.base import parse

__all__ = ["parse"]
