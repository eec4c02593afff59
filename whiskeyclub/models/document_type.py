"""
Document type tag.

Several record kinds share one container; the "type" field tells them apart.
"""

from enum import Enum

from whiskeyclub.models.errors import InvalidArgumentError


class DocumentType(Enum):
    """
    Kinds of document stored in the WhiskeyClub containers.
    Stored by name, so new members never shift existing documents.
    """
    Spirit = 1
    Review = 2
    User = 3

    @classmethod
    def parse(cls, name: str) -> "DocumentType":
        """Look up a member by its stored name."""
        try:
            return cls[name]
        except (KeyError, TypeError):
            raise InvalidArgumentError("type", f"Unknown document type: {name!r}") from None
