"""
Document models for WhiskeyClub.

- DocumentType: tag for record kinds sharing one container
- SpiritInfo: the reviewed spirit
- Review: a user's review of a spirit
"""

from whiskeyclub.models.document_type import DocumentType
from whiskeyclub.models.errors import InvalidArgumentError, MissingRequiredValueError
from whiskeyclub.models.review import Review
from whiskeyclub.models.spirit import SpiritInfo

__all__ = [
    "DocumentType",
    "InvalidArgumentError",
    "MissingRequiredValueError",
    "Review",
    "SpiritInfo",
]
