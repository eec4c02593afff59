"""
Review data model.

A user's rating and notes for a spirit, stored as a document in the
Reviews, Spirits and Users containers.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional, Tuple

from whiskeyclub.models.document_type import DocumentType
from whiskeyclub.models.errors import InvalidArgumentError, MissingRequiredValueError
from whiskeyclub.models.spirit import SpiritInfo

# Fractional seconds of any length; .NET writes seven digits
_FRACTION = re.compile(r"\.(\d+)")

# Value of "created" for a review that was never stamped
ZERO_TIMESTAMP = datetime.min


@dataclass(frozen=True)
class Review:
    """
    Review aggregate.

    Only id, spirit and the author are set on construction. Rating, notes
    and created keep their defaults unless bound from a stored document
    by from_dict().
    """
    id: str
    spirit: SpiritInfo
    author_id: str
    author_name: str
    rating: int = field(default=0, init=False)  # out of 5
    notes: str = field(default="", init=False)
    created: datetime = field(default=ZERO_TIMESTAMP, init=False)

    def __post_init__(self):
        if not isinstance(self.id, str) or not self.id.strip():
            raise InvalidArgumentError("id", "'id' cannot be null or whitespace.")

        if self.spirit is None:
            raise MissingRequiredValueError("spirit")

    @property
    def review_id(self) -> str:
        """Partition key for the Reviews container."""
        return self.id

    @property
    def spirit_id(self) -> str:
        """Partition key for the Spirits container."""
        return self.spirit.id or ""

    @property
    def user_id(self) -> str:
        """Partition key for the Users container."""
        return self.author_id

    @property
    def document_type(self) -> DocumentType:
        return DocumentType.Review

    @classmethod
    def from_dict(cls, data: dict) -> "Review":
        """
        Create Review from a stored document.

        reviewId, spiritId and userId are derived, so they are ignored here.

        Raises:
            InvalidArgumentError: If the document is not a review or has no id
            MissingRequiredValueError: If the document has no spirit
        """
        doc_type = DocumentType.parse(data.get("type", DocumentType.Review.name))
        if doc_type is not DocumentType.Review:
            raise InvalidArgumentError(
                "type", f"Expected a {DocumentType.Review.name} document, got {doc_type.name}"
            )

        spirit_data = data.get("spirit")
        review = cls(
            id=data.get("id"),
            spirit=SpiritInfo.from_dict(spirit_data) if spirit_data is not None else None,
            author_id=data.get("authorId", ""),
            author_name=data.get("authorName", "")
        )

        # Read-only fields are bound after construction, as a deserializer would
        object.__setattr__(review, "rating", int(data.get("rating") or 0))
        object.__setattr__(review, "notes", data.get("notes") or "")
        object.__setattr__(review, "created", parse_timestamp(data.get("created")))

        return review

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {name: getter(self) for name, getter in DOCUMENT_FIELDS}


def format_timestamp(value: datetime) -> str:
    """Render a timestamp in ISO-8601 form."""
    return value.isoformat()


def parse_timestamp(value: Optional[str]) -> datetime:
    """Parse an ISO-8601 timestamp; missing values give ZERO_TIMESTAMP."""
    if not value:
        return ZERO_TIMESTAMP

    if value.endswith("Z"):
        value = value[:-1] + "+00:00"

    # fromisoformat before 3.11 only takes 3 or 6 digits
    value = _FRACTION.sub(lambda m: "." + m.group(1).ljust(6, "0")[:6], value, count=1)

    return datetime.fromisoformat(value)


# Document field name -> value, in document order.
DOCUMENT_FIELDS: Tuple[Tuple[str, Callable[[Review], object]], ...] = (
    ("id", lambda review: review.id),
    ("spirit", lambda review: review.spirit.to_dict()),
    ("rating", lambda review: review.rating),
    ("notes", lambda review: review.notes),
    ("authorId", lambda review: review.author_id),
    ("authorName", lambda review: review.author_name),
    ("created", lambda review: format_timestamp(review.created)),
    ("reviewId", lambda review: review.review_id),
    ("spiritId", lambda review: review.spirit_id),
    ("userId", lambda review: review.user_id),
    ("type", lambda review: review.document_type.name),
)
