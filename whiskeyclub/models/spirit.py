"""
Spirit data model.

The reviewed spirit, as embedded in review documents.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class SpiritInfo:
    """Identifier and display name of a spirit."""
    id: Optional[str] = None  # None when the spirit has no stored record yet
    name: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "SpiritInfo":
        """Create SpiritInfo from JSON dict."""
        return cls(
            id=data.get("id"),
            name=data.get("name", "")
        )

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "id": self.id,
            "name": self.name
        }
