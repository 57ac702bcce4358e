"""Category model for transaction classification."""

from dataclasses import dataclass


@dataclass
class Category:
    """Represents a transaction category.

    Attributes:
        id: Unique identifier (auto-generated).
        name: Category name (unique).
        kind: Either "INCOME" or "EXPENSE". A hint only, updated on upsert.
    """

    id: int
    name: str
    kind: str

    def to_dict(self) -> dict:
        """Convert category to dictionary for display and export."""
        return {"id": self.id, "name": self.name, "kind": self.kind}
