"""Category service for database operations."""

from typing import List, Optional
from models.category import Category
from models.transaction import TRANSACTION_TYPES


class CategoryService:
    """Service for managing categories."""

    def __init__(self, db_manager):
        """Initialize the category service.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def find_all(self) -> List[Category]:
        """Get all categories from the database.

        Returns:
            List of Category objects, ordered by name.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name, kind FROM categories ORDER BY name"
            )
            rows = cursor.fetchall()

            return [Category(id=row[0], name=row[1], kind=row[2]) for row in rows]

    def find(self, category_id: int) -> Optional[Category]:
        """Get a single category by ID.

        Args:
            category_id: The category ID to find.

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name, kind FROM categories WHERE id = ?",
                (category_id,),
            )
            row = cursor.fetchone()

            if row:
                return Category(id=row[0], name=row[1], kind=row[2])
            return None

    def find_by_name(self, name: str) -> Optional[Category]:
        """Get a single category by name.

        Args:
            name: The category name to find.

        Returns:
            Category object if found, None otherwise.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                "SELECT id, name, kind FROM categories WHERE name = ?",
                (name,),
            )
            row = cursor.fetchone()

            if row:
                return Category(id=row[0], name=row[1], kind=row[2])
            return None

    def upsert(self, name: str, kind: str) -> Category:
        """Create the category, or update the kind of an existing one.

        Args:
            name: Category name (unique key).
            kind: "INCOME" or "EXPENSE".

        Returns:
            The created or updated Category.

        Raises:
            ValueError: If kind is not a known transaction type.
        """
        if kind not in TRANSACTION_TYPES:
            raise ValueError(f"Invalid category kind: {kind}")

        with self.db_manager.connect() as conn:
            conn.execute(
                "INSERT INTO categories (name, kind) VALUES (?, ?) "
                "ON CONFLICT(name) DO UPDATE SET kind = excluded.kind",
                (name, kind),
            )
            conn.commit()
            row = conn.execute(
                "SELECT id, name, kind FROM categories WHERE name = ?", (name,)
            ).fetchone()

            return Category(id=row[0], name=row[1], kind=row[2])

    def delete(self, category_id: int) -> bool:
        """Delete a category by ID.

        Transactions in the category keep existing with no category.

        Args:
            category_id: The category ID to delete.

        Returns:
            True if category was deleted, False if not found.
        """
        with self.db_manager.connect() as conn:
            cursor = conn.execute("DELETE FROM categories WHERE id = ?", (category_id,))
            conn.commit()
            return cursor.rowcount > 0
