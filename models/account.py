from dataclasses import dataclass


@dataclass
class Account:
    id: int
    name: str  # unique, e.g., "Conta Corrente"
    type: str  # free-form label, e.g., "corrente", "cartao"

    def to_dict(self) -> dict:
        """Convert account to dictionary for display and export."""
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
        }
