"""Validated input for recording a new transaction."""

import datetime
from decimal import Decimal, InvalidOperation
from typing import Literal

from pydantic import BaseModel, field_validator

from models.transaction import DEFAULT_ACCOUNT, DEFAULT_CATEGORY, EXPENSE


class TransactionInput(BaseModel):
    """Body of a "new transaction" request.

    Amounts may arrive as numbers or as strings with a comma decimal
    separator ("12,50"). The sign is not trusted; see signed_amount().
    """

    date: datetime.date
    description: str
    amount: Decimal
    type: Literal["INCOME", "EXPENSE"]
    category: str = DEFAULT_CATEGORY
    account: str = DEFAULT_ACCOUNT

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value):
        if isinstance(value, str):
            value = value.strip()
            if not value:
                raise ValueError("date is required")
            return datetime.date.fromisoformat(value[:10])
        return value

    @field_validator("description")
    @classmethod
    def require_description(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("description is required")
        return value

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, value):
        if isinstance(value, str):
            try:
                value = Decimal(value.strip().replace(",", "."))
            except InvalidOperation:
                raise ValueError(f"invalid amount: {value!r}")
        return value

    @field_validator("amount")
    @classmethod
    def require_finite(cls, value: Decimal) -> Decimal:
        if not value.is_finite():
            raise ValueError("amount must be a finite number")
        return value

    @field_validator("category", "account", mode="before")
    @classmethod
    def default_blank_names(cls, value, info):
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_CATEGORY if info.field_name == "category" else DEFAULT_ACCOUNT
        return value.strip() if isinstance(value, str) else value

    def signed_amount(self) -> Decimal:
        """Amount with its sign forced by the transaction type."""
        magnitude = abs(self.amount)
        return -magnitude if self.type == EXPENSE else magnitude
