from pydantic import field_validator
from typing import Optional, List
import datetime as dt
from decimal import Decimal

from app.schemas.base import CamelModel
from app.schemas.category import CategoryOut, CategoryType
from app.utils.sanitize import clean_input
from app.utils.transaction_utils import parse_amount, parse_date

class TransactionBase(CamelModel):
    amount: Decimal
    description: str
    category_id: int
    date: dt.date

    @field_validator("amount", mode="before")
    @classmethod
    def _parse_amount(cls, value):
        value = clean_input(value)
        if value is None:
            return value
        amount = parse_amount(value)
        # stored as Numeric(14, 2); anything finer would be silently cut
        if amount.as_tuple().exponent < -2:
            raise ValueError("Amount can have at most two decimal places")
        return amount

    @field_validator("description", mode="before")
    @classmethod
    def _clean_description(cls, value):
        return clean_input(value)

    @field_validator("date", mode="before")
    @classmethod
    def _parse_date(cls, value):
        value = clean_input(value)
        return value if value is None else parse_date(value)

class TransactionCreate(TransactionBase):
    pass

class TransactionUpdate(TransactionBase):
    # optional here so missing fields get the "All fields are required" reply
    amount: Optional[Decimal] = None
    description: Optional[str] = None
    category_id: Optional[int] = None
    date: Optional[dt.date] = None

    def is_complete(self) -> bool:
        # a zero amount counts as missing
        return bool(self.amount) and all(
            value is not None
            for value in (self.amount, self.description, self.category_id, self.date)
        )

class TransactionOut(CamelModel):
    id: int
    amount: float
    description: str
    date: dt.date
    type: CategoryType
    category_id: int
    category: Optional[CategoryOut] = None
    created_by: int
    created_at: Optional[dt.datetime] = None
    updated_at: Optional[dt.datetime] = None

class TransactionGroup(CamelModel):
    date: dt.date
    transactions: List[TransactionOut]

class TransactionListOut(CamelModel):
    list_group: List[TransactionGroup]
    total_income: float
    total_expense: float
    remaining_balance: float
