# Shared utilities for transaction processing

import logging
import re
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Dict, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session, joinedload

from app.models.transaction import Transaction
from app.utils.sanitize import clean_input

logger = logging.getLogger(__name__)

INCOME = "income"
EXPENSE = "expense"


def parse_amount(raw) -> Decimal:
    """
    Parses amounts like:
      $1,234.56   1234.56   -$45.00   (45.00)   - 5.41   + 12.00
    and returns a signed Decimal. Whitespace is stripped aggressively.
    """
    if isinstance(raw, bool):
        raise ValueError(f"Unrecognized amount format: {raw!r}")
    if isinstance(raw, Decimal):
        return raw
    if isinstance(raw, int):
        return Decimal(raw)
    if isinstance(raw, float):
        # go through str() so 0.1 stays 0.1 instead of its binary expansion
        return Decimal(str(raw))

    s = str(raw)
    s = s.replace("\u00a0", " ")         # NBSP → space
    s = s.replace(",", "").replace("$", "")
    s = re.sub(r"\s+", "", s)

    neg = False
    # Parentheses indicate negative
    m = re.match(r"^\((.*)\)$", s)
    if m:
        neg = True
        s = m.group(1)

    if s.startswith("+"):
        s = s[1:]
    elif s.startswith("-"):
        neg = True
        s = s[1:]

    if not re.match(r"^\d+(?:\.\d+)?$", s):
        raise ValueError(f"Unrecognized amount format: {raw!r}")

    try:
        val = Decimal(s)
    except InvalidOperation:
        raise ValueError(f"Unrecognized amount format: {raw!r}")
    return -val if neg else val


def parse_date(raw) -> date:
    """Accepts a date, a datetime or an ISO string and returns the calendar date."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw

    s = str(raw).strip()
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        return date.fromisoformat(s)
    except ValueError:
        return datetime.fromisoformat(s).date()


@dataclass(frozen=True)
class DateRange:
    start: Optional[date] = None
    end: Optional[date] = None
    # set when a bound could not be parsed; such a range matches nothing
    unsatisfiable: bool = False


def normalize_date_range(start_raw, end_raw) -> Optional[DateRange]:
    """
    Turns the raw ``startDate``/``endDate`` query values into a DateRange.

    Both bounds present -> inclusive range. A missing bound on either side
    means no filter at all (None), so a half-open range is never applied.
    A bound that does not parse yields an unsatisfiable range instead of an
    error, and the listing comes back empty.
    """
    start_raw = clean_input(start_raw)
    end_raw = clean_input(end_raw)

    if not (start_raw and end_raw):
        return None

    try:
        start = parse_date(start_raw)
        end = parse_date(end_raw)
    except ValueError:
        logger.debug("Unparseable date range start=%r end=%r", start_raw, end_raw)
        return DateRange(unsatisfiable=True)

    return DateRange(start=start, end=end)


def fetch_transactions(db: Session, owner_id: int, date_range: Optional[DateRange] = None) -> List[Transaction]:
    """Loads every transaction of ``owner_id`` inside the range, categories joined."""
    if date_range is not None and date_range.unsatisfiable:
        return []

    query = (
        db.query(Transaction)
        .options(joinedload(Transaction.category))
        .filter(Transaction.created_by == owner_id)
    )
    if date_range is not None:
        query = query.filter(Transaction.date >= date_range.start, Transaction.date <= date_range.end)
    return query.all()


def summarize_totals(transactions: Iterable) -> Tuple[Decimal, Decimal, Decimal]:
    """Returns (total_income, total_expense, remaining_balance)."""
    total_income = Decimal("0")
    total_expense = Decimal("0")

    for tx in transactions:
        if tx.type == INCOME:
            total_income += parse_amount(tx.amount)
        elif tx.type == EXPENSE:
            total_expense += parse_amount(tx.amount)

    return total_income, total_expense, total_income - total_expense


def group_by_date(transactions: Iterable) -> List[Dict]:
    """
    Buckets transactions by their calendar date.

    Groups come newest date first; inside a group the most recently
    created transaction comes first.
    """
    buckets: Dict[date, list] = {}
    for tx in transactions:
        buckets.setdefault(tx.date, []).append(tx)

    groups = []
    for tx_date in sorted(buckets, reverse=True):
        items = sorted(buckets[tx_date], key=lambda tx: tx.created_at or datetime.min, reverse=True)
        groups.append({"date": tx_date, "transactions": items})
    return groups


def build_transaction_list(db: Session, owner_id: int, start_date=None, end_date=None) -> Dict:
    date_range = normalize_date_range(start_date, end_date)
    transactions = fetch_transactions(db, owner_id, date_range)

    total_income, total_expense, remaining_balance = summarize_totals(transactions)
    logger.debug("Listed %d transactions for user id=%s", len(transactions), owner_id)

    return {
        "list_group": group_by_date(transactions),
        "total_income": total_income,
        "total_expense": total_expense,
        "remaining_balance": remaining_balance,
    }
