"""Account balance aggregation."""

from collections.abc import Iterable
from decimal import Decimal

from fintrack.domain.entities import Account, AccountType


def sum_balances(accounts: Iterable[Account]) -> Decimal:
    """Return the sum of all account balances.

    All accounts are assumed to share the owner's display currency; no
    conversion is performed. Negative balances (credit card debt) reduce the
    total.
    """
    return sum((account.balance for account in accounts), Decimal("0"))


def balances_by_type(accounts: Iterable[Account]) -> dict[AccountType, Decimal]:
    """Return balance subtotals per account type, in first-seen order."""
    totals: dict[AccountType, Decimal] = {}
    for account in accounts:
        totals[account.type] = totals.get(account.type, Decimal("0")) + account.balance
    return totals
