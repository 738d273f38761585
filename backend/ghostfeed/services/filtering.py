"""Search/status/type predicate over the transaction feed."""
from typing import List, Optional, Sequence, TypeVar, Union
from ghostfeed.models.feed import ALL, DecoratedTransaction, FilterCriteria
from ghostfeed.models.transaction import Transaction

T = TypeVar("T", Transaction, DecoratedTransaction)


def _raw(item: Union[Transaction, DecoratedTransaction]) -> Transaction:
    return item.transaction if isinstance(item, DecoratedTransaction) else item


def _contains(value: Optional[str], term: str) -> bool:
    return value is not None and term in value.lower()


def matches_search(transaction: Transaction, search_term: str) -> bool:
    """Case-insensitive substring match on description, merchant name or type token."""
    if not search_term:
        return True
    term = search_term.lower()
    return (
        _contains(transaction.description, term)
        or _contains(transaction.merchant_name, term)
        or _contains(transaction.type, term)
    )


def matches_status(transaction: Transaction, status_filter: str) -> bool:
    return status_filter == ALL or transaction.status == status_filter


def matches_type(transaction: Transaction, type_filter: str) -> bool:
    return type_filter == ALL or transaction.type == type_filter


def matches(transaction: Transaction, criteria: FilterCriteria) -> bool:
    return (
        matches_search(transaction, criteria.search_term)
        and matches_status(transaction, criteria.status_filter)
        and matches_type(transaction, criteria.type_filter)
    )


def filter_transactions(items: Sequence[T], criteria: FilterCriteria) -> List[T]:
    """
    Return the items matching ``criteria`` in their original order.

    Accepts raw or decorated transactions. Stateless: the same input always
    yields the same output, and re-filtering a result changes nothing.
    """
    return [item for item in items if matches(_raw(item), criteria)]
