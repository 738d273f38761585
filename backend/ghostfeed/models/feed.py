"""Decorated feed models and filter criteria."""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field
from ghostfeed.models.records import Account, GhostCard
from ghostfeed.models.transaction import Transaction

ALL = "all"

Sign = Literal["credit", "neutral"]
RiskTier = Literal["low", "medium", "high"]
LoadStatus = Literal["idle", "loading", "ready", "error"]


class Enrichment(BaseModel):
    """Lookups resolved for one transaction."""

    model_config = ConfigDict(frozen=True)

    source_account: Optional[Account] = None
    destination_account: Optional[Account] = None
    card: Optional[GhostCard] = None
    currency_symbol: str = "$"


class StatusBadge(BaseModel):
    """Status category plus its display label."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(..., description="completed, pending, failed, flagged or unknown")
    label: str


class Classification(BaseModel):
    """Presentation facts derived from the raw type/status/risk fields."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    icon: str = Field(..., description="card, outgoing, incoming, transfer, exchange or other")
    status_badge: StatusBadge = Field(..., alias="statusBadge")
    risk_tier: Optional[RiskTier] = Field(None, alias="riskTier")
    type_label: str = Field(..., alias="typeLabel")
    sign: Sign


class DecoratedTransaction(BaseModel):
    """A transaction with its resolved lookups and classification.

    Built on demand for every feed pass and never persisted. The full card
    number is deliberately not carried; only the masked form is.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    transaction: Transaction
    source_account: Optional[Account] = Field(None, alias="sourceAccount")
    destination_account: Optional[Account] = Field(None, alias="destinationAccount")
    card_id: Optional[str] = Field(None, alias="cardId")
    masked_card: Optional[str] = Field(None, alias="maskedCard")
    currency_symbol: str = Field(..., alias="currencySymbol")
    classification: Classification

    title: str = Field(..., description="Description when present, otherwise the type label")
    show_source_account: bool = Field(False, alias="showSourceAccount")
    show_destination_account: bool = Field(False, alias="showDestinationAccount")
    formatted_amount: str = Field(..., alias="formattedAmount")
    formatted_timestamp: str = Field(..., alias="formattedTimestamp")
    risk_display: Optional[str] = Field(None, alias="riskDisplay")


class FilterCriteria(BaseModel):
    """Search term plus status/type filters; ``all`` disables a filter."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    search_term: str = Field("", alias="searchTerm")
    status_filter: str = Field(ALL, alias="statusFilter")
    type_filter: str = Field(ALL, alias="typeFilter")

    @property
    def is_active(self) -> bool:
        return bool(self.search_term) or self.status_filter != ALL or self.type_filter != ALL


class FilterOption(BaseModel):
    value: str
    label: str


class FilterOptions(BaseModel):
    statuses: List[FilterOption]
    types: List[FilterOption]


class Feed(BaseModel):
    """The one artifact handed to the presentation layer."""

    model_config = ConfigDict(populate_by_name=True)

    items: List[DecoratedTransaction] = Field(default_factory=list)
    status: LoadStatus = "idle"
    error: Optional[str] = None
    total_count: int = Field(0, alias="totalCount")
    matched_count: int = Field(0, alias="matchedCount")
    empty_state: Optional[str] = Field(None, alias="emptyState")


class SessionStatus(BaseModel):
    """Load state of a session's record store."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., alias="sessionId")
    status: LoadStatus
    error: Optional[str] = None
    loaded_at: Optional[datetime] = Field(None, alias="loadedAt")
    counts: dict = Field(default_factory=dict)
