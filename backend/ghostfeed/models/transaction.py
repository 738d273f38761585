"""Transaction data models."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator
from ghostfeed.utils.timestamp import parse_timestamp

GHOST_CARD_CREATION = "ghost_card_creation"
GHOST_CARD_PAYMENT = "ghost_card_payment"
GHOST_CARD_REFUND = "ghost_card_refund"
ACCOUNT_TRANSFER = "account_transfer"
CURRENCY_EXCHANGE = "currency_exchange"

TRANSACTION_TYPES = (
    GHOST_CARD_CREATION,
    GHOST_CARD_PAYMENT,
    GHOST_CARD_REFUND,
    ACCOUNT_TRANSFER,
    CURRENCY_EXCHANGE,
)

COMPLETED = "completed"
PENDING = "pending"
FAILED = "failed"
FLAGGED = "flagged"

TRANSACTION_STATUSES = (COMPLETED, PENDING, FAILED, FLAGGED)


class Transaction(BaseModel):
    """A single ledger entry as delivered by the transaction source.

    ``type`` and ``status`` are kept as raw tokens: values outside the known
    vocabulary are accepted and classified as ``other`` / ``unknown``.
    """

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="Transaction identifier")
    type: str = Field(..., description="Type token, e.g. 'ghost_card_payment'")
    status: str = Field(..., description="Status token, e.g. 'completed'")
    amount: float = Field(..., ge=0, description="Amount in the unit of `currency`")
    currency: str = Field(..., description="Currency code")
    description: Optional[str] = Field(None, description="Free-text description")
    merchant_name: Optional[str] = Field(None, alias="merchantName", description="Merchant name")
    location: Optional[str] = Field(None, description="Where the transaction happened")
    from_account_id: Optional[str] = Field(None, alias="fromAccountId", description="Source account reference")
    to_account_id: Optional[str] = Field(None, alias="toAccountId", description="Destination account reference")
    ghost_card_id: Optional[str] = Field(None, alias="ghostCardId", description="Ghost card reference")
    risk_score: Optional[int] = Field(None, alias="riskScore", ge=0, le=100, description="Risk score 0-100")
    fraud_flags: List[str] = Field(default_factory=list, alias="fraudFlags", description="Fraud signal labels")
    created_at: datetime = Field(..., alias="createdAt", description="Creation timestamp")

    @field_validator("created_at", mode="before")
    @classmethod
    def validate_created_at(cls, v):
        """Accept the timestamp shapes upstream sources emit."""
        if isinstance(v, str):
            return parse_timestamp(v)
        return v

    @field_validator("fraud_flags", mode="before")
    @classmethod
    def validate_fraud_flags(cls, v):
        """Treat an explicit null as no flags."""
        return [] if v is None else v
