"""Lookup records joined against transactions."""
from pydantic import BaseModel, ConfigDict, Field


class Account(BaseModel):
    """Account metadata."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="Account identifier")
    account_name: str = Field(..., alias="accountName", description="Display name")


class GhostCard(BaseModel):
    """Virtual, restricted-use payment card attached to an account."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str = Field(..., description="Card identifier")
    card_number: str = Field(..., alias="cardNumber", description="Full card number; only the last 4 digits are surfaced")

    def __repr__(self) -> str:
        return f"GhostCard(id={self.id!r}, card_number='****{self.card_number[-4:]}')"


class Currency(BaseModel):
    """Currency display metadata."""

    model_config = ConfigDict(frozen=True)

    code: str = Field(..., description="Currency code, matches Transaction.currency")
    symbol: str = Field("", description="Display symbol")
