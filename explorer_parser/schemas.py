"""
Pydantic schemas for the records extracted from explorer pages.

Transaction page → Transaction (Overview, TokenAccountInfo, TxAccountInput,
                   Instruction with AccountContext pairs)
Account page     → AccountDetails (with TransactionSummary rows)

Every model is frozen: a record is assembled once from one snapshot and
handed to the serializer untouched.
"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer


class Record(BaseModel):
    """Base for all extracted records."""
    model_config = ConfigDict(frozen=True)


# --- Account page ---

class TransactionSummary(Record):
    """One row of the account page's transaction history table."""
    signature: str
    block: int
    time: str = Field(description="UTC, formatted YYYY-MM-DD HH:MM:SS")
    status: str


class AccountDetails(Record):
    address: str
    balance: Decimal
    owner: str
    data_size: int = Field(description="Allocated data size in bytes")
    executable: bool
    recent_transactions: list[TransactionSummary] = Field(default_factory=list)


# --- Transaction page ---

class Overview(Record):
    signature: str
    result: str
    timestamp: str
    confirmation_status: str
    confirmations: str        # "32/32" or "max", kept as shown
    slot: int
    recent_blockhash: str
    fee: Decimal
    transaction_version: str


class TxAccountInput(Record):
    """A row of the "Account Input(s)" card."""
    address: str
    attributes: frozenset[str] = Field(default_factory=frozenset)  # Writable, Signer, Fee Payer, Program
    sol_change: Decimal
    post_balance: Decimal

    @field_serializer('attributes')
    def serialize_attributes(self, attributes: frozenset[str]) -> list[str]:
        # Set iteration order varies between interpreter runs
        return sorted(attributes)


class TokenAccountInfo(Record):
    """A row of the "Token Balances" card."""
    address: str
    token_name: str
    token_url: str
    change: Decimal
    post_balance: str         # Representation varies (amount, amount + symbol); not canonicalized


class AccountContext(Record):
    address: str
    # None means no badges were rendered for the account, not "unparsed"
    attributes: Optional[list[str]] = None


class Instruction(Record):
    description: str
    program: str
    accounts: list[tuple[str, AccountContext]] = Field(default_factory=list)
    additional_info: dict[str, str] = Field(default_factory=dict)
    hex: Optional[str] = None
    warnings: list[str] = Field(default_factory=list)


class Transaction(Record):
    overview: Overview
    # None when the page has no "Token Balances" card; [] when the card is empty
    token_balances: Optional[list[TokenAccountInfo]] = None
    account_inputs: list[TxAccountInput] = Field(default_factory=list)
    instructions: list[Instruction] = Field(default_factory=list)
    skipped_sections: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)
