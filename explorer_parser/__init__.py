"""
Solana Explorer page parser

Reads account and transaction records out of the browser-rendered HTML of
explorer.solana.com.
- Renderer: headless browser page acquisition
- Query: declarative selectors over the parsed tree
- Parsers: account details, and per-card transaction parsers dispatched by
  the section classifier

Public API surface:
  Orchestrator   — ExplorerParser, write_record
  Records        — AccountDetails, TransactionSummary, Transaction, Overview,
                   TxAccountInput, TokenAccountInfo, Instruction, AccountContext
  Error types    — parse errors (NotFound, MissingAttribute, UnexpectedFormat,
                   OrdinalParseError), UnsupportedSection, TransientError
  Configuration  — ScraperConfig, load_config, Cluster
"""

# --- Orchestration ---
from .main import ExplorerParser, write_record
from .renderer import PageRenderer

# --- Records ---
from .schemas import (
    AccountDetails,
    TransactionSummary,
    Transaction,
    Overview,
    TxAccountInput,
    TokenAccountInfo,
    Instruction,
    AccountContext,
)

# --- Exceptions ---
from .exceptions import (
    ExplorerParserError,
    NotFound,
    MissingAttribute,
    UnexpectedFormat,
    OrdinalParseError,
    UnsupportedSection,
    TransientError,
    ConfigError,
)

# --- Configuration ---
from .config import ScraperConfig, load_config
from .urls import Cluster, PageKind

__version__ = "0.1.0"
__all__ = [
    "ExplorerParser",
    "write_record",
    "PageRenderer",
    "AccountDetails",
    "TransactionSummary",
    "Transaction",
    "Overview",
    "TxAccountInput",
    "TokenAccountInfo",
    "Instruction",
    "AccountContext",
    "ExplorerParserError",
    "NotFound",
    "MissingAttribute",
    "UnexpectedFormat",
    "OrdinalParseError",
    "UnsupportedSection",
    "TransientError",
    "ConfigError",
    "ScraperConfig",
    "load_config",
    "Cluster",
    "PageKind",
]
