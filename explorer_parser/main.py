"""
Main orchestrator for the explorer parser.

Wires page acquisition (PageRenderer) to the parsers:
  account page     → parse_account_document  → AccountDetails
  transaction page → parse_transaction_document (section classifier) → Transaction

Parsing never touches the network; fetch_* render first, then parse the
resulting snapshot exactly as parse_* would parse a saved file.
"""

import sys
from pathlib import Path
from typing import Optional, Union

from pydantic import BaseModel

from .account import parse_account_document
from .config import ScraperConfig
from .logger import get_module_logger, setup_logger
from .query import parse_document
from .renderer import PageRenderer
from .schemas import AccountDetails, Transaction
from .sections import parse_transaction_document
from .snapshot import load_snapshot
from .urls import PageKind, construct_url

logger = get_module_logger("main")


class ExplorerParser:
    """
    Main orchestrator for explorer pages.

    1. Renderer: loads the page in a headless browser (fetch_* only)
    2. Tree query: parses the snapshot into a read-only tree
    3. Parsers: account detail parser or the transaction section classifier
    """

    def __init__(
        self,
        config: Optional[ScraperConfig] = None,
        renderer: Optional[PageRenderer] = None,
        log_level: int = None
    ):
        if log_level is not None:
            setup_logger(level=log_level)

        self.config = config or ScraperConfig()
        self.renderer = renderer or PageRenderer()

    def parse_transaction(self, html: str) -> Transaction:
        """Parse a rendered transaction page snapshot."""
        transaction = parse_transaction_document(parse_document(html))
        logger.info(
            f"Transaction {transaction.overview.signature}: "
            f"{len(transaction.instructions)} instructions, "
            f"{len(transaction.account_inputs)} account inputs"
        )
        if transaction.skipped_sections:
            logger.info(f"Skipped sections: {', '.join(transaction.skipped_sections)}")
        return transaction

    def parse_account(self, html: str, limit: Optional[int] = None) -> AccountDetails:
        """Parse a rendered account page snapshot, keeping up to `limit` transactions."""
        if limit is None:
            limit = self.config.tx_limit
        return parse_account_document(parse_document(html), limit)

    def parse_file(
        self,
        file_path: Union[str, Path],
        kind: PageKind,
        limit: Optional[int] = None
    ) -> Union[AccountDetails, Transaction]:
        """Parse a saved snapshot."""
        html = load_snapshot(file_path)
        if kind is PageKind.ACCOUNT:
            return self.parse_account(html, limit)
        return self.parse_transaction(html)

    def render(self, kind: PageKind, identifier: str) -> str:
        url = construct_url(self.config.cluster, kind, identifier)
        return self.renderer.render(url, self.config.wait_time)

    def fetch_transaction(self, signature: str) -> Transaction:
        return self.parse_transaction(self.render(PageKind.TRANSACTION, signature))

    def fetch_account(self, address: str, limit: Optional[int] = None) -> AccountDetails:
        return self.parse_account(self.render(PageKind.ACCOUNT, address), limit)


def write_record(record: BaseModel, file_path: Optional[Union[str, Path]] = None) -> None:
    """Serialize a record as indented JSON to `file_path`, or stdout when None."""
    output = record.model_dump_json(indent=2)
    if file_path is None:
        sys.stdout.write(output + "\n")
        return
    Path(file_path).write_text(output + "\n", encoding='utf-8')
    logger.info(f"Saved to: {file_path}")


def parse_transaction_html(html: str) -> Transaction:
    """Convenience function to parse a transaction page."""
    return ExplorerParser().parse_transaction(html)


def parse_account_html(html: str, limit: int = 10) -> AccountDetails:
    """Convenience function to parse an account page."""
    return ExplorerParser().parse_account(html, limit)
