"""Shared fixtures: saved explorer snapshots and small HTML builders."""

import logging
from pathlib import Path

import pytest

from explorer_parser.query import Class, parse_document

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def transaction_html() -> str:
    return (FIXTURES / "transaction.html").read_text(encoding="utf-8")


@pytest.fixture
def account_html() -> str:
    return (FIXTURES / "account.html").read_text(encoding="utf-8")


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES


def card_html(title: str, rows: str, extra: str = "") -> str:
    """A single explorer card with a `.list` table body."""
    return (
        '<div class="card">'
        f'<div class="card-header"><h3 class="card-header-title">{title}</h3></div>'
        '<div class="table-responsive"><table class="table">'
        f'<tbody class="list">{rows}</tbody>'
        f'</table></div>{extra}</div>'
    )


def first_card(html: str):
    """Parse `html` and return its first `.card` node."""
    return next(parse_document(html).find(Class("card")))


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers the CLI installs so they never outlive a captured stream."""
    yield
    logger = logging.getLogger("explorer_parser")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
