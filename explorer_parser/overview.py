"""
Overview card parser.

The card is a fixed table: row N always holds the same field, so each field
is read from its own row with a row-specific selector.
"""

from .convert import normalize_timestamp, parse_decimal, parse_int
from .exceptions import NotFound
from .logger import get_module_logger
from .query import Class, Name, Node, Selector
from .schemas import Overview

logger = get_module_logger("overview")

ROWS = Class("list").descendant(Name("tr"))
MONOSPACE = Class("font-monospace")
VALUE_CELL = Class("text-lg-end")

# (field, selector) in row order
OVERVIEW_ROWS: list[tuple[str, Selector]] = [
    ("signature", MONOSPACE),
    ("result", Class("badge")),
    ("timestamp", MONOSPACE),
    ("confirmation_status", VALUE_CELL),
    ("confirmations", VALUE_CELL),
    ("slot", Name("a")),
    ("recent_blockhash", VALUE_CELL),
    ("fee", MONOSPACE),
    ("transaction_version", VALUE_CELL),
]


def parse_overview(card: Node) -> Overview:
    rows = card.find(ROWS)
    values = {}

    for field, selector in OVERVIEW_ROWS:
        row = next(rows, None)
        if row is None:
            raise NotFound(str(ROWS), f"overview.{field}", card.path())
        values[field] = row.first(selector, field=f"overview.{field}").text()

    overview = Overview(
        signature=values["signature"],
        result=values["result"],
        timestamp=normalize_timestamp(values["timestamp"]),
        confirmation_status=values["confirmation_status"],
        confirmations=values["confirmations"],
        slot=parse_int(values["slot"], "overview.slot"),
        recent_blockhash=values["recent_blockhash"],
        fee=parse_decimal(values["fee"], "overview.fee"),
        transaction_version=values["transaction_version"],
    )
    logger.debug(f"Overview parsed for {overview.signature}")
    return overview
