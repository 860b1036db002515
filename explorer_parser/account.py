"""
Account page parser.

The overview table holds five fixed rows (address, balance, data size,
owner, executable).  The transaction history is the page's second `.list`
body; each row carries signature, block, a <time datetime="unix seconds">,
an unused age cell and a result badge.
"""

from itertools import islice

from .convert import format_unix_timestamp, parse_decimal, parse_int, parse_yes_no
from .exceptions import NotFound, UnexpectedFormat
from .logger import get_module_logger
from .query import Class, Name, Node
from .schemas import AccountDetails, TransactionSummary

logger = get_module_logger("account")

DETAIL_ROWS = Class("table-responsive").descendant(Name("tr"))
LIST = Class("list")
MONOSPACE = Class("font-monospace")
VALUE_CELL = Class("text-lg-end")
LINK = Name("a")

HISTORY_LIST_INDEX = 1


def _next_row(rows, document: Node, field: str) -> Node:
    row = next(rows, None)
    if row is None:
        raise NotFound(str(DETAIL_ROWS), field, document.path())
    return row


def parse_transaction_summary(row: Node) -> TransactionSummary:
    cells = list(row.find(Name("td")))
    if len(cells) < 5:
        raise NotFound(f"td:nth-of-type({len(cells) + 1})", "transaction_summary", row.path())
    signature_cell, block_cell, time_cell, _age_cell, status_cell = cells[:5]

    timestamp = time_cell.first(Name("time"), field="transaction_summary.time") \
        .require_attr('datetime', field="transaction_summary.time")

    status = status_cell.first_child()
    if status is None:
        raise NotFound("first child", "transaction_summary.status", status_cell.path())

    return TransactionSummary(
        signature=signature_cell.first(LINK, field="transaction_summary.signature").text(),
        block=parse_int(block_cell.first(LINK, field="transaction_summary.block").text(),
                        "transaction_summary.block"),
        time=format_unix_timestamp(timestamp, "transaction_summary.time"),
        status=status.text(),
    )


def parse_recent_transactions(document: Node, limit: int) -> list[TransactionSummary]:
    """Up to `limit` history rows in page order."""
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    lists = list(islice(document.find(LIST), HISTORY_LIST_INDEX + 1))
    if len(lists) <= HISTORY_LIST_INDEX:
        raise NotFound(str(LIST), "recent_transactions", document.path())

    rows = islice(lists[HISTORY_LIST_INDEX].find(Name("tr")), limit)
    return [parse_transaction_summary(row) for row in rows]


def parse_account_document(document: Node, limit: int) -> AccountDetails:
    rows = document.find(DETAIL_ROWS)

    address = _next_row(rows, document, "account.address") \
        .first(MONOSPACE.descendant(Name("span")), field="account.address").text()
    balance = _next_row(rows, document, "account.balance") \
        .first(MONOSPACE, field="account.balance").text()
    data_size = _next_row(rows, document, "account.data_size") \
        .first(VALUE_CELL, field="account.data_size").text()
    owner = _next_row(rows, document, "account.owner") \
        .first(MONOSPACE.descendant(LINK), field="account.owner").text()
    executable = _next_row(rows, document, "account.executable") \
        .first(VALUE_CELL, field="account.executable").text()

    size_tokens = data_size.split()
    if not size_tokens:
        raise UnexpectedFormat("account.data_size", data_size, "a byte count")

    details = AccountDetails(
        address=address,
        balance=parse_decimal(balance, "account.balance"),
        owner=owner,
        data_size=parse_int(size_tokens[0], "account.data_size"),
        executable=parse_yes_no(executable, "account.executable"),
        recent_transactions=parse_recent_transactions(document, limit),
    )
    logger.info(f"Account {details.address}: {len(details.recent_transactions)} recent transactions")
    return details
