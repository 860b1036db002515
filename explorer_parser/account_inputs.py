"""
"Account Input(s)" card parser.

Row layout (one <tr> per account):
  cell 0  index                      (skipped)
  cell 1  address link
  cell 2  balance change: a sign badge ("+", "-", "0") and, unless the change
          is zero, a monospace magnitude
  cell 3  post balance, monospace, e.g. "1,000.5 SOL"
  cell 4  attribute badges (Writable, Signer, Fee Payer, Program)
"""

from decimal import Decimal

from .convert import parse_decimal
from .exceptions import NotFound, UnexpectedFormat
from .logger import get_module_logger
from .query import Class, Name, Node
from .schemas import TxAccountInput

logger = get_module_logger("account_inputs")

ROWS = Class("list").descendant(Name("tr"))
BADGE = Class("badge")
MONOSPACE = Class("font-monospace")

POSITIVE_SIGNS = ('+', '0')
ZERO_AMOUNT = "0"
PROGRAM_ATTRIBUTE = "Program"


def sign_multiplier(glyph: str, field: str = "account_input.sign") -> int:
    """+1 for '+' or '0' badges, -1 for anything else."""
    glyph = glyph.strip()
    if not glyph:
        raise UnexpectedFormat(field, glyph, "a sign glyph")
    return 1 if glyph[0] in POSITIVE_SIGNS else -1


def signed_change(glyph: str, magnitude: str) -> Decimal:
    change = parse_decimal(magnitude, "account_input.sol_change") * sign_multiplier(glyph)
    # no "-0" in the output
    return change if change else abs(change)


def _cell(cells: list[Node], index: int, row: Node, field: str) -> Node:
    if index >= len(cells):
        raise NotFound(f"td:nth-child({index + 1})", field, row.path())
    return cells[index]


def parse_account_input(row: Node) -> TxAccountInput:
    cells = row.children()

    address = _cell(cells, 1, row, "account_input.address") \
        .first(Name("a"), field="account_input.address").text()

    change_cell = _cell(cells, 2, row, "account_input.sol_change")
    glyph = change_cell.first(BADGE, field="account_input.sign").text()
    magnitude = next(change_cell.find(MONOSPACE), None)
    amount = magnitude.text() if magnitude is not None else ZERO_AMOUNT

    balance_text = _cell(cells, 3, row, "account_input.post_balance") \
        .first(MONOSPACE, field="account_input.post_balance").text()
    tokens = balance_text.split()
    if not tokens:
        raise UnexpectedFormat("account_input.post_balance", balance_text, "a balance")

    attribute_cell = _cell(cells, 4, row, "account_input.attributes")
    attributes = {badge.text() for badge in attribute_cell.find(BADGE)}
    # Program rows sometimes carry no badge; the label names them instead
    if PROGRAM_ATTRIBUTE in address.split():
        attributes.add(PROGRAM_ATTRIBUTE)

    return TxAccountInput(
        address=address,
        attributes=frozenset(attributes),
        sol_change=signed_change(glyph, amount),
        post_balance=parse_decimal(tokens[0], "account_input.post_balance"),
    )


def parse_account_inputs(card: Node) -> list[TxAccountInput]:
    inputs = [parse_account_input(row) for row in card.find(ROWS)]
    logger.debug(f"Parsed {len(inputs)} account inputs")
    return inputs
