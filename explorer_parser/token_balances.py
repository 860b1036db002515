"""
"Token Balances" card parser.

Row layout: token account link | token link (name + href) | change | post balance.
"""

from .convert import parse_decimal
from .exceptions import NotFound
from .logger import get_module_logger
from .query import Class, Name, Node
from .schemas import TokenAccountInfo
from .urls import normalize_url

logger = get_module_logger("token_balances")

ROWS = Class("list").descendant(Name("tr"))
LINK = Name("a")


def parse_token_balance(row: Node) -> TokenAccountInfo:
    cells = row.children()
    if len(cells) < 4:
        raise NotFound(f"td:nth-child({len(cells) + 1})", "token_balance", row.path())

    address = cells[0].first(LINK, field="token_balance.address").text()

    token_link = cells[1].first(LINK, field="token_balance.token")
    token_url = token_link.require_attr('href', field="token_balance.token_url")

    change_node = cells[2].first_child()
    if change_node is None:
        raise NotFound("first child", "token_balance.change", cells[2].path())

    return TokenAccountInfo(
        address=address,
        token_name=token_link.text(),
        token_url=normalize_url(token_url),
        change=parse_decimal(change_node.text(), "token_balance.change"),
        post_balance=cells[3].text(),
    )


def parse_token_balances(card: Node) -> list[TokenAccountInfo]:
    balances = [parse_token_balance(row) for row in card.find(ROWS)]
    logger.debug(f"Parsed {len(balances)} token balances")
    return balances
