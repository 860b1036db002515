"""
Section classifier for the transaction page.

The page is a column of cards, each with a header title.  Cards are routed
by exact title through SECTION_PARSERS; any unlisted title is an
instruction.  Cards nested inside an `.inner-cards` container are inner
instruction decorations and are not classified on their own.
"""

from typing import Callable

from .account_inputs import parse_account_inputs
from .exceptions import NotFound, UnexpectedFormat, UnsupportedSection
from .instructions import parse_instruction
from .logger import get_module_logger
from .overview import parse_overview
from .query import Class, Node
from .schemas import Transaction
from .token_balances import parse_token_balances

logger = get_module_logger("sections")

CARD = Class("card")
TITLE = Class("card-header-title")
NESTED_CARD_CONTAINER = "inner-cards"

OVERVIEW = "Overview"
ACCOUNT_INPUTS = "Account Input(s)"
TOKEN_BALANCES = "Token Balances"
PROGRAM_LOGS = "Program Instruction Logs"


def _unsupported(card: Node):
    raise UnsupportedSection(card_title(card))


# title → (Transaction field, parser)
SECTION_PARSERS: dict[str, tuple[str, Callable[[Node], object]]] = {
    OVERVIEW: ("overview", parse_overview),
    ACCOUNT_INPUTS: ("account_inputs", parse_account_inputs),
    TOKEN_BALANCES: ("token_balances", parse_token_balances),
    PROGRAM_LOGS: ("skipped_sections", _unsupported),
}
DEFAULT_SECTION = ("instructions", parse_instruction)


def card_title(card: Node) -> str:
    return card.first(TITLE, field="card.title").text().strip()


def top_level_cards(document: Node) -> list[Node]:
    """Every card except those directly inside an inner-cards container."""
    cards = []
    for card in document.find(CARD):
        parent = card.parent()
        if parent is not None and NESTED_CARD_CONTAINER in parent.classes():
            continue
        cards.append(card)
    return cards


def classify(title: str) -> tuple[str, Callable[[Node], object]]:
    return SECTION_PARSERS.get(title, DEFAULT_SECTION)


def parse_transaction_document(document: Node) -> Transaction:
    """Dispatch each top-level card to its parser and assemble the Transaction."""
    overview = None
    token_balances = None
    account_inputs = []
    instructions = []
    skipped = []

    for card in top_level_cards(document):
        title = card_title(card)
        target, parser = classify(title)
        logger.info(f"Parsing section '{title}'")

        try:
            parsed = parser(card)
        except UnsupportedSection as e:
            logger.info(f"{e.message}. Skipping...")
            skipped.append(e.title)
            continue

        if target == "overview":
            if overview is not None:
                raise UnexpectedFormat("overview", title, "a single Overview card")
            overview = parsed
        elif target == "account_inputs":
            account_inputs = parsed
        elif target == "token_balances":
            token_balances = parsed
        else:
            instructions.append(parsed)

    if overview is None:
        raise NotFound(f"{CARD} {TITLE}:{OVERVIEW}", "overview", document.path())

    warnings = [w for ix in instructions for w in ix.warnings]

    return Transaction(
        overview=overview,
        token_balances=token_balances,
        account_inputs=account_inputs,
        instructions=instructions,
        skipped_sections=skipped,
        warnings=warnings,
    )
