"""
Instruction card parser.

Any card the classifier does not recognise by title is an instruction.  Its
table is read top to bottom:

  row 0          program link
  account rows   label cell + address link + attribute badges
  scalar rows    label cell + monospace value      → additional_info
  "Instruction Data" row (always last, optional)   → hex payload

The explorer renders the hex payload twice back to back, so only the first
half of the collected text is the payload.  An odd-length result means the
rendering changed; it is reported as a warning instead of being truncated.

Account pairs labelled "Account #N" are re-sorted by N; any other labels
("Source", "Destination", ...) keep page order.
"""

from typing import Optional

from .exceptions import NotFound
from .logger import get_module_logger
from .ordinal import sort_by_ordinal
from .query import Class, Name, Node
from .schemas import AccountContext, Instruction

logger = get_module_logger("instructions")

ROWS = Class("list").descendant(Name("tr"))
TITLE = Class("card-header-title")
LINK = Name("a")
BADGE = Class("badge")
LABEL = Class("me-2")
MONOSPACE = Class("font-monospace")
PAYLOAD_SPANS = Class("text-lg-end").descendant(Class("mb-0")).descendant(Name("span"))

INSTRUCTION_DATA_LABEL = "Instruction Data"
ORDINAL_LABEL = "Account #"
# Em space the explorer puts between byte groups
GROUP_SEPARATOR = "\u2003"


def is_instruction_data_row(label_cell: Node) -> bool:
    """Compare the first two words of the label ("Instruction Data (Hex)")."""
    return ' '.join(label_cell.text().split()[:2]) == INSTRUCTION_DATA_LABEL


def canonical_payload(raw: str) -> tuple[Optional[str], Optional[str]]:
    """
    Collapse the doubled payload rendering.

    Returns (payload, warning); payload is None when the text cannot be an
    exact duplicate.
    """
    data = ''.join(raw.replace(GROUP_SEPARATOR, '').split())
    if len(data) % 2:
        return None, f"instruction data has odd length {len(data)}; expected a doubled payload"
    return data[:len(data) // 2], None


def _row_label(label_cell: Node) -> str:
    label = next(label_cell.find(LABEL), None)
    return (label or label_cell).text()


def _account_context(row: Node, address: Node) -> AccountContext:
    attributes = [badge.text() for badge in row.find(BADGE)]
    return AccountContext(address=address.text(), attributes=attributes or None)


def parse_instruction(card: Node) -> Instruction:
    description = card.first(TITLE, field="instruction.description").text()
    rows = card.find(ROWS)

    first_row = next(rows, None)
    if first_row is None:
        raise NotFound(str(ROWS), "instruction.program", card.path())
    program = first_row.first(LINK, field="instruction.program").text()

    accounts = []
    additional_info = {}
    hex_payload = None
    warnings = []

    for row in rows:
        cells = row.children()
        if not cells:
            continue
        label_cell = cells[0]

        if is_instruction_data_row(label_cell):
            raw = ''.join(span.text() for span in row.find(PAYLOAD_SPANS))
            hex_payload, warning = canonical_payload(raw)
            if warning:
                logger.warning(f"{description}: {warning}")
                warnings.append(f"{description}: {warning}")
            break

        label = _row_label(label_cell)
        address = next(row.find(LINK), None)
        if address is not None:
            accounts.append((label, _account_context(row, address)))
        else:
            value = row.first(MONOSPACE, field=f"instruction.additional_info[{label}]")
            additional_info[label] = value.text()

    if accounts and ORDINAL_LABEL in accounts[0][0]:
        accounts = sort_by_ordinal(accounts, key=lambda pair: pair[0])

    return Instruction(
        description=description,
        program=program,
        accounts=accounts,
        additional_info=additional_info,
        hex=hex_payload,
        warnings=warnings,
    )
