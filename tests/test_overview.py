from decimal import Decimal

import pytest

from conftest import card_html, first_card
from explorer_parser.exceptions import NotFound, UnexpectedFormat
from explorer_parser.overview import parse_overview

ROWS = [
    '<tr><td>Signature</td><td class="text-lg-end"><span class="font-monospace">Sig1</span></td></tr>',
    '<tr><td>Result</td><td class="text-lg-end"><span class="badge bg-success-soft">Success</span></td></tr>',
    '<tr><td>Timestamp</td><td class="text-lg-end"><span class="font-monospace">1970-01-01T00:00:10Z</span></td></tr>',
    '<tr><td>Confirmation Status</td><td class="text-lg-end">Finalized</td></tr>',
    '<tr><td>Confirmations</td><td class="text-lg-end">32/32</td></tr>',
    '<tr><td>Slot</td><td class="text-lg-end"><a href="/block/1234">1,234</a></td></tr>',
    '<tr><td>Recent Blockhash</td><td class="text-lg-end">Hash1</td></tr>',
    '<tr><td>Fee (SOL)</td><td class="text-lg-end"><span class="font-monospace">0.000005</span></td></tr>',
    '<tr><td>Transaction Version</td><td class="text-lg-end">legacy</td></tr>',
]


def overview_card(rows):
    return first_card(card_html("Overview", "".join(rows)))


def test_parses_all_rows():
    overview = parse_overview(overview_card(ROWS))

    assert overview.signature == "Sig1"
    assert overview.result == "Success"
    assert overview.timestamp == "1970-01-01 00:00:10"
    assert overview.confirmation_status == "Finalized"
    assert overview.confirmations == "32/32"
    assert overview.slot == 1234
    assert overview.recent_blockhash == "Hash1"
    assert overview.fee == Decimal("0.000005")
    assert overview.transaction_version == "legacy"


def test_failed_result_badge():
    rows = list(ROWS)
    rows[1] = '<tr><td>Result</td><td class="text-lg-end"><span class="badge bg-warning-soft">Error</span></td></tr>'
    assert parse_overview(overview_card(rows)).result == "Error"


def test_missing_row_names_field():
    with pytest.raises(NotFound) as exc:
        parse_overview(overview_card(ROWS[:8]))
    assert exc.value.field == "overview.transaction_version"


def test_missing_child_names_field():
    rows = list(ROWS)
    rows[5] = '<tr><td>Slot</td><td class="text-lg-end">1,234</td></tr>'
    with pytest.raises(NotFound) as exc:
        parse_overview(overview_card(rows))
    assert exc.value.field == "overview.slot"
    assert exc.value.selector == "a"


def test_bad_fee():
    rows = list(ROWS)
    rows[7] = '<tr><td>Fee</td><td class="text-lg-end"><span class="font-monospace">n/a</span></td></tr>'
    with pytest.raises(UnexpectedFormat) as exc:
        parse_overview(overview_card(rows))
    assert exc.value.field == "overview.fee"


def test_overview_is_immutable():
    overview = parse_overview(overview_card(ROWS))
    with pytest.raises(Exception):
        overview.slot = 1
