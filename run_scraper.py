#!/usr/bin/env python3
"""
Command-line script to scrape an account or transaction from the Solana explorer.

Renders the page in a headless browser, parses it, and writes the record as
JSON (to --output, the configured output path, or stdout).  With --html-file
a saved snapshot is parsed instead and no browser is started.

Usage:
    python run_scraper.py account --id <address> --cluster devnet --tx-limit 5
    python run_scraper.py transaction --id <signature> -o tx.json
    python run_scraper.py transaction --id <signature> --html-file tx.html
"""

import argparse
import json
import logging
import sys

from explorer_parser.config import apply_overrides, load_config
from explorer_parser.exceptions import ExplorerParserError
from explorer_parser.logger import setup_logger
from explorer_parser.main import ExplorerParser, write_record
from explorer_parser.snapshot import save_snapshot
from explorer_parser.urls import Cluster, PageKind

EXIT_OK = 0
EXIT_PARSE_ERROR = 1
EXIT_TRANSIENT_ERROR = 2


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Scrape account or transaction details from the Solana explorer"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    account = subparsers.add_parser("account", help="Parse an account page")
    account.add_argument(
        "--tx-limit", "-t",
        type=int,
        help="Number of recent transactions to retrieve"
    )
    subparsers.add_parser("transaction", help="Parse a transaction page")

    for sub in subparsers.choices.values():
        sub.add_argument("--id", "-i", required=True, help="Id of the account|tx to be parsed")
        sub.add_argument(
            "--cluster", "-c",
            choices=[c.value for c in Cluster],
            help="Cluster (default from config)"
        )
        sub.add_argument("--output", "-o", help="Output JSON file (default: stdout)")
        sub.add_argument("--html-file", help="Parse a saved HTML snapshot instead of rendering")
        sub.add_argument("--save-html", help="Also save the rendered HTML snapshot to this file")
        sub.add_argument("--config", help="JSON config file")
        sub.add_argument("--wait", type=float, help="Seconds to wait for the page to render")
        sub.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    return parser


def main(argv=None) -> int:
    args = build_arg_parser().parse_args(argv)

    setup_logger(level=logging.DEBUG if args.verbose else logging.INFO)

    kind = PageKind.ACCOUNT if args.command == "account" else PageKind.TRANSACTION

    try:
        # Command-line flags override file and environment
        config = apply_overrides(
            load_config(args.config),
            cluster=args.cluster,
            wait_time=args.wait,
            tx_limit=getattr(args, "tx_limit", None),
            output_file_path=args.output,
        )

        scraper = ExplorerParser(config=config)

        if args.html_file:
            record = scraper.parse_file(args.html_file, kind)
        else:
            html = scraper.render(kind, args.id)
            if args.save_html:
                save_snapshot(html, args.save_html)
            if kind is PageKind.ACCOUNT:
                record = scraper.parse_account(html)
            else:
                record = scraper.parse_transaction(html)

        write_record(record, config.output_file_path)

    except ExplorerParserError as e:
        print(json.dumps(e.to_response(), indent=2), file=sys.stderr)
        return EXIT_TRANSIENT_ERROR if e.retryable else EXIT_PARSE_ERROR

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
