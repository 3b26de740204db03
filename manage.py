#!/usr/bin/env python3
"""
Master Barang management CLI.

Usage:
    python manage.py start                      Start the API server
    python manage.py list [--search T] [--page N]
                                                Print one page of the seeded catalog
"""

import argparse
import sys

from src.application.services import get_master_barang_controller
from src.config import configure_logging, get_settings

COLUMNS = (
    ("Kode", 8),
    ("Nama Barang", 20),
    ("Kategori", 13),
    ("Satuan", 7),
    ("No. Batch", 9),
    ("Kadaluarsa", 10),
    ("Stok Min", 8),
    ("Status", 9),
)


def _row(values: list[str]) -> str:
    return "  ".join(value[:width].ljust(width) for value, (_, width) in zip(values, COLUMNS))


def cmd_start(args: argparse.Namespace) -> int:
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "src.api.main:app",
        host=args.host or settings.api.host,
        port=args.port or settings.api.port,
        reload=args.reload,
    )
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    controller = get_master_barang_controller()
    if args.search:
        controller.set_search_term(args.search)
    window = controller.go_to_page(args.page)

    print(_row([title for title, _ in COLUMNS]))
    print(_row(["-" * width for _, width in COLUMNS]))
    for item in window.items:
        print(
            _row(
                [
                    item.code,
                    item.name,
                    item.category,
                    item.unit,
                    item.batch_number or "-",
                    item.expiry.isoformat() if item.expiry else "-",
                    str(item.minimum_stock),
                    item.status_label,
                ]
            )
        )
    print()
    print(
        f"Menampilkan {window.start_index}-{window.end_index} dari {window.total_items} barang"
        f" (halaman {window.current_page}/{max(window.total_pages, 1)})"
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Master Barang management CLI")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    start = sub.add_parser("start", help="Start the API server")
    start.add_argument("--host")
    start.add_argument("--port", type=int)
    start.add_argument("--reload", action="store_true")
    start.set_defaults(func=cmd_start)

    listing = sub.add_parser("list", help="Print one page of the catalog")
    listing.add_argument("--search", default="")
    listing.add_argument("--page", type=int, default=1)
    listing.set_defaults(func=cmd_list)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    # Keep table output clean unless asked otherwise
    default_level = "WARNING" if args.command == "list" else None
    configure_logging(args.log_level or default_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
