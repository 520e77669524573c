"""Check that every strategy family agrees on its sample inputs and report it."""

from __future__ import annotations

import argparse
from pathlib import Path

from core_extra.strategies import (
    build_catalog,
    check_catalog,
    report_payload,
    reports_to_markdown_table,
    write_json,
)


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--json-out",
        default="output/strategy_agreement.json",
        help="where to write machine-readable agreement summary",
    )
    parser.add_argument(
        "--no-vectorized",
        action="store_true",
        help="skip the jax-backed strategies",
    )
    args = parser.parse_args()

    catalog = build_catalog(include_vectorized=not args.no_vectorized)
    reports = check_catalog(families=catalog)

    print("Strategy agreement")
    print("------------------")
    print(reports_to_markdown_table(reports))

    write_json(Path(args.json_out), report_payload(reports))
    return 0 if all(report.agreed for report in reports) else 1


if __name__ == "__main__":
    raise SystemExit(main())
