#!/usr/bin/env python3
"""
List the form fields of a contract template and the rectangles of their widgets.

Useful to check that a template exposes the expected fields (nombre_jugador,
dni, ..., box_firma, box_datos) before uploading it.

Usage:
    python scripts/inspect_contract_template.py templates/contract_adult.pdf
"""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from contract_generator import ContractError
from contract_generator.config import Config
from contract_generator.mappers.contract_fields import CONTRACT_FIELD_NAMES
from contract_generator.utils.pdf_utils import list_form_fields, pdf_page_count


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect the form fields of a contract template.")
    parser.add_argument("template", type=Path, help="Path to the template PDF.")
    return parser.parse_args()


def main() -> int:
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args()

    try:
        pages = pdf_page_count(args.template)
        fields = list_form_fields(args.template)
    except ContractError as e:
        print(f"Error ({e.code}): could not read {args.template}")
        return 1

    print(f"{args.template.name}: {pages} page(s), lateral signature on {max(pages - 1, 0)}")
    if not fields:
        print("The template has no form fields; fixed coordinates will be used.")
        return 0

    print(f"Form fields in {args.template.name}:")
    for name, widgets in fields.items():
        for widget in widgets:
            print(
                f" - {name}: page {widget['page'] + 1}, "
                f"x={widget['x']:.1f} y={widget['y']:.1f} "
                f"w={widget['width']:.1f} h={widget['height']:.1f}"
            )

    expected = list(CONTRACT_FIELD_NAMES.values()) + [Config.SIGNATURE_BOX_FIELD, Config.DATA_BOX_FIELD]
    missing = [name for name in expected if name not in fields]
    if missing:
        print(f"\nNot found (will be skipped): {', '.join(missing)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
