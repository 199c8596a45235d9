#!/usr/bin/env python3
"""
Generate a signed agency contract PDF from local files.

The script performs the same composition the signing service runs:
1. Load the contract template (or a blank page when none is given).
2. Stamp the signature on the side of every page but the last.
3. Fill the template form fields and flatten them.
4. Place the main signature and the name/DNI caption on the last page.

Usage:
    python scripts/generate_contract_pdf.py \
        --template templates/contract_adult.pdf \
        --signature firma.png \
        --name "María Gómez" --dni 12345678Z \
        --output generated/contract.pdf

Without --template, the template and font files are read from the local
storage root (CONTRACT_STORAGE_ROOT) under the same keys the signing service
uses. Missing fonts fall back to Helvetica.
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from contract_generator import ContractError, ContractFields, LayoutSettings, LocalBlobStore, compose_contract
from contract_generator.config import Config
from contract_generator.schemas.base import TemplateType
from contract_generator.utils.date_utils import format_spanish_date

BASE_DIR = Path(__file__).resolve().parent.parent
DEFAULT_OUTPUT_DIR = BASE_DIR / "generated"


def read_optional(path: Optional[Path]) -> Optional[bytes]:
    if path is None:
        return None
    return path.read_bytes()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a signed agency contract PDF.")
    parser.add_argument(
        "--template",
        type=Path,
        default=None,
        help="Contract template PDF (defaults to the stored template for --template-type).",
    )
    parser.add_argument(
        "--template-type",
        choices=[t.value for t in TemplateType],
        default=TemplateType.ADULT.value,
        help="Stored template variant used when --template is omitted.",
    )
    parser.add_argument(
        "--storage-root",
        type=Path,
        default=Path(Config.CONTRACT_STORAGE_ROOT),
        help="Local storage holding templates/ and the font files.",
    )
    parser.add_argument("--signature", type=Path, required=True, help="Signature image (PNG).")
    parser.add_argument("--name", required=True, help="Player legal name.")
    parser.add_argument("--dni", default=None, help="Identity document number.")
    parser.add_argument("--street", default=None)
    parser.add_argument("--cp", default=None, help="Postal code.")
    parser.add_argument("--city", default=None)
    parser.add_argument("--province", default=None)
    parser.add_argument("--birth-date", default=None, help="Birth date (YYYY-MM-DD or dd/mm/yyyy).")
    parser.add_argument("--nationality", default=None)
    parser.add_argument(
        "--signature-date",
        default=None,
        help="Signing date (defaults to today, dd/mm/yyyy).",
    )
    parser.add_argument("--regular-font", type=Path, default=None, help="TrueType font for regular text (defaults to the stored one).")
    parser.add_argument("--bold-font", type=Path, default=None, help="TrueType font for bold text (defaults to the stored one).")
    parser.add_argument(
        "--box-correction",
        type=float,
        default=None,
        help="Vertical correction applied to the signature and data boxes.",
    )
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Destination PDF path (defaults to generated/contract_<timestamp>.pdf).",
    )
    parser.add_argument("--layout-json", action="store_true", help="Print the layout decisions as JSON.")
    return parser.parse_args()


def main() -> int:
    logging.basicConfig(level=Config.LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args()

    try:
        Config.validate()
    except ValueError as e:
        print(f"Invalid configuration: {e}")
        return 1

    store = LocalBlobStore(args.storage_root)
    if args.template is not None:
        template_bytes = args.template.read_bytes()
    else:
        template_key = Config.CONTRACT_TEMPLATE_KEY.format(template_type=args.template_type)
        template_bytes = store.get(template_key)
        if template_bytes is None:
            print(f"No template at {args.storage_root / template_key}, using a blank page.")
    regular_font = read_optional(args.regular_font) or store.get(Config.CONTRACT_REGULAR_FONT_KEY)
    bold_font = read_optional(args.bold_font) or store.get(Config.CONTRACT_BOLD_FONT_KEY)

    settings = LayoutSettings.from_config()
    if args.box_correction is not None:
        settings = settings.with_overrides(
            signature_box_correction=args.box_correction,
            data_box_correction=args.box_correction,
        )

    fields = ContractFields(
        legal_name=args.name,
        id_number=args.dni,
        street=args.street,
        postal_code=args.cp,
        city=args.city,
        province=args.province,
        signature_date=args.signature_date or format_spanish_date(datetime.now()),
        birth_date=format_spanish_date(args.birth_date),
        nationality=args.nationality,
    )

    try:
        composed = compose_contract(
            template_bytes,
            args.signature.read_bytes(),
            fields,
            regular_font_bytes=regular_font,
            bold_font_bytes=bold_font,
            settings=settings,
        )
    except ContractError as e:
        print(f"Error ({e.code}): {e.message}")
        return 1

    if args.output:
        output_path = args.output
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = DEFAULT_OUTPUT_DIR / f"contract_{timestamp}.pdf"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_bytes(composed.document_bytes)
    print(f"Generated PDF at {output_path}")

    if args.layout_json:
        print(json.dumps(composed.layout.model_dump(mode="json"), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
