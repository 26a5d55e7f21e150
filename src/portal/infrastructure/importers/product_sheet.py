"""Read a product spreadsheet (xlsx or csv) into plain row dicts."""

from __future__ import annotations

from pathlib import Path

import pandas as pd

from portal.application.import_products import IMPORT_COLUMNS
from portal.domain.exceptions import ValidationError


def read_product_rows(path: Path) -> list[dict[str, object]]:
    """Load the sheet and return one dict per row.

    Column names are matched case-insensitively; empty cells become
    None. A sheet without ``name``, ``sku`` and ``base_price`` is
    rejected as a whole.
    """
    if path.suffix.lower() == ".csv":
        df = pd.read_csv(path, dtype=object)
    else:
        df = pd.read_excel(path, dtype=object)

    df.columns = [str(c).strip().lower() for c in df.columns]
    missing = [c for c in ("name", "sku", "base_price") if c not in df.columns]
    if missing:
        raise ValidationError(f"Spreadsheet columns missing: {missing}")

    df = df.astype(object).where(pd.notna(df), None)
    known = [c for c in IMPORT_COLUMNS if c in df.columns]
    return df[known].to_dict(orient="records")
