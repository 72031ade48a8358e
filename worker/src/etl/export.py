"""Spreadsheet export for collected venue records."""

import logging
from pathlib import Path
from typing import Sequence, Union

from openpyxl import Workbook
from openpyxl.styles import Font

from src.core.models import COLUMNS, FoodVenueRecord

logger = logging.getLogger(__name__)

_COLUMN_WIDTHS = {"name": 35, "address": 50, "phone": 20, "rating": 10}


def resolve_output_path(filename: Union[str, Path]) -> Path:
    path = Path(filename)
    if path.suffix.lower() != ".xlsx":
        path = path.with_name(f"{path.name}.xlsx")
    return path


def export_to_excel(
    records: Sequence[FoodVenueRecord],
    filename: Union[str, Path],
    sheet_title: str = "Restaurants",
) -> Path:
    """Write records to an ``.xlsx`` workbook and return the file path."""
    if not records:
        raise ValueError("No records to export")

    path = resolve_output_path(filename)
    path.parent.mkdir(parents=True, exist_ok=True)

    wb = Workbook()
    ws = wb.active
    ws.title = sheet_title

    header_font = Font(bold=True)
    for col_idx, column in enumerate(COLUMNS, 1):
        cell = ws.cell(row=1, column=col_idx, value=column)
        cell.font = header_font
        ws.column_dimensions[cell.column_letter].width = _COLUMN_WIDTHS[column]

    for record in records:
        ws.append(list(record.as_row()))

    wb.save(path)
    logger.info("Saved %d records to %s", len(records), path)
    return path
