"""
Reader for the E*Trade Gains & Losses export.

The expanded G&L download is an .xlsx workbook whose "G&L_Expanded" sheet
holds one header row followed by a summary row and one row per lot sold.
"""

import logging
import zipfile
from pathlib import Path
from typing import Any

import pandas as pd

from .config import GAINS_AND_LOSSES_SHEET
from .errors import IngestionError

logger = logging.getLogger(__name__)


def _cell_value(value: Any) -> Any:
    """Replace pandas' missing-value markers with None."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    return value


def load_gains_and_losses(
    excel_path: Path, sheet_name: str = GAINS_AND_LOSSES_SHEET
) -> tuple[list[str], list[list[Any]]]:
    """
    Load the header row and the data rows of the G&L sheet.

    Cells keep the type the workbook gives them (str, int, float or
    datetime); empty cells are None.
    """
    excel_path = Path(excel_path)
    try:
        df = pd.read_excel(excel_path, sheet_name=sheet_name, header=None, dtype=object)
    except (ValueError, zipfile.BadZipFile) as e:
        raise IngestionError(f"Cannot read sheet '{sheet_name}' from {excel_path.name}: {e}") from e

    if df.empty:
        raise IngestionError(f"Sheet '{sheet_name}' in {excel_path.name} has no header row")

    records = [[_cell_value(v) for v in row] for row in df.itertuples(index=False, name=None)]
    header_row = ["" if h is None else str(h).strip() for h in records[0]]
    rows = records[1:]

    logger.info("Read %d row(s) from sheet '%s' of %s", len(rows), sheet_name, excel_path)
    return header_row, rows
