"""
Excel report generation for ship manifests.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import pandas as pd
from openpyxl.styles import Alignment, Font, PatternFill

from ..services.ship_service import ship_manifest

if TYPE_CHECKING:
    from ..models import Ship

MANIFEST_COLUMNS = [
    "Serial",
    "Type",
    "Load (kg)",
    "Capacity (kg)",
    "Height (cm)",
    "Depth (cm)",
    "Own weight (kg)",
    "Hazardous",
    "Pressure (atm)",
    "Product",
    "Temperature (°C)",
]


def _fmt(value: object, fmt: str) -> str:
    """Safely format numeric values, falling back to string/blank."""
    if value is None:
        return ""
    try:
        return format(float(value), fmt)
    except (TypeError, ValueError):
        return str(value)


def _style_header(ws) -> None:
    header_fill = PatternFill(fill_type="solid", fgColor="4472C4")
    header_font = Font(bold=True, color="FFFFFF")
    header_alignment = Alignment(horizontal="center", vertical="center")
    for cell in ws[1]:
        cell.fill = header_fill
        cell.font = header_font
        cell.alignment = header_alignment


def _style_body_table(ws, *, start_row: int = 2, first_col_bold: bool = True, stripe: bool = True) -> None:
    """Zebra striping, bold first column, first column left and the rest right aligned."""
    stripe_fill = PatternFill(fill_type="solid", fgColor="F5F5F5")
    for row in ws.iter_rows(min_row=start_row, max_row=ws.max_row, min_col=1, max_col=ws.max_column):
        if first_col_bold and row and row[0].value not in (None, ""):
            row[0].font = Font(bold=True)
        for cell in row:
            if stripe and cell.row % 2 == 0:
                cell.fill = stripe_fill
            cell.alignment = Alignment(
                horizontal="left" if cell.column == 1 else "right",
                vertical="center",
                wrap_text=True,
            )


def manifest_dataframe(ship: "Ship") -> pd.DataFrame:
    """One row per container, in loading order."""
    manifest = ship_manifest(ship)
    rows = [
        {
            "Serial": c.serial_number,
            "Type": c.type_code,
            "Load (kg)": c.current_load_kg,
            "Capacity (kg)": c.max_capacity_kg,
            "Height (cm)": c.height_cm,
            "Depth (cm)": c.depth_cm,
            "Own weight (kg)": c.own_weight_kg,
            "Hazardous": c.is_hazardous,
            "Pressure (atm)": c.pressure_atm,
            "Product": c.product_type,
            "Temperature (°C)": c.temperature_c,
        }
        for c in manifest.containers
    ]
    return pd.DataFrame(rows, columns=MANIFEST_COLUMNS)


def export_manifest_to_excel(filepath: Path, ship: "Ship") -> None:
    """
    Write a two-sheet workbook: ship summary and the container list.
    """
    manifest = ship_manifest(ship)
    df_summary = pd.DataFrame(
        {
            "Parameter": [
                "Ship",
                "Max containers",
                "Containers on board",
                "Max weight (kg)",
                "Cargo on board (kg)",
            ],
            "Value": [
                manifest.name,
                str(manifest.max_containers),
                str(manifest.container_count),
                _fmt(manifest.max_weight_kg, ".1f"),
                _fmt(manifest.total_load_kg, ".1f"),
            ],
        }
    )
    df_containers = manifest_dataframe(ship)

    with pd.ExcelWriter(str(filepath), engine="openpyxl") as writer:
        df_summary.to_excel(writer, sheet_name="Ship Summary", index=False)
        ws_summary = writer.sheets["Ship Summary"]
        ws_summary.column_dimensions["A"].width = 28
        ws_summary.column_dimensions["B"].width = 24
        _style_header(ws_summary)
        _style_body_table(ws_summary)
        ws_summary.freeze_panes = "A2"

        df_containers.to_excel(writer, sheet_name="Containers", index=False)
        ws_containers = writer.sheets["Containers"]
        ws_containers.column_dimensions["A"].width = 14
        for letter in "BCDEFGHIJK":
            ws_containers.column_dimensions[letter].width = 14
        _style_header(ws_containers)
        _style_body_table(ws_containers)
        ws_containers.freeze_panes = "A2"
