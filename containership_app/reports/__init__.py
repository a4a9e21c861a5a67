"""
Reporting utilities (text/Excel/PDF) for ship manifests.
"""

from .simple_text_report import build_ship_summary_text
from .pdf_report import export_manifest_to_pdf
from .excel_report import export_manifest_to_excel, manifest_dataframe

__all__ = [
    "build_ship_summary_text",
    "export_manifest_to_pdf",
    "export_manifest_to_excel",
    "manifest_dataframe",
]
