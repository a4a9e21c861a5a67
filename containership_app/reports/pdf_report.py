"""
PDF report generation for ship manifests.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import cm
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from ..models import ContainerKind
from ..services.ship_service import ship_manifest

if TYPE_CHECKING:
    from ..models import Ship


def export_manifest_to_pdf(filepath: Path, ship: "Ship") -> None:
    """
    Generate a PDF manifest: ship header plus one table row per container.
    """
    manifest = ship_manifest(ship)
    doc = SimpleDocTemplate(
        str(filepath),
        pagesize=landscape(A4),
        rightMargin=1.5 * cm,
        leftMargin=1.5 * cm,
        topMargin=1.5 * cm,
        bottomMargin=1.5 * cm,
    )
    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "CustomTitle",
        parent=styles["Heading1"],
        fontSize=16,
    )

    story = []
    story.append(Paragraph("Container Manifest", title_style))
    story.append(Spacer(1, 0.5 * cm))
    story.append(Paragraph(f"Ship: {manifest.name}", styles["Normal"]))
    story.append(Paragraph(
        f"Containers: {manifest.container_count} / {manifest.max_containers} - "
        f"Cargo: {manifest.total_load_kg:.1f} / {manifest.max_weight_kg:.1f} kg",
        styles["Normal"],
    ))
    story.append(Spacer(1, 0.5 * cm))

    data = [["Serial", "Type", "Load (kg)", "Capacity (kg)", "H x D (cm)", "Own (kg)", "Details"]]
    for c in manifest.containers:
        if c.type_code == ContainerKind.REFRIGERATED.value:
            temperature = "n/a" if c.temperature_c is None else f"{c.temperature_c:g} °C"
            details = f"{c.product_type or 'n/a'}, {temperature}"
        elif c.pressure_atm is not None:
            details = f"{c.pressure_atm:g} atm"
        else:
            details = "Hazardous" if c.is_hazardous else ""
        data.append([
            c.serial_number,
            c.type_code,
            f"{c.current_load_kg:.1f}",
            f"{c.max_capacity_kg:.1f}",
            f"{c.height_cm:g} x {c.depth_cm:g}",
            f"{c.own_weight_kg:.1f}",
            details,
        ])

    table = Table(data, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), "#4472C4"),
                ("TEXTCOLOR", (0, 0), (-1, 0), "white"),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, 0), 10),
                ("BOTTOMPADDING", (0, 0), (-1, 0), 8),
                ("BACKGROUND", (0, 1), (-1, -1), "#E7E6E6"),
                ("GRID", (0, 0), (-1, -1), 0.5, "gray"),
                ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 9),
            ]
        )
    )
    story.append(table)
    doc.build(story)
