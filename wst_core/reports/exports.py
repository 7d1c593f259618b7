# wst_core/reports/exports.py
"""
XLSX / PDF renderers for the employee hours report. Both return the file bytes.

Layout (both formats):
    title, summary (total hours / total shifts)
    header: Empleado | Total Horas | Total Turnos | <one column per position, grouped under its client>
    one row per employee (hours per position), then a totals row
"""
from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from io import BytesIO

from openpyxl import Workbook
from openpyxl.styles import Alignment, Border, Font, PatternFill, Side
from openpyxl.utils import get_column_letter
from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from wst_core.reports.selectors import ClientColumns, EmployeeHours

MONTH_NAMES_ES = (
    "Enero",
    "Febrero",
    "Marzo",
    "Abril",
    "Mayo",
    "Junio",
    "Julio",
    "Agosto",
    "Septiembre",
    "Octubre",
    "Noviembre",
    "Diciembre",
)

FIXED_HEADERS = ("Empleado", "Total Horas", "Total Turnos")
HEADER_FILL = "F5F5F5"
HEADER_FONT_COLOR = "404040"


def month_name(month: int) -> str:
    return MONTH_NAMES_ES[month - 1]


def export_filename(*, month: int, year: int, extension: str) -> str:
    return f"Reporte_Turnos_{month_name(month)}_{year}.{extension}"


def _hours(value: Decimal) -> float:
    return float(value)


def _matrix(report: list[EmployeeHours], groups: list[ClientColumns]) -> list[list]:
    """
    Body rows: name, total hours, total shifts, then hours per position column (blank when none).
    """
    columns = [p.position_id for g in groups for p in g.positions]
    rows = []
    for row in report:
        cells = [row.employee_name, _hours(row.total_hours), row.total_shifts]
        for position_id in columns:
            item = row.breakdown.get(position_id)
            cells.append(_hours(item.total_horas) if item else "")
        rows.append(cells)
    return rows


def _position_totals(report: list[EmployeeHours], groups: list[ClientColumns]) -> list[float]:
    out = []
    for group in groups:
        for position in group.positions:
            total = sum(
                (r.breakdown[position.position_id].total_horas for r in report if position.position_id in r.breakdown),
                Decimal("0"),
            )
            out.append(_hours(total))
    return out


def render_xlsx(
    *,
    report: list[EmployeeHours],
    groups: list[ClientColumns],
    month: int,
    year: int,
    total_hours: Decimal,
    total_shifts: int,
) -> bytes:
    wb = Workbook()
    ws = wb.active
    ws.title = "Reporte de Turnos"

    thin = Side(style="thin", color="000000")
    border = Border(top=thin, left=thin, right=thin, bottom=thin)
    header_fill = PatternFill(fill_type="solid", fgColor=HEADER_FILL)
    header_font = Font(bold=True, color=HEADER_FONT_COLOR, size=11)
    center = Alignment(horizontal="center", vertical="center", wrap_text=True)

    # Title + summary
    ws.append([f"Reporte de Turnos - {month_name(month)} {year}"])
    ws.merge_cells(start_row=1, start_column=1, end_row=1, end_column=3)
    ws.cell(row=1, column=1).font = Font(bold=True, size=16)
    ws.cell(row=1, column=1).alignment = center
    ws.append([])
    ws.append(["Total Horas:", _hours(total_hours)])
    ws.append(["Total Turnos:", total_shifts])
    for r in (3, 4):
        ws.cell(row=r, column=1).alignment = Alignment(horizontal="right")
        ws.cell(row=r, column=2).font = Font(bold=True, size=12)
    ws.append([])

    # Two header rows: clients (merged over their positions), then position siglas
    client_row = list(FIXED_HEADERS)
    position_row = ["", "", ""]
    for group in groups:
        client_row.append(group.empresa)
        client_row.extend([""] * (len(group.positions) - 1))
        position_row.extend(p.siglas for p in group.positions)

    ws.append(client_row)
    h1 = ws.max_row
    ws.append(position_row)
    h2 = ws.max_row

    for col in range(1, 4):
        ws.merge_cells(start_row=h1, start_column=col, end_row=h2, end_column=col)
    col = 4
    for group in groups:
        span = len(group.positions)
        if span > 1:
            ws.merge_cells(start_row=h1, start_column=col, end_row=h1, end_column=col + span - 1)
        for position in group.positions:
            ws.cell(row=h2, column=col).fill = PatternFill(fill_type="solid", fgColor=position.color.lstrip("#").upper())
            col += 1

    width = len(client_row)
    for r in (h1, h2):
        for c in range(1, width + 1):
            cell = ws.cell(row=r, column=c)
            if r == h1 or c <= 3:
                cell.fill = header_fill
            cell.font = header_font
            cell.alignment = center
            cell.border = border

    # Body + totals
    for cells in _matrix(report, groups):
        ws.append(cells)
        for c in range(1, width + 1):
            ws.cell(row=ws.max_row, column=c).border = border
            if c > 1:
                ws.cell(row=ws.max_row, column=c).alignment = center

    ws.append(["Total", _hours(total_hours), total_shifts, *_position_totals(report, groups)])
    for c in range(1, width + 1):
        cell = ws.cell(row=ws.max_row, column=c)
        cell.font = Font(bold=True)
        cell.border = border
        cell.fill = header_fill

    # column widths
    for idx, column in enumerate(ws.iter_cols(min_row=h1, max_row=ws.max_row), start=1):
        max_length = max((len(str(cell.value)) for cell in column if cell.value is not None), default=0)
        ws.column_dimensions[get_column_letter(idx)].width = min(max(max_length + 2, 8), 50)

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()


def render_pdf(
    *,
    report: list[EmployeeHours],
    groups: list[ClientColumns],
    month: int,
    year: int,
    total_hours: Decimal,
    total_shifts: int,
) -> bytes:
    buffer = BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=landscape(A4), title=f"Reporte de Turnos {month_name(month)} {year}")
    story = []

    styles = getSampleStyleSheet()
    title_style = ParagraphStyle(
        "ReportTitle",
        parent=styles["Heading1"],
        fontSize=16,
        spaceAfter=12,
        alignment=1,
    )
    story.append(Paragraph(f"Reporte de Turnos - {month_name(month)} {year}", title_style))
    story.append(Paragraph(f"Total Horas: <b>{_hours(total_hours)}</b> &nbsp;&nbsp; Total Turnos: <b>{total_shifts}</b>", styles["Normal"]))
    story.append(Spacer(1, 12))

    client_row = list(FIXED_HEADERS)
    position_row = ["", "", ""]
    for group in groups:
        client_row.append(group.empresa)
        client_row.extend([""] * (len(group.positions) - 1))
        position_row.extend(p.siglas for p in group.positions)

    body = [[str(v) for v in cells] for cells in _matrix(report, groups)]
    totals = ["Total", str(_hours(total_hours)), str(total_shifts), *[str(v) for v in _position_totals(report, groups)]]
    table = Table([client_row, position_row, *body, totals], repeatRows=2)

    style = [
        ("BACKGROUND", (0, 0), (-1, 1), colors.HexColor("#F5F5F5")),
        ("TEXTCOLOR", (0, 0), (-1, 1), colors.HexColor("#404040")),
        ("FONTNAME", (0, 0), (-1, 1), "Helvetica-Bold"),
        ("FONTNAME", (0, 2), (-1, -1), "Helvetica"),
        ("FONTNAME", (0, -1), (-1, -1), "Helvetica-Bold"),
        ("FONTSIZE", (0, 0), (-1, -1), 8),
        ("ALIGN", (1, 0), (-1, -1), "CENTER"),
        ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ("GRID", (0, 0), (-1, -1), 0.5, colors.black),
        ("SPAN", (0, 0), (0, 1)),
        ("SPAN", (1, 0), (1, 1)),
        ("SPAN", (2, 0), (2, 1)),
    ]
    col = 3
    for group in groups:
        span = len(group.positions)
        if span > 1:
            style.append(("SPAN", (col, 0), (col + span - 1, 0)))
        for position in group.positions:
            style.append(("BACKGROUND", (col, 1), (col, 1), colors.HexColor(position.color)))
            col += 1
    table.setStyle(TableStyle(style))
    story.append(table)

    story.append(Spacer(1, 18))
    story.append(Paragraph(f"Generado el: {datetime.now().strftime('%d/%m/%Y %H:%M')}", styles["Normal"]))

    doc.build(story)
    return buffer.getvalue()
