import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from grocery.logic.shopping.budget import format_money

CATEGORY_LABELS = {
    "produce": "Produce",
    "proteins": "Proteins",
    "dairy": "Dairy",
    "grains_bread": "Grains & Bread",
    "pantry": "Pantry",
    "other": "Other",
}


def generate_pdf_for_list(grocery_list):
    """Generate a printable PDF: one table row per item, grouped by category."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )
    meta = grocery_list.metadata
    currency = meta.get("currency", "USD")

    styles = getSampleStyleSheet()
    week = ""
    if grocery_list.week_starting and grocery_list.week_ending:
        week = f"{grocery_list.week_starting.isoformat()} – {grocery_list.week_ending.isoformat()}"
    elements = [
        Paragraph(f"Grocery List {week}", styles["Title"]),
        Paragraph(
            f"Household: {meta.get('householdSize', '-')} · "
            f"Estimated total: {format_money(meta.get('totalEstimatedCost') or 0, currency)} · "
            f"Budget: {format_money(meta.get('budgetLimit') or 0, currency)} ({meta.get('budgetStatus', '-')})",
            styles["Normal"],
        ),
        Spacer(1, 16),
    ]

    data = [["", "Item", "Quantity", "Category", "Price"]]
    for item in grocery_list.items:
        data.append([
            "[x]" if item.checked else "[ ]",
            item.name,
            f"{item.quantity} {item.unit}",
            CATEGORY_LABELS.get(item.category, item.category),
            format_money(item.estimated_price, currency),
        ])

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "LEFT"),
        ("ALIGN", (-1,0), (-1,-1), "RIGHT"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))

    elements.append(table)
    for notice in list(grocery_list.warnings) + list(grocery_list.suggestions):
        elements.append(Spacer(1, 8))
        elements.append(Paragraph(notice.message, styles["Italic"]))
    doc.build(elements)
    return buf.getvalue()
