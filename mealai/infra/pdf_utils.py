import io
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealai.domain.MealPlan import MealPlan


def generate_pdf_for_plan(plan: MealPlan, title: str = "Weekly Meal Plan"):
    """Generate a PDF with a Day / <meal type> table followed by the shopping list."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    cell = styles["BodyText"]
    elements = [
        Paragraph(escape(title), styles["Title"]),
        Spacer(1, 16),
    ]

    meal_types = plan.meal_types()
    data = [["Day"] + [m.capitalize() for m in meal_types]]
    for day in plan.days:
        row = [day.day]
        for meal_type in meal_types:
            meal = day.meals.get(meal_type)
            if meal is None:
                row.append("-")
                continue
            label = meal.name if meal.prep_time is None else f"{meal.name} ({meal.prep_time} min)"
            row.append(Paragraph(escape(label), cell))
        data.append(row)

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("VALIGN", (0,0), (-1,-1), "MIDDLE"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))
    elements.append(table)

    if plan.grocery_list:
        elements += [Spacer(1, 16), Paragraph("Shopping List", styles["Heading2"])]
        for category, items in plan.grocery_list.items():
            elements.append(Paragraph(escape(category), styles["Heading4"]))
            for item in items:
                elements.append(Paragraph(escape(f"• {item}"), cell))

    doc.build(elements)
    return buf.getvalue()
