"""
Workbook palette: fonts, fills, borders and alignments shared by every sheet.

Correlation cells use a diverging pair of fills (blue for positive, red for
negative), mirroring the coolwarm heatmaps written next to the workbook.
"""
from openpyxl.styles import Font, PatternFill, Alignment, Border, Side


def _solid(color: str) -> PatternFill:
    return PatternFill(start_color=color, end_color=color, fill_type="solid")


# Palette
INK = "212121"
MUTED = "757575"
MOUNTAIN = "37474F"      # headers and section titles
RULE = "B0BEC5"
ZEBRA = "F7F9FA"
PAPER = "FFFFFF"
POSITIVE_STRONG = "90CAF9"
POSITIVE_WEAK = "E3F2FD"
NEGATIVE_STRONG = "EF9A9A"
NEGATIVE_WEAK = "FFEBEE"
DIAGONAL = "ECEFF1"
FLAG = "FFF3CD"

# Fonts
TITLE_FONT = Font(name="Calibri", size=22, bold=True, color=MOUNTAIN)
SUBTITLE_FONT = Font(name="Calibri", size=11, italic=True, color=MUTED)
SECTION_FONT = Font(name="Calibri", size=13, bold=True, color=MOUNTAIN)
HEADER_FONT = Font(name="Calibri", size=10, bold=True, color=PAPER)
DATA_FONT = Font(name="Calibri", size=10, color=INK)
LABEL_FONT = Font(name="Calibri", size=10, bold=True, color=INK)
KPI_VALUE_FONT = Font(name="Calibri", size=24, bold=True, color=MOUNTAIN)
KPI_LABEL_FONT = Font(name="Calibri", size=9, color=MUTED)
NOTE_TITLE_FONT = Font(name="Calibri", size=11, bold=True, color=INK)
NOTE_BODY_FONT = Font(name="Calibri", size=10, italic=True, color=MUTED)

# Fills
HEADER_FILL = _solid(MOUNTAIN)
ZEBRA_FILL = _solid(ZEBRA)
DIAGONAL_FILL = _solid(DIAGONAL)
FLAG_FILL = _solid(FLAG)

# Named fills a highlight callback may return
HIGHLIGHT_FILLS = {
    "positive": _solid(POSITIVE_STRONG),
    "positive_weak": _solid(POSITIVE_WEAK),
    "negative": _solid(NEGATIVE_STRONG),
    "negative_weak": _solid(NEGATIVE_WEAK),
    "flag": FLAG_FILL,
}

# Borders
_thin = Side(style="thin", color=RULE)
CELL_BORDER = Border(left=_thin, right=_thin, top=_thin, bottom=_thin)
HEADER_BORDER = Border(
    left=_thin, right=_thin, top=_thin,
    bottom=Side(style="medium", color=MOUNTAIN),
)

# Alignments
CENTER = Alignment(horizontal="center", vertical="center")
LEFT = Alignment(horizontal="left", vertical="center")
RIGHT = Alignment(horizontal="right", vertical="center")
WRAP = Alignment(horizontal="left", vertical="top", wrap_text=True)
