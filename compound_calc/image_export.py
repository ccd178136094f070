"""Render a calculation result to a PNG image.

The image mirrors what the calculator shows on screen: three summary figures
followed by the year-by-year table, every fifth year highlighted. A fresh
``Figure`` is built for each call so rendering never touches pyplot's global
state and is safe inside a web server.
"""

from __future__ import annotations

import io

from matplotlib.figure import Figure

from .data_models import CalculationResult
from .formatter import BREAKDOWN_HEADERS, breakdown_cells, is_highlighted, summary_lines

DEFAULT_FILENAME = "compound-interest-result.png"

BASE_DPI = 100
FIGURE_WIDTH = 8.0  # inches
SUMMARY_HEIGHT = 1.2
ROW_HEIGHT = 0.28
BACKGROUND = "#ffffff"
HEADER_COLOR = "#f1f3f5"
HIGHLIGHT_COLOR = "#fff4d6"
PROFIT_COLOR = "#2b8a3e"


def render_result_png(result: CalculationResult, scale: float = 2) -> bytes:
    """Draw ``result`` and return the PNG bytes.

    ``scale`` multiplies the base resolution.
    """
    rows = [breakdown_cells(row) for row in result.breakdown]
    table_height = ROW_HEIGHT * (len(rows) + 1) if rows else 0.0
    total_height = SUMMARY_HEIGHT + table_height + 0.2
    fig = Figure(figsize=(FIGURE_WIDTH, total_height), facecolor=BACKGROUND)

    summary_ax = fig.add_axes((0.0, 1 - SUMMARY_HEIGHT / total_height, 1.0, SUMMARY_HEIGHT / total_height))
    summary_ax.set_axis_off()
    for index, (label, value) in enumerate(summary_lines(result)):
        x = (index + 0.5) / 3
        summary_ax.text(x, 0.65, label, ha="center", va="center", fontsize=10, color="#495057")
        summary_ax.text(
            x,
            0.3,
            value,
            ha="center",
            va="center",
            fontsize=13,
            fontweight="bold",
            color=PROFIT_COLOR if index == 0 else "#212529",
        )

    if rows:
        table_ax = fig.add_axes((0.03, 0.1 / total_height, 0.94, table_height / total_height))
        table_ax.set_axis_off()
        table = table_ax.table(
            cellText=rows,
            colLabels=BREAKDOWN_HEADERS,
            cellLoc="right",
            loc="upper center",
            bbox=(0.0, 0.0, 1.0, 1.0),
        )
        table.auto_set_font_size(False)
        table.set_fontsize(9)
        for col in range(len(BREAKDOWN_HEADERS)):
            table[0, col].set_facecolor(HEADER_COLOR)
            table[0, col].get_text().set_fontweight("bold")
        for row_index, row in enumerate(result.breakdown, start=1):
            table[row_index, 2].get_text().set_color(PROFIT_COLOR)
            if is_highlighted(row):
                for col in range(len(BREAKDOWN_HEADERS)):
                    table[row_index, col].set_facecolor(HIGHLIGHT_COLOR)

    buffer = io.BytesIO()
    fig.savefig(buffer, format="png", dpi=BASE_DPI * scale, facecolor=BACKGROUND)
    return buffer.getvalue()
