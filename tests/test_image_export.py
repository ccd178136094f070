from __future__ import annotations

from compound_calc.engine import compute
from compound_calc.image_export import render_result_png

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


def test_render_result_png_returns_png_bytes():
    image = render_result_png(compute(10_000_000, 1_000_000, 12, "years", 12, "annual"))

    assert image.startswith(PNG_MAGIC)


def test_render_empty_breakdown_still_renders_summary():
    image = render_result_png(compute(10_000, 0, 0, "years", 5, "annual"))

    assert image.startswith(PNG_MAGIC)


def test_scale_increases_resolution():
    result = compute(1_000, 10, 2, "years", 5, "annual")

    small = render_result_png(result, scale=1)
    large = render_result_png(result, scale=2)
    # IHDR width is the first field after the chunk header
    assert int.from_bytes(large[16:20], "big") > int.from_bytes(small[16:20], "big")
