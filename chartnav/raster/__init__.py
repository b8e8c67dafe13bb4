from .canvas import RGBA, draw_hline, draw_pixel, draw_vline, fill_capsule, fill_rect, new_canvas
from .draw_markers import SYMBOL_NAMES, draw_symbol, symbol_for_index
from .draw_text import draw_text, text_size

__all__ = [
    "RGBA",
    "SYMBOL_NAMES",
    "draw_hline",
    "draw_pixel",
    "draw_symbol",
    "draw_text",
    "draw_vline",
    "fill_capsule",
    "fill_rect",
    "new_canvas",
    "symbol_for_index",
    "text_size",
]
