from .layouts import base_layout, gadget_layout
from .draw import draw_gadget, link_labels

__all__ = [
    "base_layout",
    "gadget_layout",
    "draw_gadget",
    "link_labels",
]
