# taptimer/ui/theming/theme_definitions.py
# Color palettes for the taptimer CLI & live board

from __future__ import annotations


# five accent stops per palette, brightest first
THEMES = {
    "deep_blue": [
        "#4a90e2",  # sky blue
        "#357abd",  # medium blue
        "#2563eb",  # royal blue
        "#1d4ed8",  # deep blue
        "#1e40af",  # dark blue
    ],
    "teal_lime": [
        "#00CED1",  # dark turquoise
        "#20B2AA",  # light sea green
        "#3CB371",  # medium sea green
        "#66CDAA",  # medium aquamarine
        "#90EE90",  # light green
    ],
    "sunset_coral": [
        "#FF7F50",  # coral
        "#FF8C69",  # salmon
        "#FFA500",  # orange
        "#FFB347",  # peach
        "#FFD700",  # gold
    ],
    "volcanic_fire": [
        "#FFD700",  # gold
        "#FFA500",  # orange
        "#FF6347",  # tomato
        "#FF4500",  # orange red
        "#DC143C",  # crimson
    ],
    "mono": [
        "#e5e5e5",
        "#cccccc",
        "#b3b3b3",
        "#999999",
        "#808080",
    ],
}
