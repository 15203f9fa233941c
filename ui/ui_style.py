TEXT_PRIMARY = "#1A1A1A"
TEXT_MUTED = "#6B6B6B"


BG = "#F7F4EF"
SURFACE = "#FFFFFF"
SURFACE_ALT = "#F1ECE4"
BORDER = "#E2DAD0"

ACCENT = "#B8860B"
ACCENT_SOFT = "#FBF3E0"
SUCCESS = "#2E7D32"
WARNING = "#E0A100"
DANGER = "#C62828"


def bubble_color(role: str, transient: bool = False) -> str:
    if transient:
        return SURFACE_ALT
    return {
        "user": ACCENT_SOFT,
        "assistant": SURFACE,
    }.get(role, SURFACE)


def card_border(selected: bool) -> str:
    return ACCENT if selected else BORDER
