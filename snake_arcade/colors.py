"""Theme colors handed to the client UI."""

from .constants import BACKGROUND_COLOR
from .models import Settings


def adjust_color(hex_color: str, amount: int) -> str:
    """Shift every channel of a ``#rrggbb`` color by ``amount``, clamped to 0-255."""
    channels = (int(hex_color[i:i + 2], 16) for i in (1, 3, 5))
    return "#" + "".join(f"{min(255, max(0, c + amount)):02x}" for c in channels)


def build_theme(settings: Settings) -> dict:
    accent = settings.accent_color
    return {
        "accent": accent,
        "body": settings.body_color,
        "food": settings.food_color,
        "shadow": adjust_color(accent, -50),
        "glow": f"{accent}99",
        "halo": f"{accent}33",
        "button_text": BACKGROUND_COLOR,
    }
