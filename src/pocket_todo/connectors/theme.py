# src/pocket_todo/connectors/theme.py

"""Color helpers for the console.

- Light palette uses the app's original colors; dark palette is a muted swap.
- Truecolor when COLORTERM advertises it, else the xterm 256-color cube.
- Disabled when stdout is not a TTY (unless FORCE_COLOR=1) or NO_COLOR is set.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass

RESET = "\033[0m"
BOLD = "\033[1m"
STRIKE = "\033[9m"


def colors_enabled() -> bool:
    if os.environ.get("NO_COLOR") is not None:
        return False
    if os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}:
        return True
    try:
        return sys.stdout.isatty()
    except ValueError:
        # closed stream (e.g. during interpreter shutdown)
        return False


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip("#")
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def fg(hex_code: str) -> str:
    """ANSI foreground escape for a hex color."""
    r, g, b = _hex_to_rgb(hex_code)
    if any(tok in os.environ.get("COLORTERM", "").lower() for tok in ("truecolor", "24bit")):
        return f"\033[38;2;{r};{g};{b}m"

    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))

    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"


@dataclass(frozen=True, slots=True)
class Palette:
    name: str
    title: str
    index: str
    text: str
    done: str
    notice: str


LIGHT = Palette(
    name="light",
    title="#7C9BCC",
    index="#A39FE1",
    text="#333333",
    done="#9BB8ED",
    notice="#FF00FF",
)

DARK = Palette(
    name="dark",
    title="#9BB8ED",
    index="#DEB3E0",
    text="#EEEEEE",
    done="#777777",
    notice="#FEC6DF",
)


def palette_for(dark_mode: bool) -> Palette:
    return DARK if dark_mode else LIGHT


def paint(text: str, hex_code: str, *extra: str, enabled: bool | None = None) -> str:
    if enabled is None:
        enabled = colors_enabled()
    if not enabled or not text:
        return text
    return "".join(extra) + fg(hex_code) + text + RESET
