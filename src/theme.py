"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
"""
from __future__ import annotations
import os, sys
from pathlib import Path

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

PALETTE_KEYS = ('TASKS_PRIMARY', 'TASKS_PENDING', 'TASKS_DONE', 'TASKS_DUE_SOON')

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    return f"\033[38;5;{16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)}m"

def _from_hex(hex_code: str) -> str:
    """Convert a hex color code to an ANSI escape sequence."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def normalize_hex(value: str | None) -> str | None:
    """Return '#rrggbb' for a valid 6-digit hex value, else None."""
    if not value:
        return None
    h = value.strip().lstrip('#')
    if len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h):
        return '#' + h
    return None

def parse_env_file(text: str) -> dict[str, str]:
    """Extract palette overrides from .env style text, skipping malformed lines."""
    overrides: dict[str, str] = {}
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        hex_value = normalize_hex(v)
        if k in PALETTE_KEYS and hex_value:
            overrides[k] = hex_value
    return overrides

def resolve_hex(key: str, default: str, env_overrides: dict[str, str]) -> str:
    """Priority: real env var > .env override > default."""
    return normalize_hex(os.environ.get(key)) or env_overrides.get(key, default)

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_PENDING_DEFAULT = '#48B3AF'
HEX_DONE_DEFAULT = '#A7E399'
HEX_DUE_SOON_DEFAULT = '#F6FF99'

def load_env_overrides(env_path: Path) -> dict[str, str]:
    """Palette overrides from a .env file; missing or unreadable files give none."""
    if not env_path.exists():
        return {}
    try:
        return parse_env_file(env_path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError):
        return {}

_ENV_OVERRIDES = load_env_overrides(Path(__file__).resolve().parent.parent / '.env')

HEX_PRIMARY = resolve_hex('TASKS_PRIMARY', HEX_PRIMARY_DEFAULT, _ENV_OVERRIDES)
HEX_PENDING = resolve_hex('TASKS_PENDING', HEX_PENDING_DEFAULT, _ENV_OVERRIDES)
HEX_DONE = resolve_hex('TASKS_DONE', HEX_DONE_DEFAULT, _ENV_OVERRIDES)
HEX_DUE_SOON = resolve_hex('TASKS_DUE_SOON', HEX_DUE_SOON_DEFAULT, _ENV_OVERRIDES)

PRIMARY = _from_hex(HEX_PRIMARY)
C_PENDING = _from_hex(HEX_PENDING)
C_DONE = _from_hex(HEX_DONE)
C_DUE_SOON = _from_hex(HEX_DUE_SOON)

HEADER_COLOR = PRIMARY
ROW_COLOR = PRIMARY + BOLD  # row numbers in bold primary
EMPTY_COLOR = DIM + PRIMARY
DUE_COLOR = DIM
DONE_COLOR = DIM + C_DONE

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','RESET','BOLD','DIM','HEADER_COLOR','ROW_COLOR','EMPTY_COLOR','DUE_COLOR',
    'DONE_COLOR','C_PENDING','C_DONE','C_DUE_SOON','HEX_PRIMARY','HEX_PENDING','HEX_DONE',
    'HEX_DUE_SOON','normalize_hex','parse_env_file','load_env_overrides','resolve_hex','_ENABLE','_USE_TRUECOLOR','_FORCE'
]
