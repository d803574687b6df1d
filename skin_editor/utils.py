# skin_editor/utils.py
from __future__ import annotations

"""
Console output for the skin-editor CLI.

Library modules never print; they raise. Only cli.py calls the log helpers
below, which write plain prefixed lines ('[debug]', '[warn]', '[error]').
"""

import sys
from typing import Any, Iterable, List, Tuple


# Value formatting


def format_seconds_compact(seconds: float) -> str:
    """12.3ms below a second, 4.567s below a minute, then '2m 5.0s'."""
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f}ms"
    if seconds < 60.0:
        return f"{seconds:.3f}s"
    minutes = int(seconds // 60)
    return f"{minutes}m {seconds - 60 * minutes:.1f}s"


def format_bool_on_off(value: bool) -> str:
    return "on" if value else "off"


def format_number_compact(value: Any) -> str:
    """
    Pixel counts get thousands separators (4,096); slider values and hues
    drop trailing zeros (0.25, 120). Anything else is str().
    """
    if isinstance(value, bool):
        return format_bool_on_off(value)
    if isinstance(value, int):
        return f"{value:,}"
    if isinstance(value, float):
        return f"{value:.3f}".rstrip("0").rstrip(".")
    return str(value)


def key_value_pairs_to_string(
    pairs: Iterable[Tuple[str, Any]], sep: str = "  ", eq: str = ": "
) -> str:
    """[("Visible", 4096), ("Avg hue", 12.5)] -> 'Visible: 4,096  Avg hue: 12.5'."""
    parts: List[str] = [f"{name}{eq}{format_number_compact(value)}" for name, value in pairs]
    return sep.join(parts)


# Log lines


def enable_line_buffered_stdout() -> None:
    """Flush stdout per line so reports interleave correctly with stderr errors."""
    reconfig = getattr(sys.stdout, "reconfigure", None)
    if callable(reconfig):
        try:
            reconfig(line_buffering=True, write_through=True)
        except (OSError, ValueError):
            pass


def print_config_line(
    section: str, pairs: Iterable[Tuple[str, Any]], debug: bool
) -> None:
    """One '[section] key: value ...' line, e.g. '[filters] hue_shift: 120  contrast: 10'."""
    line = f"[{section}] {key_value_pairs_to_string(pairs)}"
    if debug:
        debug_log(line)
    else:
        log(line)


def print_banner(title: str) -> None:
    print(f"\n=== {title} ===", flush=True)


def log(message: str) -> None:
    print(message, flush=True)


def debug_log(message: str) -> None:
    print(f"[debug] {message}", flush=True)


def warn(message: str) -> None:
    print(f"[warn] {message}", flush=True)


def error(message: str) -> None:
    """Goes to stderr; the CLI exits with status 2 right after."""
    print(f"[error] {message}", file=sys.stderr, flush=True)


__all__ = [
    "format_seconds_compact",
    "format_bool_on_off",
    "format_number_compact",
    "key_value_pairs_to_string",
    "enable_line_buffered_stdout",
    "print_config_line",
    "print_banner",
    "log",
    "debug_log",
    "warn",
    "error",
]
