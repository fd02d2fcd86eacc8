"""Text formatting helpers for the sysdash dashboard."""

KB = 1024
MB = 1024 * KB
GB = 1024 * MB

# ANSI control sequences
RESET = "\x1b[0m"
BOLD = "\x1b[1m"
RED = "\x1b[31m"
GREEN = "\x1b[32m"
YELLOW = "\x1b[33m"
CYAN = "\x1b[36m"
GRAY = "\x1b[90m"
CLEAR_SCREEN = "\x1b[2J\x1b[1;1H"

ALERT_RATIO = 0.8
WARNING_RATIO = 0.5


def format_bytes(size: int) -> str:
    """Format bytes as human-readable string (1024-based, up to GB)."""
    if size >= GB:
        return f"{size / GB:.2f} GB"
    if size >= MB:
        return f"{size / MB:.2f} MB"
    if size >= KB:
        return f"{size / KB:.2f} KB"
    return f"{size} B"


def bar_color(ratio: float) -> str:
    """Pick the color tier for a fill ratio."""
    if ratio > ALERT_RATIO:
        return RED
    if ratio > WARNING_RATIO:
        return YELLOW
    return GREEN


def bar(value: float, maximum: float, width: int) -> str:
    """
    Render a colored, bracketed progress bar.

    Args:
        value: Current value.
        maximum: Value that fills the bar. Must be greater than zero.
        width: Number of marker cells between the brackets.
    """
    ratio = value / maximum
    filled = min(max(int(ratio * width), 0), width)
    empty = max(width - filled, 0)
    return f"{bar_color(ratio)}[{'#' * filled}{'.' * empty}]{RESET}"


def format_uptime(seconds: int) -> str:
    """Format uptime as 'Hh Mm Ss'."""
    return f"{seconds // 3600}h {(seconds % 3600) // 60}m {seconds % 60}s"
