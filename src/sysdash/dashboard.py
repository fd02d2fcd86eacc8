"""Dashboard rendering for sysdash.

Every section renderer takes a SystemSnapshot and returns the section's lines
without trailing newlines. render_frame() joins them into one frame.
"""

from collections.abc import Iterable

from sysdash.formatter import (
    BOLD,
    CLEAR_SCREEN,
    CYAN,
    GRAY,
    RESET,
    bar,
    format_bytes,
    format_uptime,
)
from sysdash.models import ProcessSnapshot, SystemSnapshot

TOP_PROCESS_COUNT = 5
CORE_BAR_WIDTH = 25
MEMORY_BAR_WIDTH = 35
DISK_BAR_WIDTH = 20

START_BANNER = [
    f"{CYAN}+======================================+",
    "|     System Monitor in Python         |",
    f"+======================================+{RESET}",
    "Starting... (Ctrl+C to exit)",
    "",
]

HEADER = [
    f"{CYAN}+-----------------------------------------------------+",
    "|           System Monitor - Python                   |",
    f"+-----------------------------------------------------+{RESET}",
]


def section_title(title: str) -> list[str]:
    """Blank spacer line followed by a bold section title."""
    return ["", f"{BOLD} {title}{RESET}"]


def render_system(snapshot: SystemSnapshot) -> list[str]:
    return section_title("System") + [
        f"  OS:       {snapshot.os_name or 'Unknown'}",
        f"  Kernel:   {snapshot.kernel_version or '?'}",
        f"  Host:     {snapshot.host_name or '?'}",
        f"  Uptime:   {format_uptime(snapshot.uptime_seconds)}",
    ]


def render_cpu(snapshot: SystemSnapshot) -> list[str]:
    """
    Render the CPU block.

    The total is the mean of the per-core usages, so at least one core is
    required.
    """
    cores = snapshot.cores
    brand = cores[0].brand if cores else "Unknown"
    lines = section_title("CPU") + [
        f"  Model:    {brand}",
        f"  Cores:    {len(cores)}",
    ]
    for i, core in enumerate(cores):
        lines.append(f"  Core {i:>2}: {bar(core.usage, 100.0, CORE_BAR_WIDTH)} {core.usage:>5.1f}%")

    total = sum(core.usage for core in cores) / len(cores)
    lines.append(f"  {BOLD}Total:   {bar(total, 100.0, CORE_BAR_WIDTH)} {total:.1f}%{RESET}")
    return lines


def render_memory(snapshot: SystemSnapshot) -> list[str]:
    total = snapshot.memory_total
    used = snapshot.memory_used
    pct = used / total * 100.0
    return section_title("Memory") + [
        f"  {bar(pct, 100.0, MEMORY_BAR_WIDTH)} {pct:.1f}%",
        f"  Used: {format_bytes(used)}  Free: {format_bytes(total - used)}"
        f"  Total: {format_bytes(total)}",
    ]


def render_swap(snapshot: SystemSnapshot) -> list[str]:
    """Render the swap block, or nothing when the host has no swap."""
    total = snapshot.swap_total
    if total <= 0:
        return []
    used = snapshot.swap_used
    pct = used / total * 100.0
    return section_title("Swap") + [
        f"  {bar(pct, 100.0, MEMORY_BAR_WIDTH)} {pct:.1f}%",
        f"  Used: {format_bytes(used)}  Total: {format_bytes(total)}",
    ]


def render_disks(snapshot: SystemSnapshot) -> list[str]:
    lines = section_title("Disks")
    for disk in snapshot.disks:
        pct = disk.used / disk.total * 100.0
        lines.append(
            f"  {disk.mount_point:15} {bar(pct, 100.0, DISK_BAR_WIDTH)} {pct:>5.1f}%"
            f"  ({format_bytes(disk.used)} / {format_bytes(disk.total)})"
        )
    return lines


def render_network(snapshot: SystemSnapshot) -> list[str]:
    """Render cumulative traffic for every interface that saw any."""
    lines = section_title("Network")
    for net in snapshot.networks:
        if net.received > 0 or net.transmitted > 0:
            lines.append(
                f"  {net.name:12} down {format_bytes(net.received):>10}"
                f"  up {format_bytes(net.transmitted):>10}"
            )
    return lines


def top_processes(
    processes: Iterable[ProcessSnapshot], limit: int = TOP_PROCESS_COUNT
) -> list[ProcessSnapshot]:
    """Return the `limit` busiest processes, highest CPU first, ties by PID."""
    return sorted(processes, key=lambda p: (-p.cpu_percent, p.pid))[:limit]


def render_processes(snapshot: SystemSnapshot) -> list[str]:
    lines = section_title(f"Top {TOP_PROCESS_COUNT} Processes (CPU)") + [
        f"  {'CPU%':>7}  {'MEM':>7}  {'PID':>10}  Name",
        f"  {'-' * 45}",
    ]
    for proc in top_processes(snapshot.processes):
        lines.append(
            f"  {proc.cpu_percent:>6.1f}%  {format_bytes(proc.memory_rss):>7}"
            f"  {proc.pid:>10}  {proc.name}"
        )
    return lines


def render_footer(interval: float) -> list[str]:
    return ["", f"{GRAY}  Refreshing every {interval:g} seconds... (Ctrl+C to exit){RESET}"]


def render_frame(snapshot: SystemSnapshot, interval: float = 2.0) -> str:
    """Render a full dashboard frame, screen clear included."""
    lines = [
        *HEADER,
        *render_system(snapshot),
        *render_cpu(snapshot),
        *render_memory(snapshot),
        *render_swap(snapshot),
        *render_disks(snapshot),
        *render_network(snapshot),
        *render_processes(snapshot),
        *render_footer(interval),
    ]
    return CLEAR_SCREEN + "\n".join(lines) + "\n"
