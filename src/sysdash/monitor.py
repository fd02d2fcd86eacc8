"""Metrics collection for sysdash."""

import logging
import platform
import time
from pathlib import Path
from typing import Protocol

import psutil

from sysdash.models import (
    CoreSnapshot,
    DiskSnapshot,
    NetworkSnapshot,
    ProcessSnapshot,
    SystemSnapshot,
)

logger = logging.getLogger(__name__)

CPUINFO_PATH = Path("/proc/cpuinfo")


class MetricsProvider(Protocol):
    """Anything that can produce a fresh SystemSnapshot on demand."""

    def refresh(self) -> SystemSnapshot:
        """Update the provider's view of the host and return a snapshot."""
        ...


def _non_empty(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def read_os_name() -> str | None:
    """Return the distribution name, falling back to the platform name."""
    try:
        release = platform.freedesktop_os_release()
    except OSError:
        return _non_empty(platform.system())
    return _non_empty(release.get("NAME")) or _non_empty(platform.system())


def read_cpu_brand(cpuinfo_path: Path = CPUINFO_PATH) -> str:
    """Return the CPU model string, or an empty string if none is known."""
    try:
        with cpuinfo_path.open(encoding="utf-8", errors="replace") as fh:
            for line in fh:
                key, sep, value = line.partition(":")
                if sep and key.strip() == "model name":
                    return value.strip()
    except OSError:
        pass  # Not Linux, fall back to platform
    return platform.processor() or ""


class PsutilProvider:
    """
    Metrics provider backed by psutil.

    Holds the state that has to survive between refreshes: the CPU percent
    priming and the network counter baseline, so that interface counters are
    cumulative since the provider was created.
    """

    def __init__(self) -> None:
        """Initialize the provider and prime psutil's CPU counters."""
        self._cpu_brand = read_cpu_brand()
        self._net_baseline: dict[str, tuple[int, int]] = {}
        # Initialize CPU percent (first call returns 0.0)
        psutil.cpu_percent(percpu=True)
        # Same for processes; process_iter caches the Process objects it primes
        for _ in psutil.process_iter(attrs=["cpu_percent"]):
            pass
        for name, counters in psutil.net_io_counters(pernic=True).items():
            self._net_baseline[name] = (counters.bytes_recv, counters.bytes_sent)

    def refresh(self) -> SystemSnapshot:
        """Collect a snapshot of the current system state."""
        # Collect CPU percentages (non-blocking, uses previous call's data)
        cores = tuple(
            CoreSnapshot(brand=self._cpu_brand, usage=usage)
            for usage in psutil.cpu_percent(percpu=True)
        )

        mem = psutil.virtual_memory()
        swap = psutil.swap_memory()

        uptime = int(time.time() - psutil.boot_time())

        snapshot = SystemSnapshot(
            os_name=read_os_name(),
            kernel_version=_non_empty(platform.release()),
            host_name=_non_empty(platform.node()),
            uptime_seconds=uptime,
            cores=cores,
            memory_total=mem.total,
            memory_used=mem.total - mem.available,
            swap_total=swap.total,
            swap_used=swap.used,
            disks=self._collect_disks(),
            networks=self._collect_networks(),
            processes=self._collect_processes(),
        )
        logger.debug(
            "Refreshed snapshot: %d cores, %d disks, %d interfaces, %d processes",
            len(snapshot.cores),
            len(snapshot.disks),
            len(snapshot.networks),
            len(snapshot.processes),
        )
        return snapshot

    def _collect_disks(self) -> tuple[DiskSnapshot, ...]:
        """Collect usage for every mounted partition that can be read."""
        disks: list[DiskSnapshot] = []
        for partition in psutil.disk_partitions():
            try:
                usage = psutil.disk_usage(partition.mountpoint)
            except OSError as exc:
                logger.debug("Skipping disk %s: %s", partition.mountpoint, exc)
                continue
            if usage.total == 0:
                logger.debug("Skipping zero-sized disk %s", partition.mountpoint)
                continue
            disks.append(
                DiskSnapshot(
                    mount_point=partition.mountpoint,
                    total=usage.total,
                    available=usage.free,
                )
            )
        return tuple(disks)

    def _collect_networks(self) -> tuple[NetworkSnapshot, ...]:
        """Collect per-interface byte counters relative to the baseline."""
        networks: list[NetworkSnapshot] = []
        for name, counters in psutil.net_io_counters(pernic=True).items():
            base_recv, base_sent = self._net_baseline.setdefault(
                name, (counters.bytes_recv, counters.bytes_sent)
            )
            networks.append(
                NetworkSnapshot(
                    name=name,
                    # Counters can reset when an interface is re-created
                    received=max(counters.bytes_recv - base_recv, 0),
                    transmitted=max(counters.bytes_sent - base_sent, 0),
                )
            )
        return tuple(networks)

    def _collect_processes(self) -> tuple[ProcessSnapshot, ...]:
        """
        Collect snapshots of all running processes.

        Handles NoSuchProcess, AccessDenied and ZombieProcess errors by
        skipping the affected process.
        """
        processes: list[ProcessSnapshot] = []

        for proc in psutil.process_iter(attrs=["pid", "name", "cpu_percent", "memory_info"]):
            try:
                with proc.oneshot():
                    info = proc.info

                    # Get memory RSS, defaulting to 0 if unavailable
                    mem_info = info.get("memory_info")
                    memory_rss = mem_info.rss if mem_info else 0

                    processes.append(
                        ProcessSnapshot(
                            pid=info.get("pid", 0),
                            name=info.get("name") or "",
                            cpu_percent=info.get("cpu_percent") or 0.0,
                            memory_rss=memory_rss,
                        )
                    )

            except (psutil.NoSuchProcess, psutil.AccessDenied, psutil.ZombieProcess):
                # Processes that died mid-poll or are off limits are not shown
                continue

        return tuple(processes)
