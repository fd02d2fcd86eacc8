"""Data models for sysdash."""

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class CoreSnapshot:
    """Immutable snapshot of a single CPU core."""

    brand: str
    usage: float  # 0.0 - 100.0


@dataclass(slots=True, frozen=True)
class DiskSnapshot:
    """Immutable snapshot of a mounted disk."""

    mount_point: str
    total: int  # Bytes
    available: int  # Bytes

    @property
    def used(self) -> int:
        """Bytes in use on the disk."""
        return self.total - self.available


@dataclass(slots=True, frozen=True)
class NetworkSnapshot:
    """Cumulative traffic of one interface since the provider started."""

    name: str
    received: int  # Bytes
    transmitted: int  # Bytes


@dataclass(slots=True, frozen=True)
class ProcessSnapshot:
    """Immutable snapshot of a process state."""

    pid: int
    name: str
    cpu_percent: float  # 0.0 - 100.0 * core_count
    memory_rss: int  # Bytes


@dataclass(slots=True, frozen=True)
class SystemSnapshot:
    """Point-in-time view of every metric shown on the dashboard."""

    os_name: str | None
    kernel_version: str | None
    host_name: str | None
    uptime_seconds: int
    cores: tuple[CoreSnapshot, ...]
    memory_total: int
    memory_used: int
    swap_total: int
    swap_used: int
    disks: tuple[DiskSnapshot, ...]
    networks: tuple[NetworkSnapshot, ...]
    processes: tuple[ProcessSnapshot, ...]
