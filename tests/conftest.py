"""Shared fixtures for sysdash tests."""

import pytest

from sysdash.models import (
    CoreSnapshot,
    DiskSnapshot,
    NetworkSnapshot,
    ProcessSnapshot,
    SystemSnapshot,
)

GiB = 1024**3
MiB = 1024**2


def make_snapshot(**overrides) -> SystemSnapshot:
    """Build a SystemSnapshot with realistic defaults."""
    fields = dict(
        os_name="Linux",
        kernel_version="6.1.0",
        host_name="testhost",
        uptime_seconds=3725,
        cores=tuple(CoreSnapshot(brand="Test CPU @ 3.00GHz", usage=u) for u in (10.0, 20.0, 30.0, 40.0)),
        memory_total=16 * GiB,
        memory_used=8 * GiB,
        swap_total=2 * GiB,
        swap_used=512 * MiB,
        disks=(DiskSnapshot(mount_point="/", total=100 * GiB, available=40 * GiB),),
        networks=(NetworkSnapshot(name="eth0", received=2048, transmitted=1024),),
        processes=(
            ProcessSnapshot(pid=1, name="init", cpu_percent=0.1, memory_rss=10 * MiB),
            ProcessSnapshot(pid=42, name="python", cpu_percent=12.5, memory_rss=80 * MiB),
        ),
    )
    fields.update(overrides)
    return SystemSnapshot(**fields)


class FakeProvider:
    """Metrics provider returning canned snapshots."""

    def __init__(self, snapshot: SystemSnapshot | None = None) -> None:
        self.snapshot = snapshot or make_snapshot()
        self.refresh_count = 0

    def refresh(self) -> SystemSnapshot:
        self.refresh_count += 1
        return self.snapshot


@pytest.fixture
def snapshot() -> SystemSnapshot:
    return make_snapshot()


@pytest.fixture
def provider() -> FakeProvider:
    return FakeProvider()
