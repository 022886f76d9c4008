"""Shared fixtures for proctop tests."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from proctop import logging as proctop_logging

MEMINFO = """\
MemTotal:        1000 kB
MemFree:          200 kB
MemAvailable:     600 kB
Buffers:           10 kB
"""

LOADAVG = "0.10 0.20 0.30 1/200 999\n"


def status_text(name: str, state: str = "S (sleeping)", rss_kb: int | None = 1024) -> str:
    """Build a /proc/<pid>/status body."""
    lines = [
        f"Name:\t{name}",
        "Umask:\t0022",
        f"State:\t{state}",
        "Tgid:\t1",
        "VmPeak:\t   20000 kB",
    ]
    if rss_kb is not None:
        lines.append(f"VmRSS:\t{rss_kb:>8} kB")
    lines.append("Threads:\t1")
    return "\n".join(lines) + "\n"


@dataclass
class FakeProc:
    """A /proc-shaped directory tree under tmp_path."""

    root: Path

    def add_process(
        self,
        pid: int,
        name: str = "proc",
        state: str = "S (sleeping)",
        rss_kb: int | None = 1024,
        cmdline: bytes | None = b"/usr/bin/proc\0--flag\0",
    ) -> Path:
        proc_dir = self.root / str(pid)
        proc_dir.mkdir()
        (proc_dir / "status").write_text(status_text(name, state, rss_kb))
        if cmdline is not None:
            (proc_dir / "cmdline").write_bytes(cmdline)
        return proc_dir


@pytest.fixture
def fake_proc(tmp_path: Path) -> FakeProc:
    """A fake process root with meminfo and loadavg but no processes."""
    root = tmp_path / "proc"
    root.mkdir()
    (root / "meminfo").write_text(MEMINFO)
    (root / "loadavg").write_text(LOADAVG)
    return FakeProc(root)


@dataclass
class BufferTerminal:
    """Terminal stub that records every call."""

    calls: list[str] = field(default_factory=list)
    frames: list[str] = field(default_factory=list)

    def clear(self) -> None:
        self.calls.append("clear")

    def write(self, text: str) -> None:
        self.calls.append("write")
        self.frames.append(text)


@pytest.fixture
def terminal() -> BufferTerminal:
    return BufferTerminal()


@pytest.fixture(autouse=True)
def quiet_logging() -> None:
    proctop_logging.configure(logging.WARNING)
