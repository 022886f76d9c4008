"""Readers for the Linux /proc pseudo-filesystem."""

import os
from pathlib import Path

from proctop.logging import get_logger
from proctop.models import (
    DEFAULT_LOAD_AVERAGE,
    DEFAULT_NAME,
    KERNEL_COMMAND,
    ProcessSnapshot,
    ProcessState,
    SystemSnapshot,
)

log = get_logger("procfs")


class ProcessRootUnavailableError(OSError):
    """The process root directory could not be opened."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Could not open {path}")
        self.path = path


def read_source(path: Path) -> bytes | None:
    """
    Read a whole pseudo-file.

    Returns None when the source is missing or unreadable, which is the
    normal outcome for a process that exited after it was enumerated.
    """
    try:
        with open(path, "rb") as f:
            return f.read()
    except OSError as e:
        log.debug("source_unreadable", path=str(path), error=e.strerror)
        return None


def parse_kb_value(line: str) -> int:
    """Parse the integer after the key of a 'Key:   1234 kB' line, 0 if absent."""
    parts = line.split()
    if len(parts) < 2:
        return 0
    try:
        return max(0, int(parts[1]))
    except ValueError:
        return 0


def parse_meminfo(text: str) -> tuple[int, int]:
    """Return (MemTotal, MemFree) in kB from meminfo text."""
    total = free = 0
    for line in text.splitlines():
        if line.startswith("MemTotal:"):
            total = parse_kb_value(line)
        elif line.startswith("MemFree:"):
            free = parse_kb_value(line)
    return total, free


def _is_decimal(token: str) -> bool:
    try:
        float(token)
    except ValueError:
        return False
    return True


def parse_loadavg(text: str) -> tuple[str, str, str]:
    """Return the 1, 5 and 15 minute load figures from loadavg text."""
    lines = text.splitlines()
    tokens = lines[0].split() if lines else []
    if len(tokens) < 3 or not all(_is_decimal(t) for t in tokens[:3]):
        return DEFAULT_LOAD_AVERAGE
    return tokens[0], tokens[1], tokens[2]


class SystemSnapshotReader:
    """Reads aggregate memory and load average."""

    def __init__(self, proc_root: Path = Path("/proc")) -> None:
        self._root = Path(proc_root)

    def read(self) -> SystemSnapshot:
        """Build a SystemSnapshot. Unreadable sources leave defaults in place."""
        total = free = 0
        load_average = DEFAULT_LOAD_AVERAGE

        meminfo = read_source(self._root / "meminfo")
        if meminfo is not None:
            total, free = parse_meminfo(meminfo.decode("utf-8", errors="replace"))

        loadavg = read_source(self._root / "loadavg")
        if loadavg is not None:
            load_average = parse_loadavg(loadavg.decode("utf-8", errors="replace"))

        return SystemSnapshot(
            total_memory_kb=total,
            free_memory_kb=free,
            load_average=load_average,
        )


class ProcessEnumerator:
    """Lists process identifiers visible under the process root."""

    def __init__(self, proc_root: Path = Path("/proc")) -> None:
        self._root = Path(proc_root)

    def list_pids(self) -> list[int]:
        """
        Return the pids of all numeric subdirectories, in listing order.

        Raises:
            ProcessRootUnavailableError: If the process root cannot be opened.
        """
        try:
            entries = os.scandir(self._root)
        except OSError as e:
            raise ProcessRootUnavailableError(self._root) from e

        pids: list[int] = []
        with entries:
            for entry in entries:
                name = entry.name
                if not (name.isascii() and name.isdigit()):
                    continue
                if not entry.is_dir(follow_symlinks=False):
                    continue
                pid = int(name)
                if pid > 0:
                    pids.append(pid)
        return pids


def parse_status(text: str) -> tuple[str, ProcessState, int]:
    """Return (name, state, VmRSS kB) from a /proc/<pid>/status body."""
    name = DEFAULT_NAME
    state = ProcessState.UNKNOWN
    rss_kb = 0
    for line in text.splitlines():
        if line.startswith("Name:"):
            # Names may contain spaces, so keep the rest of the line
            name = line[len("Name:"):].strip() or DEFAULT_NAME
        elif line.startswith("State:"):
            parts = line.split()
            if len(parts) > 1:
                state = ProcessState.from_code(parts[1][0])
        elif line.startswith("VmRSS:"):
            rss_kb = parse_kb_value(line)
    return name, state, rss_kb


_CONTROL_TO_SPACE = {code: " " for code in (*range(32), 127)}


def parse_cmdline(data: bytes) -> str:
    """
    Join a NUL-separated argument vector with spaces.

    Newlines, tabs and other control characters inside arguments also
    become spaces, so a command always fits on one table row.
    """
    command = data.decode("utf-8", errors="replace").translate(_CONTROL_TO_SPACE).rstrip()
    return command or KERNEL_COMMAND


class ProcessInfoReader:
    """
    Reads the status and command line of a single process.

    A process can exit between enumeration and this read. Each missing
    source only leaves its own fields at their defaults; read() always
    returns a snapshot carrying the requested pid.
    """

    def __init__(self, proc_root: Path = Path("/proc")) -> None:
        self._root = Path(proc_root)

    def read(self, pid: int) -> ProcessSnapshot:
        """Read one process into a ProcessSnapshot."""
        name, state, rss_kb = DEFAULT_NAME, ProcessState.UNKNOWN, 0
        command_line = KERNEL_COMMAND
        proc_dir = self._root / str(pid)

        status = read_source(proc_dir / "status")
        if status is not None:
            name, state, rss_kb = parse_status(status.decode("utf-8", errors="replace"))
        else:
            log.debug("process_vanished", pid=pid)

        cmdline = read_source(proc_dir / "cmdline")
        if cmdline is not None:
            command_line = parse_cmdline(cmdline)

        return ProcessSnapshot(
            pid=pid,
            name=name,
            state=state,
            rss_kb=rss_kb,
            command_line=command_line,
        )
