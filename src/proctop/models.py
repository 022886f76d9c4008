"""Data models for proctop."""

from dataclasses import dataclass
from enum import Enum

DEFAULT_NAME = "N/A"
KERNEL_COMMAND = "[kernel]"
DEFAULT_LOAD_AVERAGE = ("0.0", "0.0", "0.0")


class ProcessState(str, Enum):
    """Scheduling state codes shown in the S column."""

    RUNNING = "R"
    SLEEPING = "S"
    DISK_WAIT = "D"
    ZOMBIE = "Z"
    STOPPED = "T"
    UNKNOWN = "?"

    @classmethod
    def from_code(cls, code: str) -> "ProcessState":
        """Map a state character to a ProcessState, UNKNOWN if unrecognized."""
        try:
            return cls(code)
        except ValueError:
            return cls.UNKNOWN


@dataclass(slots=True, frozen=True)
class SystemSnapshot:
    """Aggregate memory and load average for one refresh cycle."""

    total_memory_kb: int = 0
    free_memory_kb: int = 0
    load_average: tuple[str, str, str] = DEFAULT_LOAD_AVERAGE

    @property
    def used_memory_kb(self) -> int:
        return max(0, self.total_memory_kb - self.free_memory_kb)

    @property
    def load_average_text(self) -> str:
        return " ".join(self.load_average)


@dataclass(slots=True, frozen=True)
class ProcessSnapshot:
    """Immutable snapshot of a process state."""

    pid: int
    name: str = DEFAULT_NAME
    state: ProcessState = ProcessState.UNKNOWN
    rss_kb: int = 0  # Kilobytes
    command_line: str = KERNEL_COMMAND

    def __post_init__(self) -> None:
        if self.pid <= 0:
            raise ValueError(f"pid must be positive, got {self.pid}")


@dataclass(slots=True, frozen=True)
class Ranking:
    """Processes ordered for display, plus the count before truncation."""

    processes: tuple[ProcessSnapshot, ...]
    total: int
