"""Fixed-width text rendering of the process table."""

from proctop.models import ProcessSnapshot, Ranking, SystemSnapshot
from proctop.terminal import Terminal

TITLE = "--- System Monitor (Linux) ---"
INNER_WIDTH = 86  # Columns between the two border characters

PID_WIDTH = 8
NAME_WIDTH = 20
STATE_WIDTH = 4
MEM_WIDTH = 12
COMMAND_WIDTH = 36
LOAD_WIDTH = 20

NAME_MARKER = ".."
COMMAND_MARKER = "..."


def truncate(text: str, width: int, marker: str) -> str:
    """Cut text to `width` characters, ending in `marker` when shortened."""
    if len(text) <= width:
        return text
    return text[: width - len(marker)] + marker


def format_gigabytes(kb: int) -> str:
    """Format kilobytes as gigabytes with two decimals."""
    return f"{kb / 1024 / 1024:8.2f}G"


def format_megabytes(kb: int) -> str:
    """Format kilobytes as a right-aligned megabyte figure with an M suffix."""
    return f"{kb / 1024:{MEM_WIDTH - 1}.1f}M"


class TableRenderer:
    """
    Draws the bordered process table.

    Every frame has the same width and the same number of lines: rows
    beyond `capacity` are dropped and missing rows are drawn blank.
    """

    def __init__(self, capacity: int = 25) -> None:
        """
        Initialize the TableRenderer.

        Args:
            capacity: Number of data rows in every frame.
        """
        if capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {capacity}")
        self._capacity = capacity

    @property
    def capacity(self) -> int:
        """Get the number of data rows per frame."""
        return self._capacity

    def draw(self, terminal: Terminal, system: SystemSnapshot, ranking: Ranking) -> str:
        """Clear the terminal, then write a freshly rendered frame."""
        frame = self.render(system, ranking)
        terminal.clear()
        terminal.write(frame)
        return frame

    def render(self, system: SystemSnapshot, ranking: Ranking) -> str:
        """Render one frame as a newline-joined block of text."""
        border = "+" + "-" * INNER_WIDTH + "+"
        lines = [
            border,
            self._line(TITLE.center(INNER_WIDTH)),
            self._line(""),
            self._line(" " + self._summary(system)),
            self._line(f" Total processes: {ranking.total}"),
            self._line(""),
            self._line(" " + self._header()),
            "|" + "-" * INNER_WIDTH + "|",
        ]

        rows = list(ranking.processes[: self._capacity])
        for proc in rows:
            lines.append(self._line(" " + self._row(proc)))
        for _ in range(self._capacity - len(rows)):
            lines.append(self._line(""))

        lines.append(border)
        return "\n".join(lines)

    def _line(self, content: str) -> str:
        """Pad or clip content to the inner width and add the side borders."""
        return "|" + content[:INNER_WIDTH].ljust(INNER_WIDTH) + "|"

    def _summary(self, system: SystemSnapshot) -> str:
        return (
            f"Memory: {format_gigabytes(system.used_memory_kb)} / "
            f"{format_gigabytes(system.total_memory_kb)} used "
            f"({format_gigabytes(system.free_memory_kb)} free)   "
            f"Load avg: {truncate(system.load_average_text, LOAD_WIDTH, NAME_MARKER)}"
        )

    def _header(self) -> str:
        return (
            f"{'PID':<{PID_WIDTH}}"
            f"{'NAME':<{NAME_WIDTH}}"
            f"{'S':<{STATE_WIDTH}}"
            f"{'MEM (MB)':>{MEM_WIDTH}}"
            f"  {'COMMAND':<{COMMAND_WIDTH}}"
        )

    def _row(self, proc: ProcessSnapshot) -> str:
        name = truncate(proc.name, NAME_WIDTH, NAME_MARKER)
        command = truncate(proc.command_line, COMMAND_WIDTH, COMMAND_MARKER)
        return (
            f"{proc.pid:<{PID_WIDTH}}"
            f"{name:<{NAME_WIDTH}}"
            f"{proc.state.value:<{STATE_WIDTH}}"
            f"{format_megabytes(proc.rss_kb):>{MEM_WIDTH}}"
            f"  {command:<{COMMAND_WIDTH}}"
        )
