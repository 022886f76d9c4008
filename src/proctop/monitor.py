"""Refresh loop for proctop."""

import time
from collections.abc import Callable

from proctop.config import MonitorConfig
from proctop.logging import get_logger
from proctop.models import ProcessSnapshot, Ranking, SystemSnapshot
from proctop.procfs import ProcessEnumerator, ProcessInfoReader, SystemSnapshotReader
from proctop.ranking import rank
from proctop.render import TableRenderer
from proctop.terminal import Terminal

log = get_logger("monitor")


class SystemMonitor:
    """
    System monitor that collects process and system data from /proc.

    Each cycle reads everything afresh, ranks, draws, then pauses.
    Nothing is carried from one cycle to the next. Processes that exit
    mid-scan degrade to default fields instead of failing the cycle.
    """

    def __init__(
        self,
        config: MonitorConfig,
        terminal: Terminal,
        pause: Callable[[float], None] | None = None,
    ) -> None:
        """
        Initialize the SystemMonitor.

        Args:
            config: Process root, refresh interval and table capacity.
            terminal: Receives the clear and the rendered frame.
            pause: Called with the poll rate between cycles. Defaults to time.sleep.
        """
        self._config = config
        self._terminal = terminal
        self._pause = pause or time.sleep
        self._poll_rate = max(0.1, config.poll_rate)
        self._stopped = False

        self._system_reader = SystemSnapshotReader(config.proc_root)
        self._enumerator = ProcessEnumerator(config.proc_root)
        self._process_reader = ProcessInfoReader(config.proc_root)
        self._renderer = TableRenderer(config.capacity)

    @property
    def poll_rate(self) -> float:
        """Get the current poll rate."""
        return self._poll_rate

    @poll_rate.setter
    def poll_rate(self, value: float) -> None:
        """Set the poll rate."""
        self._poll_rate = max(0.1, value)  # Minimum 0.1 seconds

    def stop(self) -> None:
        """Make run() return after the current cycle, or at once if called before run()."""
        self._stopped = True

    def collect(self) -> tuple[SystemSnapshot, list[ProcessSnapshot]]:
        """
        Collect the system summary and one snapshot per visible process.

        Raises:
            ProcessRootUnavailableError: If the process root cannot be opened.
        """
        system = self._system_reader.read()
        pids = self._enumerator.list_pids()
        processes = [self._process_reader.read(pid) for pid in pids]
        return system, processes

    def run_cycle(self) -> Ranking:
        """Collect, rank and draw one frame."""
        system, processes = self.collect()
        ranking = rank(processes, self._config.capacity)
        self._renderer.draw(self._terminal, system, ranking)
        log.debug("cycle_complete", processes=ranking.total)
        return ranking

    def run(self, max_cycles: int | None = None) -> int:
        """
        Run cycles until stop() is called or max_cycles have completed.

        Returns:
            The number of cycles completed.
        """
        cycles = 0
        while not self._stopped:
            self.run_cycle()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
            self._pause(self._poll_rate)
        return cycles
