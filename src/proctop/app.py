"""proctop - Main application."""

from rich.console import Console

from proctop import logging as proctop_logging
from proctop.config import MonitorConfig
from proctop.monitor import SystemMonitor
from proctop.procfs import ProcessRootUnavailableError
from proctop.terminal import ConsoleTerminal, Terminal


def main(
    config: MonitorConfig | None = None,
    terminal: Terminal | None = None,
    error_console: Console | None = None,
) -> int:
    """
    Entry point for the proctop application.

    Refreshes until terminated. Returns 1 if the process root cannot be
    opened; an interrupt from the keyboard exits with 0.
    """
    config = config or MonitorConfig()
    proctop_logging.configure(config.log_level)

    monitor = SystemMonitor(config, terminal or ConsoleTerminal())
    try:
        monitor.run()
    except ProcessRootUnavailableError as e:
        console = error_console or Console(stderr=True, highlight=False)
        console.print(f"Error: Could not open {e.path}", markup=False)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0

