"""Tests for proctop data models."""

import pytest

from proctop.models import ProcessSnapshot, ProcessState, Ranking, SystemSnapshot


def test_process_snapshot_creation():
    """Test ProcessSnapshot dataclass creation."""
    snapshot = ProcessSnapshot(
        pid=123,
        name="test_process",
        state=ProcessState.RUNNING,
        rss_kb=1024,
        command_line="/usr/bin/test",
    )

    assert snapshot.pid == 123
    assert snapshot.name == "test_process"
    assert snapshot.state is ProcessState.RUNNING
    assert snapshot.rss_kb == 1024
    assert snapshot.command_line == "/usr/bin/test"


def test_process_snapshot_defaults():
    """Test ProcessSnapshot falls back to placeholder values."""
    snapshot = ProcessSnapshot(pid=4321)

    assert snapshot.name == "N/A"
    assert snapshot.state is ProcessState.UNKNOWN
    assert snapshot.rss_kb == 0
    assert snapshot.command_line == "[kernel]"


@pytest.mark.parametrize("pid", [0, -1])
def test_process_snapshot_rejects_non_positive_pid(pid):
    """Test ProcessSnapshot requires a positive pid."""
    with pytest.raises(ValueError):
        ProcessSnapshot(pid=pid)


def test_process_snapshot_is_frozen():
    """Test that ProcessSnapshot is immutable (frozen)."""
    snapshot = ProcessSnapshot(pid=1, name="init")

    # Attempting to modify should raise an error
    try:
        snapshot.pid = 999
        raise AssertionError("Should have raised FrozenInstanceError")
    except AttributeError:
        pass  # Expected behavior for frozen dataclass


def test_process_snapshot_uses_slots():
    """Test that ProcessSnapshot uses __slots__ for memory efficiency."""
    snapshot = ProcessSnapshot(pid=1, name="init")

    # Slots-based dataclasses don't have __dict__
    assert not hasattr(snapshot, "__dict__")


class TestProcessState:
    """Tests for ProcessState enum."""

    def test_state_codes(self):
        """Test each state maps to its single-character code."""
        assert ProcessState.RUNNING.value == "R"
        assert ProcessState.SLEEPING.value == "S"
        assert ProcessState.DISK_WAIT.value == "D"
        assert ProcessState.ZOMBIE.value == "Z"
        assert ProcessState.STOPPED.value == "T"
        assert ProcessState.UNKNOWN.value == "?"

    @pytest.mark.parametrize("code", ["R", "S", "D", "Z", "T"])
    def test_from_code_known(self, code):
        """Test known codes round-trip through from_code."""
        assert ProcessState.from_code(code).value == code

    @pytest.mark.parametrize("code", ["I", "X", "x", "", "RS"])
    def test_from_code_unknown(self, code):
        """Test unrecognized codes map to UNKNOWN."""
        assert ProcessState.from_code(code) is ProcessState.UNKNOWN


class TestSystemSnapshot:
    """Tests for SystemSnapshot dataclass."""

    def test_defaults(self):
        """Test SystemSnapshot defaults to zero memory and zero load."""
        snapshot = SystemSnapshot()
        assert snapshot.total_memory_kb == 0
        assert snapshot.free_memory_kb == 0
        assert snapshot.load_average_text == "0.0 0.0 0.0"

    def test_used_memory(self):
        """Test used memory is total minus free."""
        snapshot = SystemSnapshot(total_memory_kb=1000, free_memory_kb=200)
        assert snapshot.used_memory_kb == 800

    def test_used_memory_never_negative(self):
        """Test used memory is floored at zero for inconsistent sources."""
        snapshot = SystemSnapshot(total_memory_kb=0, free_memory_kb=200)
        assert snapshot.used_memory_kb == 0

    def test_system_snapshot_uses_slots(self):
        """Test SystemSnapshot uses __slots__ for memory efficiency."""
        assert not hasattr(SystemSnapshot(), "__dict__")


def test_ranking_holds_total_separately():
    """Test Ranking keeps the pre-truncation count."""
    ranking = Ranking(processes=(ProcessSnapshot(pid=1),), total=30)
    assert len(ranking.processes) == 1
    assert ranking.total == 30
