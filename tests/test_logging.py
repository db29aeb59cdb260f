"""
Tests for structured logging helpers.
"""

from camelot_graph.theory.key import decode
from camelot_graph.theory.transitions import VERTICAL
from camelot_graph.utils.logging import setup_logging, wheel_types_processor


class TestWheelTypesProcessor:
    """Keys and transitions are rendered in Camelot notation."""

    def test_renders_keys_and_transitions(self):
        event = wheel_types_processor(None, "info", {
            "event": "Paths found",
            "source": decode("8B"),
            "transition": VERTICAL,
            "count": 2,
        })
        assert event == {
            "event": "Paths found",
            "source": "8B",
            "transition": "Vertical",
            "count": 2,
        }

    def test_renders_nested_values(self):
        event = wheel_types_processor(None, "info", {
            "path": [decode("1A"), decode("1B")],
            "clique": frozenset({decode("2A"), decode("1A")}),
            "by_key": {"from": decode("12B")},
        })
        assert event["path"] == ["1A", "1B"]
        assert event["clique"] == ["1A", "2A"]
        assert event["by_key"] == {"from": "12B"}

    def test_setup_logging_writes_file(self, tmp_path):
        log_file = tmp_path / "camelot.log"
        setup_logging("DEBUG", str(log_file))
        assert log_file.exists()
