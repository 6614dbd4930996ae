"""Testing fakes – in-memory doubles for kernel and observability ports."""
from cadence.testing.fakes.clock import FakeClock
from cadence.testing.fakes.logger import RecordedLog, RecordingLogger
from cadence.testing.fakes.timer import FakeTimer

__all__ = [
    "FakeClock",
    "FakeTimer",
    "RecordedLog",
    "RecordingLogger",
]
