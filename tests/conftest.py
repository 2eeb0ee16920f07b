"""
Pytest fixtures for portpick tests.

Provides a fake process source that stands in for the host process table,
so correlation and actions can be tested without touching real processes.
"""
import pytest

from portpick.models import ProcessInfo, Protocol, SocketRecord
from portpick.proc import ProcessSource
from portpick.utils import C


class FakeProcessSource(ProcessSource):
    """Process source backed by plain dicts.

    ``table`` is what ``refresh_all`` returns, ``live`` is what ``lookup``
    sees at action time. Every ``terminate`` call is recorded.
    """

    def __init__(self, table=None, live=None, fail=()):
        super().__init__()
        self.table = dict(table or {})
        self.live = dict(self.table if live is None else live)
        self.fail = set(fail)
        self.terminated = []
        self.lookups = []
        self.cpu_samples = []

    def refresh_all(self):
        self.processes = dict(self.table)
        return self.processes

    def lookup(self, pid, sample_cpu=False):
        self.lookups.append(pid)
        self.cpu_samples.append(sample_cpu)
        return self.live.get(pid)

    def terminate(self, pid):
        self.terminated.append(pid)
        return pid not in self.fail


def proc(pid, name, **kw):
    return ProcessInfo(pid=pid, name=name, **kw)


def tcp(port, pids, state="LISTEN"):
    return SocketRecord(local_port=port, associated_pids=list(pids), protocol=Protocol.TCP, state=state)


def udp(port, pids):
    return SocketRecord(local_port=port, associated_pids=list(pids), protocol=Protocol.UDP)


@pytest.fixture(autouse=True)
def colors():
    """Start every test with colors on and switch them back on afterwards."""
    C.use_color(True)
    yield
    C.use_color(True)


@pytest.fixture
def source():
    """Process source with a small, fixed process table."""
    return FakeProcessSource({
        100: proc(100, "webapp", memory=2048, cpu_usage=1.5, run_time=3725,
                  start_time=1_700_000_000, cmd=["webapp", "--port", "8080"],
                  disk_usage=(10, 20)),
        200: proc(200, "dnsd"),
        300: proc(300, "sshd"),
    })


def answers(*values):
    """Build a ``read`` callable that replays ``values`` as user input."""
    it = iter(values)

    def read(_prompt):
        value = next(it)
        if isinstance(value, BaseException):
            raise value
        return value

    return read
