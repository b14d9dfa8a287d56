import sys
from datetime import datetime, timedelta, timezone
from itertools import count
from pathlib import Path
import pytest

# Make "src" importable
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from todo_state import AppState, Store

EPOCH = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    # First call is EPOCH + 1s, then one second per call
    ticks = count(1)
    return lambda: EPOCH + timedelta(seconds=next(ticks))


@pytest.fixture
def id_factory():
    ids = count(1)
    return lambda: f"t{next(ids)}"


@pytest.fixture
def empty_state():
    return AppState(last_updated=EPOCH)


@pytest.fixture
def store(clock, id_factory, empty_state):
    # Fresh store per test
    return Store(state=empty_state, clock=clock, id_factory=id_factory)
