import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from tasks_api.services.task_dao import TaskStore  # noqa: E402
from tasks_api.services.task_facade import TaskFacade  # noqa: E402


@pytest.fixture
def store():
    return TaskStore()


@pytest.fixture
def facade(store):
    return TaskFacade(store)
