# tests/conftest.py

from datetime import datetime
from unittest.mock import patch

import pytest

from datehelper.core import time as dh_time

# Local wall-clock time used by every frozen-clock test (mid-June, away from DST switches).
FROZEN_LOCAL = datetime(2024, 6, 15, 12, 0, 0)


@pytest.fixture
def frozen_now():
    """
    Freeze the library's wall clock read at FROZEN_LOCAL and yield its
    epoch-millisecond value.
    """
    ms = dh_time.from_datetime(FROZEN_LOCAL)
    with patch("datehelper.core.time.now_ms") as mock:
        mock.return_value = ms
        yield ms
