"""
Shared fixtures. Env is set before the app module is imported so the
artificial refresh delays are off and jobs go to a throwaway SQLite file.
"""
import os
import tempfile

import pytest

_TMP = tempfile.mkdtemp(prefix="tracker-tests-")
os.environ.setdefault("JOBS_DB", os.path.join(_TMP, "jobs.db"))
os.environ.setdefault("REFRESH_LOOKUP_DELAY_MS", "0")
os.environ.setdefault("REFRESH_BATCH_DELAY_MS", "0")
os.environ.setdefault("REFRESH_URL", "")
os.environ.setdefault("PROBE_WEBSITES", "")

from sharktank_tracker.dataset import load_companies  # noqa: E402
from sharktank_tracker.scheduler import JobRepository  # noqa: E402


@pytest.fixture
def companies():
    return load_companies()


@pytest.fixture
def repo(tmp_path):
    return JobRepository(str(tmp_path / "jobs.db"))


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from sharktank_tracker import app as app_module

    original = app_module.CATALOG.companies
    app_module.REPO.clear()
    with TestClient(app_module.app) as c:
        yield c
    app_module.CATALOG.replace(original)
    app_module.REPO.clear()
