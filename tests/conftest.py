import json
from datetime import date
from unittest import mock

import pytest
import requests

from git_views_sync.errors import StoreWriteError
from git_views_sync.models import ViewRecord


def make_response(status_code=200, body=None, reason="OK", url="https://example.test/"):
    response = requests.Response()
    response.status_code = status_code
    response.reason = reason
    response.url = url
    response._content = json.dumps(body).encode() if body is not None else b""
    return response


class FakeStore:
    """In-memory stand-in for KintoneStoreClient."""

    def __init__(self, latest=None, fail_on_call=None):
        self.latest = latest
        self.fail_on_call = fail_on_call
        self.reads = []
        self.writes = []
        self.closed = False

    def read_latest(self, project):
        self.reads.append(project)
        return self.latest

    def write(self, project, day, count, uniques):
        if self.fail_on_call is not None and len(self.writes) + 1 == self.fail_on_call:
            raise StoreWriteError("520 Unknown: write rejected", 520)
        self.writes.append((project, day, count, uniques))
        return str(100 + len(self.writes))

    def close(self):
        self.closed = True


class FakeAnalytics:
    def __init__(self, views):
        self.views = views
        self.calls = []

    def fetch_views(self, owner, repo):
        self.calls.append((owner, repo))
        return list(self.views)


def view(day, count, uniques):
    return ViewRecord(count, f"{day}T00:00:00Z", uniques)


@pytest.fixture
def two_day_series():
    return [view("2024-01-01", 5, 3), view("2024-01-02", 7, 4)]


@pytest.fixture
def fixed_today():
    return lambda: date(2024, 1, 3)


@pytest.fixture
def mock_session():
    return mock.create_autospec(requests.Session, instance=True)
