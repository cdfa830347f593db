"""
Shared fakes and fixtures.

FakeSession stands in for requests.Session: it records every call and
answers with queued FakeResponse objects (or raises queued exceptions).
"""

import json
from copy import deepcopy
from urllib.parse import parse_qs

import pytest

from doistapi import Client

BASE_URL = "https://api.todoist.test/api/v1"
API_KEY = "test-token"
SYNC_URL = f"{BASE_URL}/sync"


class FakeResponse:
    def __init__(self, payload=None, status_code=200, reason="OK", text=None):
        self.status_code = status_code
        self.reason = reason
        if text is not None:
            self.text = text
        elif payload is None:
            self.text = ""
        else:
            self.text = json.dumps(payload)

    def json(self):
        return json.loads(self.text)


class FakeSession:
    def __init__(self, responses=None):
        self.responses = list(responses or [])
        self.calls = []
        self.closed = False

    def queue(self, *responses):
        self.responses.extend(responses)

    def request(self, method, url, params=None, data=None, headers=None, timeout=None):
        self.calls.append({
            "method": method,
            "url": url,
            "params": deepcopy(params),
            "data": deepcopy(data),
            "headers": dict(headers or {}),
            "timeout": timeout,
        })
        if not self.responses:
            raise AssertionError(f"unexpected request: {method} {url}")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    def close(self):
        self.closed = True


def json_body(call):
    """Decode the JSON body of a recorded call."""
    assert call["headers"].get("Content-Type") == "application/json"
    return json.loads(call["data"])


def form_body(call):
    """Return the form fields of a recorded call as a plain dict."""
    assert call["headers"].get("Content-Type") == "application/x-www-form-urlencoded"
    data = call["data"]
    if isinstance(data, str):
        return {k: v[0] for k, v in parse_qs(data).items()}
    return dict(data)


def page(results, next_cursor=None):
    return FakeResponse({"results": results, "next_cursor": next_cursor})


def task_payload(task_id="1", content="Task", **extra):
    payload = {
        "id": task_id,
        "content": content,
        "project_id": "p1",
        "section_id": None,
        "parent_id": None,
        "labels": [],
        "priority": 1,
        "checked": False,
    }
    payload.update(extra)
    return payload


@pytest.fixture
def session():
    return FakeSession()


@pytest.fixture
def client(session):
    return Client(API_KEY, base_url=BASE_URL, session=session, sync_url=SYNC_URL)
