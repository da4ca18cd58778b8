import re
from datetime import datetime

from fastapi.testclient import TestClient

from hxtrigger import count, metrics
from hxtrigger.api import counter as counter_routes
from hxtrigger.api.main import app

COUNT_BODY = re.compile(r"^Current Count: (\d+) \((\d{1,2})/(\d{1,2})/(\d{4}) (\d{1,2}):(\d{2}) (AM|PM)\)$")

client = TestClient(app)


def setup_function():
    # every test starts from a fresh process-wide count
    count._count = 0
    metrics.reset_all()


def _read_count() -> int:
    r = client.get("/current-count")
    assert r.status_code == 200
    m = COUNT_BODY.match(r.text)
    assert m is not None, r.text
    return int(m.group(1))


def test_initial_count_is_zero():
    assert _read_count() == 0


def test_sequential_increments_are_reflected():
    for _ in range(5):
        r = client.post("/increase-count")
        assert r.status_code == 204
    assert _read_count() == 5


def test_increase_sets_trigger_header_and_empty_body():
    r = client.post("/increase-count")
    assert r.status_code == 204
    assert r.headers.get("HX-Trigger") == "latest-count"
    assert r.headers.get("HX-Trigger") == counter_routes.LATEST_COUNT
    assert r.content == b""


def test_every_increase_carries_the_same_event():
    headers = [client.post("/increase-count").headers.get("HX-Trigger") for _ in range(3)]
    assert headers == ["latest-count"] * 3


def test_reading_does_not_change_count():
    client.post("/increase-count")
    assert _read_count() == 1
    assert _read_count() == 1
    assert count.current() == 1


def test_current_count_is_plain_text():
    r = client.get("/current-count")
    assert r.headers["content-type"].startswith("text/plain")
    assert "HX-Trigger" not in r.headers


def test_current_count_uses_wall_clock(monkeypatch):
    class FixedDatetime(datetime):
        @classmethod
        def now(cls, tz=None):
            return cls(2026, 3, 4, 15, 7, 9)

    monkeypatch.setattr(counter_routes, "datetime", FixedDatetime)
    client.post("/increase-count")
    client.post("/increase-count")
    r = client.get("/current-count")
    assert r.text == "Current Count: 2 (3/4/2026 3:07 PM)"


def test_wrong_methods_are_rejected_by_framework():
    assert client.get("/increase-count").status_code == 405
    assert client.post("/current-count").status_code == 405
    assert count.current() == 0


def test_endpoints_record_metrics():
    client.post("/increase-count")
    client.post("/increase-count")
    client.get("/current-count")
    data = metrics.snapshot()["requests"]
    assert data["POST /increase-count"] == 2
    assert data["GET /current-count"] == 1


def test_format_short_datetime():
    fmt = counter_routes.format_short_datetime
    assert fmt(datetime(2026, 10, 19, 15, 7)) == "10/19/2026 3:07 PM"
    assert fmt(datetime(2026, 1, 2, 9, 30)) == "1/2/2026 9:30 AM"
    assert fmt(datetime(2026, 1, 2, 0, 5)) == "1/2/2026 12:05 AM"
    assert fmt(datetime(2026, 1, 2, 12, 0)) == "1/2/2026 12:00 PM"
