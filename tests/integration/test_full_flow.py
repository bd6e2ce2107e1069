import json
import re
from datetime import datetime, timedelta

from fastapi.testclient import TestClient

from apps.nairobi_api import ABOUT_TEXT, HOME_TEXT, NairobiApi
from apps.nairobi_api.main import app, create_app

client = TestClient(app)

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}$")
LONG_TIME_RE = re.compile(
    r"^Current Time: (Monday|Tuesday|Wednesday|Thursday|Friday|Saturday|Sunday), "
    r"\d{2} [A-Z][a-z]+ \d{4} - \d{2}:\d{2}:\d{2}$"
)


def _close_to_now(moment: datetime) -> bool:
    return abs(datetime.now() - moment) < timedelta(seconds=5)


def test_home():
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == HOME_TEXT
    assert response.headers["content-type"].startswith("text/plain")


def test_api_returns_greeting_json():
    response = client.get("/api")
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/json"
    body = response.json()
    assert set(body) == {"message", "location", "status", "timestamp"}
    assert body["message"] == "Hello from Nairobi!"
    assert body["location"] == "Nairobi, Kenya 🇰🇪"
    assert body["status"] == "success"
    assert TIMESTAMP_RE.match(body["timestamp"])
    assert _close_to_now(datetime.strptime(body["timestamp"], "%Y-%m-%d %H:%M:%S"))


def test_about():
    response = client.get("/about")
    assert response.status_code == 200
    assert response.text == ABOUT_TEXT


def test_time():
    response = client.get("/time")
    assert response.status_code == 200
    assert LONG_TIME_RE.match(response.text)
    shown = response.text[len("Current Time: "):]
    assert _close_to_now(datetime.strptime(shown, "%A, %d %B %Y - %H:%M:%S"))


def test_static_routes_are_byte_identical():
    for path in ("/", "/about"):
        assert client.get(path).content == client.get(path).content


def test_api_with_pinned_clock_is_exact():
    pinned = TestClient(create_app(NairobiApi(clock=lambda: datetime(2024, 3, 15, 10, 30, 0))))
    response = pinned.get("/api")
    expected = {
        "message": "Hello from Nairobi!",
        "location": "Nairobi, Kenya 🇰🇪",
        "status": "success",
        "timestamp": "2024-03-15 10:30:00",
    }
    assert response.content == json.dumps(
        expected, ensure_ascii=False, separators=(",", ":")
    ).encode("utf-8")


def test_method_is_ignored():
    assert client.post("/about", json={"ignored": True}).text == ABOUT_TEXT
    assert client.delete("/").text == HOME_TEXT


def test_query_string_is_ignored():
    assert client.get("/about?verbose=1").text == ABOUT_TEXT


def test_unknown_path_is_not_found():
    response = client.get("/unknown-path")
    assert response.status_code == 404
    assert response.json() == {"detail": "Not Found"}


def test_docs_are_not_served():
    assert client.get("/docs").status_code == 404
    assert client.get("/openapi.json").status_code == 404


def test_near_miss_paths_are_not_found():
    strict = TestClient(app, follow_redirects=False)
    for path in ("/api/", "/about/", "/time/", "/API", "/About", "/api/extra"):
        response = strict.get(path)
        assert response.status_code == 404, path
        assert response.json() == {"detail": "Not Found"}


def test_timed_routes_differ_only_in_time():
    moments = iter([datetime(2024, 3, 15, 10, 30, 0), datetime(2024, 3, 15, 10, 30, 7)] * 2)
    ticking = TestClient(create_app(NairobiApi(clock=lambda: next(moments))))

    first, second = ticking.get("/api").json(), ticking.get("/api").json()
    assert (first["timestamp"], second["timestamp"]) == ("2024-03-15 10:30:00", "2024-03-15 10:30:07")
    first.pop("timestamp")
    second.pop("timestamp")
    assert first == second

    first_text, second_text = ticking.get("/time").text, ticking.get("/time").text
    assert first_text == "Current Time: Friday, 15 March 2024 - 10:30:00"
    assert second_text == first_text.replace("10:30:00", "10:30:07")
