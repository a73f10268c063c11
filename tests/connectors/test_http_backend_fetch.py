# SPDX-License-Identifier: Apache-2.0
import json

import pytest
import requests

from landtemp.connectors.backends import http as http_backend


def test_fetch_json_decodes_body(monkeypatch):
    body = json.dumps({"baseTemperature": 8.66, "monthlyVariance": []}).encode()
    seen = {}

    def fake_request_with_retries(method, url, **kwargs):
        seen.update(method=method, url=url, **kwargs)
        return 200, {"Content-Type": "application/json"}, body

    monkeypatch.setattr(
        http_backend, "request_with_retries", fake_request_with_retries
    )
    doc = http_backend.fetch_json("https://data.example/t.json", timeout=5)
    assert doc == {"baseTemperature": 8.66, "monthlyVariance": []}
    assert seen["method"] == "GET"
    assert seen["timeout"] == 5
    assert seen["max_retries"] == 0


def test_fetch_json_raises_on_error_status(monkeypatch):
    monkeypatch.setattr(
        http_backend,
        "request_with_retries",
        lambda method, url, **kw: (404, {}, b"not found"),
    )
    with pytest.raises(http_backend.HttpRequestError) as excinfo:
        http_backend.fetch_json("https://data.example/missing.json")
    assert excinfo.value.status == 404
    assert "404" in str(excinfo.value)


def test_fetch_json_malformed_body_raises_value_error(monkeypatch):
    monkeypatch.setattr(
        http_backend,
        "request_with_retries",
        lambda method, url, **kw: (200, {}, b"{not json"),
    )
    with pytest.raises(ValueError):
        http_backend.fetch_json("https://data.example/t.json")


def test_request_once_wraps_transport_errors(monkeypatch):
    def boom(*args, **kwargs):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "request", boom)
    with pytest.raises(http_backend.HttpRequestError, match="connection refused"):
        http_backend.request_once("GET", "https://data.example/t.json")
