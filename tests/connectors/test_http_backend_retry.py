# SPDX-License-Identifier: Apache-2.0
import time as _time

from landtemp.connectors.backends import http as http_backend


def _fake_sequence(seq):
    calls = {"i": 0}

    def fake_request_once(method, url, **kwargs):  # noqa: ARG001
        i = calls["i"]
        calls["i"] = min(i + 1, len(seq) - 1)
        return seq[i]

    return calls, fake_request_once


def test_request_with_retries_respects_retry_after(monkeypatch):
    _calls, fake = _fake_sequence(
        [
            (429, {"Retry-After": "1"}, b""),
            (200, {}, b"ok"),
        ]
    )
    sleeps: list[float] = []

    monkeypatch.setattr(http_backend, "request_once", fake)
    monkeypatch.setattr(_time, "sleep", lambda d: sleeps.append(float(d)))
    status, headers, content = http_backend.request_with_retries(
        "GET", "https://data.example", max_retries=3, retry_backoff=0.5
    )
    assert status == 200
    assert content == b"ok"
    # Should have slept once, taking Retry-After into account (>= 1.0)
    assert len(sleeps) == 1 and sleeps[0] >= 1.0


def test_request_with_retries_exponential_backoff(monkeypatch):
    _calls, fake = _fake_sequence(
        [
            (500, {}, b""),
            (502, {}, b""),
            (200, {}, b"ok"),
        ]
    )
    sleeps: list[float] = []

    monkeypatch.setattr(http_backend, "request_once", fake)
    monkeypatch.setattr(_time, "sleep", lambda d: sleeps.append(float(d)))
    status, _headers, _content = http_backend.request_with_retries(
        "GET", "https://data.example", max_retries=5, retry_backoff=0.5
    )
    assert status == 200
    assert abs(sleeps[0] - 0.5) < 1e-6
    assert abs(sleeps[1] - 1.0) < 1e-6


def test_request_with_retries_defaults_to_single_attempt(monkeypatch):
    calls, fake = _fake_sequence([(503, {}, b""), (200, {}, b"ok")])
    sleeps: list[float] = []

    monkeypatch.setattr(http_backend, "request_once", fake)
    monkeypatch.setattr(_time, "sleep", lambda d: sleeps.append(float(d)))
    status, _headers, _content = http_backend.request_with_retries(
        "GET", "https://data.example"
    )
    assert status == 503
    assert calls["i"] == 1
    assert sleeps == []
