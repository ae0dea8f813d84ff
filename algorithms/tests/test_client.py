import pytest
import requests

import client


class FakeResponse:
    def __init__(self, status_code, payload):
        self.status_code = status_code
        self._payload = payload

    def json(self):
        return self._payload

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")


@pytest.fixture
def fake_post(monkeypatch):
    calls = []

    def install(response):
        def post(url, json=None, timeout=None):
            calls.append((url, json))
            return response
        monkeypatch.setattr(client.requests, "post", post)
        return calls

    return install


def test_send_session(fake_post):
    calls = fake_post(FakeResponse(200, {"lines": ["1 1 E"]}))
    assert client.send_session("5 3\n1 1 E\nRFRFRFRF\n", "http://mars:5000/") == ["1 1 E"]
    assert calls == [("http://mars:5000/sessions", {"transcript": "5 3\n1 1 E\nRFRFRFRF\n"})]


def test_send_session_server_error(fake_post):
    fake_post(FakeResponse(400, {"detail": "line 1: missing grid size line"}))
    with pytest.raises(requests.HTTPError):
        client.send_session("", "http://mars:5000")


def test_main_prints_lines(fake_post, tmp_path, capsys):
    fake_post(FakeResponse(200, {"lines": ["1 1 E", "3 3 N LOST"]}))
    transcript = tmp_path / "session.txt"
    transcript.write_text("5 3\n1 1 E\nRFRFRFRF\n3 2 N\nFRRFLLFFRRFLL\n")

    assert client.main([str(transcript), "--url", "http://mars:5000"]) == 0
    assert capsys.readouterr().out.splitlines() == ["1 1 E", "3 3 N LOST"]


def test_main_reports_failure(monkeypatch, tmp_path):
    def post(url, json=None, timeout=None):
        raise requests.ConnectionError("refused")
    monkeypatch.setattr(client.requests, "post", post)
    transcript = tmp_path / "session.txt"
    transcript.write_text("5 3\n")

    assert client.main([str(transcript)]) == 1


def test_send_session_logs_summary(fake_post, caplog):
    fake_post(FakeResponse(200, {"lines": ["3 3 N LOST"], "processed": 1, "lost": 1}))
    with caplog.at_level("INFO", logger="client"):
        assert client.send_session("5 3\n3 2 N\nFRRFLLFFRRFLL\n", "http://mars:5000") == ["3 3 N LOST"]
    assert "1 robot(s) processed, 1 lost" in caplog.text
