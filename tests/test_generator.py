import json
import threading
from http.server import BaseHTTPRequestHandler, HTTPServer

import pytest

from typetrainer.generator import (
    NOTICE,
    GenerationError,
    build_payload,
    fallback_text,
    fetch_text,
    parse_reply,
)
from typetrainer.texts import default_text


def reply_with(content):
    return json.dumps({"choices": [{"message": {"content": content}}]})


@pytest.fixture
def server():
    received = {}
    answer = {"status": 200, "body": b""}

    class Handler(BaseHTTPRequestHandler):
        def do_POST(self):
            length = int(self.headers["Content-Length"])
            received["body"] = json.loads(self.rfile.read(length))
            received["auth"] = self.headers["Authorization"]
            received["type"] = self.headers["Content-Type"]
            self.send_response(answer["status"])
            self.send_header("Content-Type", "application/json")
            self.send_header("Content-Length", str(len(answer["body"])))
            self.end_headers()
            self.wfile.write(answer["body"])

        def log_message(self, *args):
            pass

    httpd = HTTPServer(("127.0.0.1", 0), Handler)
    thread = threading.Thread(target=httpd.serve_forever, daemon=True)
    thread.start()
    yield f"http://127.0.0.1:{httpd.server_port}/chat/completions", received, answer
    httpd.shutdown()
    httpd.server_close()


def test_build_payload():
    payload = build_payload("Русский")
    assert payload["model"] == "gpt-4o-mini"
    assert payload["max_tokens"] == 100
    assert payload["messages"][0]["role"] == "user"
    assert "Русский" in payload["messages"][0]["content"]


def test_parse_reply_capitalises():
    assert parse_reply(reply_with("hello world")) == "Hello world"


def test_parse_reply_accepts_bytes():
    assert parse_reply(reply_with("солнце").encode("utf-8")) == "Солнце"


@pytest.mark.parametrize(
    "body",
    ["not json", json.dumps({}), json.dumps({"choices": []}), reply_with(""), reply_with(5)],
)
def test_parse_reply_errors(body):
    with pytest.raises(GenerationError):
        parse_reply(body)


def test_fallback_text():
    text = fallback_text(8)
    assert text == NOTICE + "\n\n" + default_text(8)


def test_fallback_text_out_of_range():
    with pytest.raises(IndexError):
        fallback_text(11)


def test_fetch_text(server):
    url, received, answer = server
    answer["body"] = reply_with("солнце светит").encode("utf-8")
    assert fetch_text("Русский", "placeholder", url, 5) == "Солнце светит"
    assert received["auth"] == "Bearer placeholder"
    assert received["type"] == "application/json"
    assert received["body"] == build_payload("Русский")


def test_fetch_text_http_error(server):
    url, _, answer = server
    answer["status"] = 500
    with pytest.raises(GenerationError):
        fetch_text("Русский", "placeholder", url, 5)


def test_fetch_text_without_endpoint():
    with pytest.raises(GenerationError):
        fetch_text("Русский", "placeholder", None)


def test_fetch_text_without_key(server):
    url, received, _ = server
    with pytest.raises(GenerationError):
        fetch_text("Русский", None, url, 5)
    assert received == {}