"""Requesting practice texts from a chat-completion service."""

import json
import urllib.error
import urllib.request

from .texts import default_text

NOTICE = "К сожалению гптшка накрылась вот скучный и однообразный текст"
MODEL = "gpt-4o-mini"
MAX_TOKENS = 100
PROMPT = (
    "Напиши разный текст на случайную тему, используя {language} язык, "
    "для клавиатурного тренажера на 25 слов, начни писать сразу текст, "
    "без вводных слов, и не нужно использовать никакие знаки препинания"
)


class GenerationError(Exception):
    """A practice text could not be obtained from the service."""


def build_payload(language):
    """Return the request body asking for a text in ``language``."""
    return {
        "model": MODEL,
        "messages": [{"role": "user", "content": PROMPT.format(language=language)}],
        "max_tokens": MAX_TOKENS,
    }


def parse_reply(body):
    """Extract the generated text from a reply, capitalising its first letter."""
    try:
        document = json.loads(body)
    except (TypeError, ValueError) as error:
        raise GenerationError(f"invalid reply: {error}") from error
    try:
        content = document["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError) as error:
        raise GenerationError("reply holds no message content") from error
    if not isinstance(content, str) or not content:
        raise GenerationError("reply content is empty")
    return content[0].upper() + content[1:]


def fallback_text(index):
    """Return the notice followed by the built-in text for ``index``."""
    return f"{NOTICE}\n\n{default_text(index)}"


def fetch_text(language, api_key, url, timeout=30.0):
    """Ask the service at ``url`` for a practice text."""
    if not url:
        raise GenerationError("no endpoint configured")
    if not api_key:
        raise GenerationError("no API key configured")
    request = urllib.request.Request(
        url,
        data=json.dumps(build_payload(language)).encode("utf-8"),
        method="POST",
        headers={
            "Content-Type": "application/json",
            "Authorization": f"Bearer {api_key}",
        },
    )
    try:
        with urllib.request.urlopen(request, timeout=timeout) as response:
            body = response.read()
    except (urllib.error.URLError, OSError, ValueError) as error:
        raise GenerationError(str(error)) from error
    return parse_reply(body)