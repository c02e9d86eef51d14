# typetrainer

A small desktop trainer for touch typing. It shows a passage of text, an
on-screen keyboard, and live statistics while you type:

- elapsed time in seconds,
- characters per second (CPS),
- words per second (WPS),
- accuracy as a percentage of inputs that were typed correctly.

Built-in passages exist for ten languages: English, Arabic, Belarusian,
Spanish, Italian, German, Polish, Portuguese, Russian and French. The window
opens with the Russian passage.

## Installation

The interface uses Tkinter from the Python standard library, so no further
packages are needed. Python 3.10 or newer is required.

    pip install .

## Running

    typetrainer

Start typing to begin the clock. Correct characters turn white, mistakes
turn red, the character under the cursor is underlined, and Backspace steps
back one character. The exercise ends once as many characters have been
entered as the passage holds.

Choose a language in the status bar and press "Обновить" to reset the
statistics and load a new passage for that language. A new passage is
requested from a chat-completion service when both an endpoint and a key
are given; otherwise, or if the request fails, a notice is shown followed
by the built-in passage for the chosen language.

Options:

- `--api-key KEY` – key for the text generation service (default: the
  `TYPETRAINER_API_KEY` environment variable),
- `--endpoint URL` – chat-completion URL used to generate texts (default:
  the `TYPETRAINER_ENDPOINT` environment variable),
- `--timeout SECONDS` – how long to wait for a generated text (default 30).

## Using the pieces from Python

The typing logic works without any window:

    from typetrainer.session import TypingSession
    from typetrainer.texts import default_text

    session = TypingSession(default_text(0), 0)
    session.type_char("T", 0.0)
    session.type_char("h", 0.5)
    print(session.stats(1.0))

- `typetrainer.texts` – `default_text(index)`, `language_names()` and
  `layout_for(index)`.
- `typetrainer.session` – `TypingSession` (`type_char`, `backspace`,
  `states`, `stats`, `finished`), the `CharState` enum, the `Stats`
  dataclass with its `labels()` method, `format_number` and `count_words`.
- `typetrainer.keyboard` – `Keyboard` lays out three rows of letter keys and
  maps X11 key codes (24–35, 38–48, 52–61) to its `KeyButton`s with
  `button_for_scancode` and `press_scancode`.
- `typetrainer.generator` – `build_payload`, `parse_reply`, `fallback_text`
  and `fetch_text`, which raises `GenerationError` when no text can be
  obtained.

## Limitations

- No generation service is configured by default; without `--endpoint` and
  `--api-key` only the built-in passages are used.
- The on-screen keyboard knows the key characters of the `us` and `ru`
  layouts only; every other language shows the `us` keys.
- Keys light up from their X11 key codes, so on other systems the on-screen
  keyboard may not react to typing.

## Running the tests

    pip install .[test]
    pytest