"""Window of the typing trainer and its command-line entry point."""

import argparse
import os
import queue
import threading
import time

from .generator import NOTICE, GenerationError, fallback_text, fetch_text
from .keyboard import LAYOUT_KEYS, Keyboard
from .session import CharState, Stats, TypingSession
from .texts import default_text, language_names, layout_for

SCENE_WIDTH = 850
SCENE_HEIGHT = 450
INITIAL_TEXT = 8
INITIAL_LAYOUT = "ru"
TICK_MS = 100
BACKGROUND = "#1e1e1e"


class TrainerApp:
    """Shows a text to type, an on-screen keyboard and live statistics."""

    endpoint = None
    timeout = 30.0

    def __init__(self, root, api_key):
        import tkinter as tk
        from tkinter import ttk

        self.root = root
        self.api_key = api_key
        self._results = queue.Queue()
        self._pending = False
        self._ticking = False

        root.title("typetrainer")
        root.minsize(900, 500)
        root.configure(bg=BACKGROUND)

        self.canvas = tk.Canvas(
            root, width=SCENE_WIDTH, height=SCENE_HEIGHT, bg=BACKGROUND, highlightthickness=0
        )
        self.canvas.pack(fill="both", expand=True)
        margin = max(0, (SCENE_WIDTH - 800) // 2)
        self.text_view = tk.Text(
            self.canvas, bg=BACKGROUND, fg="gray", font=("Helvetica", 20), wrap="word",
            borderwidth=0, highlightthickness=0, padx=margin, takefocus=0, cursor="arrow",
        )
        self.canvas.create_window(0, 0, anchor="nw", window=self.text_view,
                                  width=SCENE_WIDTH, height=SCENE_HEIGHT // 2)
        for state, colour in ((CharState.PENDING, "gray"), (CharState.CURRENT, "gray"),
                              (CharState.CORRECT, "white"), (CharState.WRONG, "red")):
            self.text_view.tag_configure(state.value, foreground=colour)
        self.text_view.tag_configure(CharState.CURRENT.value, underline=True)
        self.text_view.tag_configure("notice", foreground="white", font=("Helvetica", 17))

        bar = tk.Frame(root, bg=BACKGROUND)
        bar.pack(fill="x", side="bottom")
        self.languages = ttk.Combobox(bar, values=language_names(), state="readonly", takefocus=0)
        self.languages.current(0)
        self.languages.pack(side="left")
        tk.Button(bar, text="Обновить", command=self.restart, takefocus=0).pack(side="left")
        self.labels = [tk.Label(bar, bg=BACKGROUND, fg="white") for _ in range(4)]
        for label in self.labels:
            label.pack(side="left", padx=6)
        self._set_labels(Stats())

        root.bind("<Key>", self.on_key)
        root.focus_set()
        self._load(default_text(INITIAL_TEXT), 0, INITIAL_LAYOUT)
        self._start_ticking()

    def _set_labels(self, stats):
        for label, caption in zip(self.labels, stats.labels()):
            label.configure(text=caption)

    def _load(self, text, skip, layout):
        self.keyboard = Keyboard(LAYOUT_KEYS.get(layout, LAYOUT_KEYS["us"]), SCENE_WIDTH, SCENE_HEIGHT)
        self.session = TypingSession(text, skip)
        view = self.text_view
        view.configure(state="normal")
        view.delete("1.0", "end")
        view.insert("1.0", text)
        if skip:
            view.tag_add("notice", "1.0", f"1.0 + {skip} chars")
        view.configure(state="disabled")
        self._paint_text()
        self._draw_keyboard()

    def _paint_text(self):
        view = self.text_view
        for state in CharState:
            view.tag_remove(state.value, "1.0", "end")
        for offset, state in enumerate(self.session.states(), start=self.session.skip):
            view.tag_add(state.value, f"1.0 + {offset} chars")

    def _draw_keyboard(self):
        canvas = self.canvas
        canvas.delete("key")
        now = time.monotonic()
        left, top = self.keyboard.origin
        for button in self.keyboard:
            x, y = left + button.x, top + button.y
            fill = "#8c8c8c" if button.is_pressed(now) else "#363636"
            canvas.create_rectangle(x, y, x + button.width, y + button.height,
                                    fill=fill, outline=fill, tags="key")
            canvas.create_text(x + (button.width - 20) / 2, y + (button.width + 20) / 2,
                               text=button.letter, anchor="sw", fill="white",
                               font=("Helvetica", 20), tags="key")

    def _start_ticking(self):
        if not self._ticking:
            self._ticking = True
            self.root.after(TICK_MS, self._tick)

    def _tick(self):
        if self.session.started_at is not None:
            self._set_labels(self.session.stats(time.monotonic()))
            if self.session.finished():
                self._ticking = False
                return
        self.root.after(TICK_MS, self._tick)

    def on_key(self, event):
        """Handle a key press: light its key and advance the exercise."""
        if self.session.finished():
            return
        now = time.monotonic()
        if self.keyboard.press_scancode(event.keycode, now) is not None:
            self._draw_keyboard()
            self.root.after(60, self._draw_keyboard)
        if event.keysym == "BackSpace":
            self.session.backspace()
        elif event.char:
            self.session.type_char(event.char, now)
        self._paint_text()

    def restart(self):
        """Reset the statistics and request a fresh practice text."""
        self.session = TypingSession(self.session.text, self.session.skip)
        self._paint_text()
        self._set_labels(Stats())
        self._start_ticking()
        if self._pending:
            return
        self._pending = True
        index = self.languages.current()
        language = language_names()[index]
        threading.Thread(target=self._fetch, args=(language, index), daemon=True).start()
        self.root.after(50, self._poll)

    def _fetch(self, language, index):
        try:
            text, skip = fetch_text(language, self.api_key, self.endpoint, self.timeout), 0
        except GenerationError:
            text, skip = fallback_text(index), len(NOTICE) + 2
        self._results.put((text, skip, layout_for(index)))

    def _poll(self):
        try:
            text, skip, layout = self._results.get_nowait()
        except queue.Empty:
            self.root.after(50, self._poll)
            return
        self._load(text, skip, layout)
        self._pending = False


def parse_args(argv=None):
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="typetrainer", description="Touch-typing trainer.")
    parser.add_argument("--api-key", default=os.environ.get("TYPETRAINER_API_KEY"),
                        help="key for the text generation service")
    parser.add_argument("--endpoint", default=os.environ.get("TYPETRAINER_ENDPOINT"),
                        help="chat-completion URL used to generate texts")
    parser.add_argument("--timeout", type=float, default=30.0,
                        help="seconds to wait for a generated text")
    return parser.parse_args(argv)


def main(argv=None):
    """Open the trainer window."""
    args = parse_args(argv)
    import tkinter as tk

    root = tk.Tk()
    app = TrainerApp(root, args.api_key)
    app.endpoint = args.endpoint
    app.timeout = args.timeout
    root.mainloop()
    return 0