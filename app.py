# app.py
# CustomTkinter GUI for ShakeSearch (dark theme).
# - Load the corpus text file in a background thread (keeps UI responsive).
# - Live search with debounce; window size and whole-word controls.
# - Results & event log panes.

from __future__ import annotations
import threading
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

# Project imports (pip install -e . or PYTHONPATH=src)
from shakesearch import Engine, SearchResponse, SearchResult, parse_window_size
from shakesearch import config as CFG

# results pane cap; the message still reports the full count
MAX_SHOWN = 500
MIN_QUERY_CHARS = 3


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def format_results(results: List[SearchResult], limit: int = MAX_SHOWN) -> str:
    blocks = []
    for i, r in enumerate(results[:limit], 1):
        text = r.text.replace(CFG.DISPLAY_BREAK, "\n    ")
        blocks.append(f"{i}. [{r.attribution}]\n    {text}")
    if len(results) > limit:
        blocks.append(f"(showing the first {limit:,} of {len(results):,} results)")
    return "\n\n".join(blocks)


# -------------------- main app --------------------

class SearchApp(ctk.CTk):
    """Dark-themed GUI that loads the corpus and queries the engine."""

    def __init__(self) -> None:
        super().__init__()

        # Theme
        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        # Window
        self.title("ShakeSearch")
        self.geometry("900x650")
        self.minsize(820, 560)

        # State
        self._engine: Optional[Engine] = None
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None
        self._search_seq: int = 0

        # Fonts
        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        # Layout grid
        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=0)  # log

        # Build UI
        self._build_header()
        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self.destroy)

    # --------- UI sections ---------

    def _build_header(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        header.grid_columnconfigure(0, weight=1)

        title = ctk.CTkLabel(header, text="ShakeSearch", font=self.font_title)
        title.grid(row=0, column=0, sticky="w", padx=12, pady=10)

    def _build_source_bar(self) -> None:
        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(1, weight=1)

        btn_file = ctk.CTkButton(bar, text="Choose Corpus", command=self._choose_file)
        btn_file.grid(row=0, column=0, padx=(12, 6), pady=10)

        self.lbl_source = ctk.CTkLabel(bar, text="No corpus selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=1, sticky="ew", padx=(6, 6), pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", determinate_speed=1.2)
        self.progress.grid(row=0, column=2, sticky="e", padx=(0, 6), pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: —", anchor="e")
        self.lbl_status.grid(row=0, column=3, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=(6, 6))
        box.grid_columnconfigure(1, weight=1)

        ctk.CTkLabel(box, text="Search:", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

        self.entry_query = ctk.CTkEntry(box, placeholder_text="Word or sentence…")
        self.entry_query.grid(row=0, column=1, sticky="ew", padx=(6, 6), pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

        ctk.CTkLabel(box, text="Size:", font=self.font_label).grid(row=0, column=2, padx=(6, 2), pady=10)
        self.entry_size = ctk.CTkEntry(box, width=64)
        self.entry_size.insert(0, str(CFG.DEFAULT_WINDOW_SIZE))
        self.entry_size.grid(row=0, column=3, padx=(2, 6), pady=10)
        self.entry_size.bind("<KeyRelease>", self._on_query_changed)

        self.chk_whole_word = ctk.CTkCheckBox(box, text="Whole word", command=self._on_query_changed)
        self.chk_whole_word.grid(row=0, column=4, padx=(6, 12), pady=10)

    def _build_results(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=3, column=0, sticky="nsew", padx=12, pady=(6, 6))
        frame.grid_columnconfigure(0, weight=1)
        frame.grid_rowconfigure(1, weight=1)

        self.lbl_message = ctk.CTkLabel(frame, text="Results", font=self.font_label, anchor="w")
        self.lbl_message.grid(row=0, column=0, sticky="ew", padx=12, pady=(10, 2))

        self.txt_results = ctk.CTkTextbox(frame, wrap="word", font=self.font_mono)
        self.txt_results.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self.txt_results.configure(state="disabled")
        self._set_results("(no results yet — load a corpus and start typing)")

    def _build_log(self) -> None:
        frame = ctk.CTkFrame(self, corner_radius=10)
        frame.grid(row=4, column=0, sticky="nsew", padx=12, pady=(6, 12))
        frame.grid_columnconfigure(0, weight=1)

        ctk.CTkLabel(frame, text="Event log", font=self.font_label).grid(
            row=0, column=0, sticky="w", padx=12, pady=(10, 2)
        )

        self.txt_log = ctk.CTkTextbox(frame, height=110, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=1, column=0, sticky="nsew", padx=12, pady=(0, 12))
        self._log("GUI ready. Choose the corpus file to begin.")

    # --------- loading pipeline (threaded) ---------

    def _choose_file(self) -> None:
        path = fd.askopenfilename(
            title="Choose corpus file",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")]
        )
        if not path:
            return
        self._start_loading(path)

    def _start_loading(self, path: str) -> None:
        # prevent re-entrancy
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "A corpus is already loading. Please wait.")
            return

        self.lbl_source.configure(text=f"File: {shorten_path(path)}")
        self._set_status("Loading…")
        self.progress.start()
        self._engine = None

        self._loading_thread = threading.Thread(target=self._load_worker, args=(path,), daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str) -> None:
        try:
            engine = Engine.from_file(path, corrector=None)
        except OSError as exc:
            self.after(0, lambda e=exc: self._on_load_error(e))
            return
        self.after(0, lambda: self._on_load_ok(engine))

    def _on_load_ok(self, engine: Engine) -> None:
        self.progress.stop()
        self._engine = engine
        n = len(engine.corpus)
        self._set_status(f"Loaded {n:,} characters.")
        self._log(f"Corpus ready ({n} characters).")
        self.entry_query.focus_set()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading corpus.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load corpus.\nSee event log for details.")

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        # debounce for smoother typing
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(250, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        q = self.entry_query.get()
        if not q.strip():
            self._set_results("")
            return
        if self._engine is None:
            self._set_results("error: please load a corpus before searching.")
            self._log("Search attempted before corpus load.")
            return
        if len(q.strip()) < MIN_QUERY_CHARS:
            self._set_results(f"(type at least {MIN_QUERY_CHARS} characters)")
            return

        # only the newest query may update the panes
        self._search_seq += 1
        seq = self._search_seq
        size = parse_window_size(self.entry_size.get())
        whole_word = bool(self.chk_whole_word.get())
        self._set_status("Searching…")
        threading.Thread(
            target=self._search_worker, args=(seq, self._engine, q, size, whole_word), daemon=True
        ).start()

    def _search_worker(self, seq: int, engine: Engine, q: str, size: int, whole_word: bool) -> None:
        try:
            resp = engine.query(q, window_size=size, whole_word=whole_word)
        except Exception as exc:
            self.after(0, lambda e=exc: self._on_search_error(seq, e))
            return
        self.after(0, lambda: self._on_search_ok(seq, resp))

    def _on_search_ok(self, seq: int, resp: SearchResponse) -> None:
        if seq != self._search_seq:
            return
        self._set_status("Ready")
        self.lbl_message.configure(text=resp.message)
        self._set_results(format_results(resp.results))

    def _on_search_error(self, seq: int, exc: Exception) -> None:
        if seq != self._search_seq:
            return
        self._set_status("Search failed.")
        self._set_results(f"error while searching: {exc}")
        self._log(f"ERROR in search: {exc!r}")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_results(self, text: str) -> None:
        self.txt_results.configure(state="normal")
        self.txt_results.delete("0.0", "end")
        if text:
            self.txt_results.insert("end", text)
        self.txt_results.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")


if __name__ == "__main__":
    app = SearchApp()
    app.mainloop()
