# frontend/desktop.py
# CustomTkinter GUI for dictionary completion (dark theme).
# - Pick a dictionary folder; the corpus is built in a background thread.
# - Live search with debounce; annotation column, documentation pane, event log.

from __future__ import annotations
import threading
from typing import List, Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from dictcomplete import Engine, Entry


def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


class DictCompleteApp(ctk.CTk):
    """Dark-themed GUI that loads a dictionary folder and queries the engine."""

    def __init__(self) -> None:
        super().__init__()

        ctk.set_appearance_mode("dark")
        ctk.set_default_color_theme("blue")

        self.title("Dictionary completion")
        self.geometry("900x680")
        self.minsize(820, 560)

        # State
        self._engine: Optional[Engine] = None
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None
        self._results: List[Entry] = []

        self.font_title = ctk.CTkFont(size=18, weight="bold")
        self.font_label = ctk.CTkFont(size=13)
        self.font_mono = ctk.CTkFont(family="Cascadia Mono, Menlo, Consolas, Courier New", size=13)

        self.grid_columnconfigure(0, weight=1)
        self.grid_rowconfigure(3, weight=1)  # results
        self.grid_rowconfigure(4, weight=1)  # documentation

        self._build_source_bar()
        self._build_search()
        self._build_results()
        self._build_doc()
        self._build_log()

        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    # --------- UI sections ---------

    def _build_source_bar(self) -> None:
        header = ctk.CTkFrame(self, corner_radius=10)
        header.grid(row=0, column=0, sticky="ew", padx=12, pady=(12, 6))
        ctk.CTkLabel(header, text="Dictionary completion", font=self.font_title).grid(
            row=0, column=0, sticky="w", padx=12, pady=10
        )

        bar = ctk.CTkFrame(self, corner_radius=10)
        bar.grid(row=1, column=0, sticky="ew", padx=12, pady=6)
        bar.grid_columnconfigure(2, weight=1)

        ctk.CTkButton(bar, text="Choose Folder", command=self._choose_folder).grid(
            row=0, column=0, padx=(12, 6), pady=10
        )
        self.entry_context = ctk.CTkEntry(bar, width=160, placeholder_text="contexts, e.g. python-mode")
        self.entry_context.grid(row=0, column=1, padx=6, pady=10)
        self.entry_context.bind("<Return>", self._on_context_changed)

        self.lbl_source = ctk.CTkLabel(bar, text="No folder selected", anchor="w", font=self.font_label)
        self.lbl_source.grid(row=0, column=2, sticky="ew", padx=6, pady=10)

        ctk.CTkButton(bar, text="Refresh", width=80, command=self._refresh).grid(row=0, column=3, padx=6, pady=10)

        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", width=90)
        self.progress.grid(row=0, column=4, padx=6, pady=10)

        self.lbl_status = ctk.CTkLabel(bar, text="Status: -", anchor="e")
        self.lbl_status.grid(row=0, column=5, sticky="e", padx=12, pady=10)

    def _build_search(self) -> None:
        box = ctk.CTkFrame(self, corner_radius=10)
        box.grid(row=2, column=0, sticky="ew", padx=12, pady=6)
        box.grid_columnconfigure(0, weight=1)

        self.entry_query = ctk.CTkEntry(box, placeholder_text="Start typing a prefix…")
        self.entry_query.grid(row=0, column=0, sticky="ew", padx=12, pady=10)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

        self.var_fuzzy = ctk.BooleanVar(value=False)
        ctk.CTkCheckBox(box, text="fuzzy (*)", variable=self.var_fuzzy, command=self._do_search).grid(
            row=0, column=1, padx=(0, 12), pady=10
        )

    def _build_results(self) -> None:
        self.list_results = ctk.CTkScrollableFrame(self, corner_radius=10, label_text="Candidates")
        self.list_results.grid(row=3, column=0, sticky="nsew", padx=12, pady=6)
        self.list_results.grid_columnconfigure(0, weight=1)

    def _build_doc(self) -> None:
        self.txt_doc = ctk.CTkTextbox(self, wrap="word", font=self.font_mono)
        self.txt_doc.grid(row=4, column=0, sticky="nsew", padx=12, pady=6)
        self._set_doc("(select a candidate to see its documentation)")

    def _build_log(self) -> None:
        self.txt_log = ctk.CTkTextbox(self, height=90, wrap="word", font=ctk.CTkFont(size=12))
        self.txt_log.grid(row=5, column=0, sticky="nsew", padx=12, pady=(6, 12))
        self._log("GUI ready. Choose a dictionary folder to begin.")

    # --------- loading pipeline (threaded) ---------

    def _contexts(self) -> List[str]:
        return self.entry_context.get().split()

    def _choose_folder(self) -> None:
        path = fd.askdirectory(title="Choose dictionary folder")
        if not path:
            return
        if self._busy():
            return
        self.lbl_source.configure(text=shorten_path(path))
        self._start_worker(self._load_worker, path, self._contexts())

    def _busy(self) -> bool:
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Loading", "Dictionaries are already loading. Please wait.")
            return True
        return False

    def _refresh(self) -> None:
        if self._engine is None or self._busy():
            return
        self._start_worker(self._refresh_worker)

    def _start_worker(self, target, *args) -> None:
        self._set_status("Loading…")
        self.progress.start()
        self._loading_thread = threading.Thread(target=target, args=args, daemon=True)
        self._loading_thread.start()

    def _load_worker(self, path: str, contexts: List[str]) -> None:
        try:
            eng = Engine(path, contexts=contexts)
            n = len(eng.corpus)
        except Exception as exc:
            self.after(0, lambda: self._on_load_error(exc))
            return
        self.after(0, lambda: self._swap_engine(eng, n))

    def _swap_engine(self, eng: Engine, n_entries: int) -> None:
        if self._engine is not None:
            self._engine.shutdown()
        self._engine = eng
        self._on_load_ok(n_entries)

    def _refresh_worker(self) -> None:
        assert self._engine is not None
        try:
            n = self._engine.refresh()
        except Exception as exc:
            self.after(0, lambda: self._on_load_error(exc))
            return
        self.after(0, lambda: self._on_load_ok(n))

    def _on_load_ok(self, n_entries: int) -> None:
        self.progress.stop()
        self._set_status(f"Loaded {n_entries:,} entries.")
        self._log(f"Corpus ready ({n_entries} entries, contexts: {', '.join(self._contexts()) or '-'}).")
        self.entry_query.focus_set()
        self._do_search()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while loading dictionaries.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Load error", "Failed to load dictionaries.\nSee event log for details.")

    def _on_context_changed(self, _ev=None) -> None:
        if self._engine is None or self._busy():
            return
        self._engine.set_context(*self._contexts())
        self._start_worker(self._refresh_worker)

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(160, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        for child in self.list_results.winfo_children():
            child.destroy()
        q = self.entry_query.get()
        if self._engine is None or not q:
            self._results = []
            return
        self._results = self._engine.complete(q, fuzzy=self.var_fuzzy.get())
        if not self._results:
            ctk.CTkLabel(self.list_results, text="(no matches)").grid(row=0, column=0, sticky="w")
            return
        for i, entry in enumerate(self._results):
            text = f"{entry.label:<32} {entry.annotation or ''}"
            btn = ctk.CTkButton(
                self.list_results, text=text, anchor="w", font=self.font_mono, fg_color="transparent",
                command=lambda e=entry: self._show_entry(e),
            )
            btn.grid(row=i, column=0, sticky="ew", pady=1)

    def _show_entry(self, entry: Entry) -> None:
        self._set_doc(entry.meta or "(no documentation)")
        self._log(f"Selected {entry.label!r}")

    # --------- misc UI helpers ---------

    def _set_status(self, text: str) -> None:
        self.lbl_status.configure(text=f"Status: {text}")

    def _set_doc(self, text: str) -> None:
        self.txt_doc.configure(state="normal")
        self.txt_doc.delete("0.0", "end")
        self.txt_doc.insert("end", text)
        self.txt_doc.configure(state="disabled")

    def _log(self, msg: str) -> None:
        self.txt_log.insert("end", msg + "\n")
        self.txt_log.see("end")

    def _on_close(self) -> None:
        if self._engine is not None:
            self._engine.shutdown()
        self.destroy()


def main() -> int:
    DictCompleteApp().mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
