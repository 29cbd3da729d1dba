# app.py
# Desktop "go to file" picker over a folder or a ZIP archive.

from __future__ import annotations
import os
import shutil
import threading
import zipfile
import tempfile
from typing import Optional

import tkinter.filedialog as fd
import tkinter.messagebox as mb
import customtkinter as ctk

from bloodhound.config import TOP_K, CASE_SENSITIVE, DEFAULT_EXCLUSIONS
from bloodhound.engine import Engine
from bloodhound.models import ScoredResult


# -------------------- small helpers --------------------

def shorten_path(p: str, max_chars: int = 60) -> str:
    """Shorten long paths neatly for labels."""
    if len(p) <= max_chars:
        return p
    keep = max_chars // 2 - 3
    return p[:keep] + "..." + p[-keep:]


def safe_extract_zip(zip_path: str, dest_dir: str) -> None:
    """
    Extract zip contents to dest_dir with basic zip-slip protection.
    Only ensures members stay within dest_dir (no absolute paths / .. traversal).
    """
    dest_abs = os.path.abspath(dest_dir)
    with zipfile.ZipFile(zip_path) as zf:
        for info in zf.infolist():
            target = os.path.abspath(os.path.join(dest_abs, info.filename))
            # Allow the dest root itself (for top-level dirs), otherwise require prefix
            if target != dest_abs and not target.startswith(dest_abs + os.sep):
                raise RuntimeError(f"Unsafe zip entry: {info.filename!r}")
        zf.extractall(dest_abs)


def format_result(rank: int, r: ScoredResult) -> str:
    return f"{rank:>2}. {r.relevance:7.3f}  {r.path}"


# -------------------- main app --------------------

class FileFinderApp(ctk.CTk):
    """Window that indexes a folder or ZIP and fuzzy-matches its file paths."""

    def __init__(self) -> None:
        super().__init__()
        ctk.set_appearance_mode("dark")
        self.title("bloodhound: go to file")
        self.geometry("900x650")

        self._engine: Optional[Engine] = None
        self._loading_thread: Optional[threading.Thread] = None
        self._search_after_id: Optional[str] = None
        self._tmpdir_path: Optional[str] = None  # extracted ZIP, removed on swap/close

        self._build_ui()
        self._set_status("Ready")
        self.protocol("WM_DELETE_WINDOW", self._on_close)

    def _build_ui(self) -> None:
        bar = ctk.CTkFrame(self)
        bar.pack(fill="x", padx=10, pady=(10, 4))
        ctk.CTkButton(bar, text="Folder…", width=90, command=self._choose_folder).pack(side="left", padx=4, pady=6)
        ctk.CTkButton(bar, text="ZIP…", width=70, command=self._choose_zip).pack(side="left", padx=4, pady=6)
        self.chk_case = ctk.CTkCheckBox(bar, text="Case sensitive")
        if CASE_SENSITIVE:
            self.chk_case.select()
        self.chk_case.pack(side="left", padx=8)
        self.lbl_status = ctk.CTkLabel(bar, text="")
        self.lbl_status.pack(side="right", padx=8)
        self.progress = ctk.CTkProgressBar(bar, mode="indeterminate", width=120)
        self.progress.pack(side="right", padx=4)

        self.lbl_source = ctk.CTkLabel(self, text="No source selected", anchor="w")
        self.lbl_source.pack(fill="x", padx=14)

        self.entry_query = ctk.CTkEntry(self, placeholder_text="Type part of a path")
        self.entry_query.pack(fill="x", padx=10, pady=4)
        self.entry_query.bind("<KeyRelease>", self._on_query_changed)

        mono = ctk.CTkFont(family="Courier New", size=13)
        self.txt_results = ctk.CTkTextbox(self, wrap="none", font=mono)
        self.txt_results.pack(fill="both", expand=True, padx=10, pady=4)
        self._set_results("(choose a folder and start typing)")

        self.txt_log = ctk.CTkTextbox(self, height=110, wrap="word")
        self.txt_log.pack(fill="x", padx=10, pady=(4, 10))
        self._log("Choose a folder or ZIP to begin.")

    # --------- source selection ---------

    def _choose_folder(self) -> None:
        path = fd.askdirectory(title="Choose folder to index")
        if path:
            self._start_loading(mode="folder", source=path)

    def _choose_zip(self) -> None:
        path = fd.askopenfilename(
            title="Choose ZIP archive",
            filetypes=[("ZIP archives", "*.zip"), ("All files", "*.*")]
        )
        if path:
            self._start_loading(mode="zip", source=path)

    # --------- indexing pipeline (threaded) ---------

    def _start_loading(self, mode: str, source: str) -> None:
        if self._loading_thread and self._loading_thread.is_alive():
            mb.showinfo("Indexing", "A folder is already being indexed. Please wait.")
            return

        tag = "ZIP" if mode == "zip" else "Folder"
        self.lbl_source.configure(text=f"{tag}: {shorten_path(source)}")
        self._set_status(f"Indexing {tag.lower()}…")
        self.progress.start()

        case_sensitive = bool(self.chk_case.get())
        self._loading_thread = threading.Thread(
            target=self._load_worker, args=(mode, source, case_sensitive), daemon=True
        )
        self._loading_thread.start()

    def _load_worker(self, mode: str, source: str, case_sensitive: bool) -> None:
        tmpdir: Optional[str] = None
        try:
            root = source
            if mode == "zip":
                self.after(0, lambda: self._log(f"Extracting ZIP: {source}"))
                tmpdir = tempfile.mkdtemp(prefix="bloodhound_")
                safe_extract_zip(source, tmpdir)
                root = tmpdir

            # build a fresh engine; the current one keeps serving searches meanwhile
            eng = Engine()
            eng.build(root, exclusions=DEFAULT_EXCLUSIONS, case_sensitive=case_sensitive)
        except Exception as exc:
            if tmpdir:
                shutil.rmtree(tmpdir, ignore_errors=True)
            self.after(0, lambda e=exc: self._on_load_error(e))
            return

        self.after(0, lambda: self._on_load_ok(eng, tmpdir))

    def _on_load_ok(self, eng: Engine, tmpdir: Optional[str]) -> None:
        self.progress.stop()
        self._cleanup_tmpdir()
        self._tmpdir_path = tmpdir
        self._engine = eng
        self._set_status(f"Indexed {eng.count():,} files.")
        self._log(f"Index ready ({eng.count()} files).")
        self.entry_query.focus_set()
        self._do_search()

    def _on_load_error(self, exc: Exception) -> None:
        self.progress.stop()
        self._set_status("Error while indexing.")
        self._log(f"ERROR: {exc!r}")
        mb.showerror("Index error", "Failed to index the source.\nSee event log for details.")

    # --------- search ---------

    def _on_query_changed(self, _ev=None) -> None:
        # debounce for smoother typing
        if self._search_after_id is not None:
            self.after_cancel(self._search_after_id)
        self._search_after_id = self.after(120, self._do_search)

    def _do_search(self) -> None:
        self._search_after_id = None
        q = self.entry_query.get()
        if not q:
            self._set_results("")
            return
        if self._engine is None:
            self._set_results("error: please choose a folder before searching.")
            return

        rows = self._engine.search(q, top_k=TOP_K)
        if not rows:
            self._set_results("(no matches)")
            return
        self._set_results("\n".join(format_result(i, r) for i, r in enumerate(rows, 1)))

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

    # --------- lifecycle ---------

    def _cleanup_tmpdir(self) -> None:
        if self._tmpdir_path and os.path.isdir(self._tmpdir_path):
            try:
                shutil.rmtree(self._tmpdir_path, ignore_errors=True)
            finally:
                self._tmpdir_path = None

    def _on_close(self) -> None:
        self._cleanup_tmpdir()
        self.destroy()


if __name__ == "__main__":
    app = FileFinderApp()
    app.mainloop()
