import zipfile
from pathlib import Path
import pytest

# The desktop picker needs Tk; skip cleanly where it is not available.
app = pytest.importorskip("app", reason="customtkinter/tkinter not available")

from bloodhound.normalize import make_candidate
from bloodhound.models import ScoredResult


def test_shorten_path_keeps_short_paths():
    assert app.shorten_path("src/hound.rs") == "src/hound.rs"


def test_shorten_path_elides_the_middle():
    p = "a" * 40 + "/" + "b" * 40
    out = app.shorten_path(p, max_chars=20)
    assert "..." in out and out.startswith("a") and out.endswith("b")
    assert len(out) < len(p)


def test_safe_extract_zip_extracts_members(tmp_path: Path):
    zpath = tmp_path / "src.zip"
    with zipfile.ZipFile(zpath, "w") as zf:
        zf.writestr("pkg/hound.rs", "")
    dest = tmp_path / "out"; dest.mkdir()
    app.safe_extract_zip(str(zpath), str(dest))
    assert (dest / "pkg" / "hound.rs").exists()


def test_safe_extract_zip_rejects_traversal(tmp_path: Path):
    zpath = tmp_path / "evil.zip"
    with zipfile.ZipFile(zpath, "w") as zf:
        zf.writestr("../escape.txt", "x")
    dest = tmp_path / "out"; dest.mkdir()
    with pytest.raises(RuntimeError):
        app.safe_extract_zip(str(zpath), str(dest))
    assert not (tmp_path / "escape.txt").exists()


def test_format_result():
    r = ScoredResult(make_candidate("src/hound.rs", False), 2.0833)
    assert app.format_result(1, r) == " 1.   2.083  src/hound.rs"
