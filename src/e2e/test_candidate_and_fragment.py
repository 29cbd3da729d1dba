from pathlib import PurePosixPath, PureWindowsPath

import pytest

from bloodhound.models import Fragment, ScoredResult
from bloodhound.normalize import make_candidate, index_positions, match_key, display_text


def test_next_index_returns_initial_index_plus_length():
    assert Fragment(10).next_index() == 11


def test_extend_increments_next_index_value():
    fragment = Fragment(10)
    fragment.extend()
    assert fragment.length == 2
    assert fragment.next_index() == 12


def test_position_index_lists_ascending_offsets_per_char():
    assert index_positions("hound.rs.hound") == {
        "h": (0, 9), "o": (1, 10), "u": (2, 11), "n": (3, 12), "d": (4, 13),
        ".": (5, 8), "r": (6,), "s": (7,),
    }


def test_empty_path_builds_empty_candidate():
    c = make_candidate("", case_sensitive=False)
    assert c.path == "" and c.key == "" and dict(c.positions) == {}


def test_case_insensitive_candidate_folds_key_but_not_display():
    c = make_candidate("Src/Hound.RS", case_sensitive=False)
    assert c.display == "Src/Hound.RS"
    assert c.key == "src/hound.rs"
    assert "H" not in c.positions and c.positions["h"] == (4,)


def test_case_sensitive_candidate_keeps_key():
    c = make_candidate("Houndfile", case_sensitive=True)
    assert c.key == "Houndfile"
    assert c.positions["H"] == (0,)


def test_match_key_uses_casefold():
    assert match_key("Straße", False) == "strasse"
    assert match_key("Straße", True) == "Straße"


def test_position_index_is_read_only():
    c = make_candidate("abc", case_sensitive=True)
    with pytest.raises(TypeError):
        c.positions["z"] = (0,)  # type: ignore[index]


def test_path_objects_are_displayed_with_forward_slashes():
    assert display_text(PureWindowsPath("directory\\nested_file")) == "directory/nested_file"
    c = make_candidate(PurePosixPath("directory/nested_file"), case_sensitive=True)
    assert c.path == "directory/nested_file"
    assert c.as_path() == PurePosixPath("directory/nested_file")


def test_scored_result_to_dict():
    c = make_candidate("lib.rs", case_sensitive=True)
    r = ScoredResult(c, 0.5)
    assert r.path == "lib.rs"
    assert r.to_dict() == {"path": "lib.rs", "score": 0.5}
