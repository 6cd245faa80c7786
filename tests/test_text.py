from pathlib import Path

import pytest

from lyricbar.text import alpha_digitize, cache_filename


def test_cache_filename_replaces_slashes():
    path = cache_filename(Path("/c"), "AC/DC", "Back/In/Black")
    assert path == Path("/c/AC_DC-Back_In_Black")
    assert path.parent == Path("/c")


def test_cache_filename_keeps_other_characters():
    assert cache_filename(Path("/c"), "Sigur Rós", "Hoppípolla?").name == "Sigur Rós-Hoppípolla?"


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Guns N' Roses", "GunsNRoses"),
        ("don't stop (remastered 2011)", "dontstopremastered2011"),
        ("Sigur Rós", "SigurRós"),
        ("Кино", "Кино"),
        ("!!!", ""),
        ("", ""),
    ],
)
def test_alpha_digitize(value, expected):
    assert alpha_digitize(value) == expected


def test_alpha_digitize_is_idempotent():
    s = "AC/DC - T.N.T. (Live '79) [Bonus]"
    once = alpha_digitize(s)
    assert alpha_digitize(once) == once
    assert all(c.isalnum() for c in once)
