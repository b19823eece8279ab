from __future__ import annotations

import pytest

from gobake.core.naming import decl_name


def test_no_letters_gives_empty_identifier() -> None:
    assert decl_name("", True) == ""
    assert decl_name("123", False) == ""
    assert decl_name("./-_0", True) == ""


def test_dotted_path_name() -> None:
    assert decl_name(".config/cfg.XML", False) == "config_cfg_XML"
    assert decl_name(".config/cfg.XML", True) == "Config_cfg_XML"


def test_export_flag_only_touches_first_letter() -> None:
    assert decl_name("Logo", False) == "logo"
    assert decl_name("logoPNG", True) == "LogoPNG"
    assert decl_name("ABC", False) == "aBC"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("my-file..name", "my_file_name"),
        ("a1b", "a_b"),
        ("v2", "v_"),
        ("abc.", "abc_"),
        ("__init__", "init_"),
        ("9lives", "lives"),
        ("a - b", "a_b"),
    ],
)
def test_non_letter_runs_collapse(raw: str, expected: str) -> None:
    assert decl_name(raw, False) == expected


def test_unicode_letters_are_letters() -> None:
    assert decl_name("été", True) == "Été"
    assert decl_name("données-2024", False) == "données_"


def test_first_letter_case_maps_one_to_one() -> None:
    # multi-character case expansions would break the identifier
    assert decl_name("ßig", True) == "ßig"
    assert decl_name("İndex", False) == "İndex"
    assert decl_name("ﬁle", True) == "ﬁle"
    for raw in ("ßig", "İndex", "ﬁle"):
        for export in (True, False):
            assert all(ch.isalpha() or ch == "_" for ch in decl_name(raw, export))
