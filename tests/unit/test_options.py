from __future__ import annotations

from pathlib import Path

import pytest

from wrapit.options import flag_name, render_option, render_options


def test_single_character_boolean_renders_one_dash():
    assert render_option("x", True) == "-x"
    assert render_option("x", False) is None


def test_multi_character_boolean_renders_two_dashes():
    assert render_option("force", True) == "--force"
    assert render_option("force", False) is None


def test_value_option_replaces_underscores():
    assert render_option("resource_dir", "/usr/lib") == "--resource-dir=/usr/lib"


def test_single_character_value_option():
    assert render_option("o", "out.cxx") == "-o=out.cxx"


def test_non_string_values_are_stringified():
    assert render_option("jobs", 4) == "--jobs=4"
    assert render_option("output_prefix", Path("/tmp/out")) == "--output-prefix=/tmp/out"
    assert render_option("ratio", 0.5) == "--ratio=0.5"


def test_integer_zero_and_one_are_values_not_flags():
    assert render_option("level", 0) == "--level=0"
    assert render_option("level", 1) == "--level=1"


def test_render_options_keeps_order_and_drops_false_and_returncode():
    rendered = render_options(
        [("force", True), ("returncode", True), ("v", False), ("resource_dir", "/usr/lib"), ("x", True)]
    )
    assert rendered == ["--force", "--resource-dir=/usr/lib", "-x"]


def test_render_options_accepts_mapping():
    assert render_options({"help": True, "add_headers": "a.h"}) == ["--help", "--add-headers=a.h"]


def test_empty_option_name_is_rejected():
    with pytest.raises(ValueError):
        flag_name("")
