"""Unit tests for utility functions (cd_engine.utils).

Tests cover:
- slugify (lowercasing, whitespace runs, idempotence)
- to_pascal
- split_columns
- Rich output helpers (print_success, print_error, print_summary_table)
"""

from __future__ import annotations

import pytest

from cd_engine.utils import (
    print_error,
    print_success,
    print_summary_table,
    slugify,
    split_columns,
    to_pascal,
)


# ---------------------------------------------------------------------------
# slugify
# ---------------------------------------------------------------------------


class TestSlugify:
    @pytest.mark.unit
    def test_two_words(self):
        assert slugify("Free Zone") == "free-zone"

    @pytest.mark.unit
    def test_whitespace_run_becomes_single_hyphen(self):
        assert slugify("Order \t  History") == "order-history"

    @pytest.mark.unit
    def test_newline_counts_as_whitespace(self):
        assert slugify("Line\nItems") == "line-items"

    @pytest.mark.unit
    def test_other_characters_untouched(self):
        assert slugify("User_Roles & Rights") == "user_roles-&-rights"

    @pytest.mark.unit
    def test_existing_hyphens_kept(self):
        assert slugify("Check-In Desk") == "check-in-desk"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "title",
        ["Free Zone", "  Padded  Title ", "ALL CAPS", "single", "a\tb\nc", ""],
    )
    def test_idempotent(self, title):
        once = slugify(title)
        assert slugify(once) == once


# ---------------------------------------------------------------------------
# to_pascal
# ---------------------------------------------------------------------------


class TestToPascal:
    @pytest.mark.unit
    def test_hyphenated(self):
        assert to_pascal("free-zone") == "FreeZone"

    @pytest.mark.unit
    def test_single_word(self):
        assert to_pascal("orders") == "Orders"

    @pytest.mark.unit
    def test_empty_segments_dropped(self):
        assert to_pascal("-free--zone-") == "FreeZone"

    @pytest.mark.unit
    def test_rest_of_segment_preserved(self):
        assert to_pascal("user_roles") == "User_roles"


# ---------------------------------------------------------------------------
# split_columns
# ---------------------------------------------------------------------------


class TestSplitColumns:
    @pytest.mark.unit
    def test_trims_each_name(self):
        assert split_columns("Name, Age, Address") == ["Name", "Age", "Address"]

    @pytest.mark.unit
    def test_none_and_empty(self):
        assert split_columns(None) == []
        assert split_columns("") == []

    @pytest.mark.unit
    def test_blank_entries_dropped(self):
        assert split_columns("Name, , Age,") == ["Name", "Age"]

    @pytest.mark.unit
    def test_order_preserved(self):
        assert split_columns("c,b,a") == ["c", "b", "a"]


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


class TestOutputHelpers:
    @pytest.mark.unit
    def test_print_success_goes_to_stdout(self, capsys):
        print_success("All good")
        captured = capsys.readouterr()
        assert "All good" in captured.out
        assert captured.err == ""

    @pytest.mark.unit
    def test_print_error_goes_to_stderr(self, capsys):
        print_error("Broken")
        captured = capsys.readouterr()
        assert "Broken" in captured.err
        assert captured.out == ""

    @pytest.mark.unit
    def test_markup_in_message_is_escaped(self, capsys):
        print_error("bad [bold]thing[/bold]")
        assert "[bold]thing[/bold]" in capsys.readouterr().err

    @pytest.mark.unit
    def test_print_summary_table(self, capsys):
        print_summary_table({"a.html": "x"}, title="Files")
        out = capsys.readouterr().out
        assert "Files" in out
        assert "a.html" in out

    @pytest.mark.unit
    def test_long_message_not_wrapped(self, capsys):
        message = "Component generated successfully: /" + "/".join(["segment" * 8] * 4)
        print_success(message)
        print_error(message)
        captured = capsys.readouterr()
        assert message in captured.out
        assert message in captured.err
