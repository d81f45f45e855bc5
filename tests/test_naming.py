"""Tests for qualified names, option ids and label truncation."""

from formflow.naming import (
    option_id,
    placeholder_name,
    qualified_name,
    sanitize_name,
    truncate_label,
)


class TestSanitizeName:

    def test_plain_name_unchanged(self):
        assert sanitize_name("email") == "email"

    def test_whitespace_runs_collapse(self):
        assert sanitize_name("first   name") == "first_name"
        assert sanitize_name("a\tb\nc") == "a_b_c"

    def test_case_preserved(self):
        assert sanitize_name("Full Name") == "Full_Name"


class TestQualifiedName:

    def test_format(self):
        assert qualified_name("s1", "email", 0) == "s1_email_0"

    def test_sanitizes_name(self):
        assert qualified_name("contact", "full name", 2) == "contact_full_name_2"

    def test_index_disambiguates_duplicates(self):
        assert qualified_name("s1", "x", 0) != qualified_name("s1", "x", 1)

    def test_screen_disambiguates_duplicates(self):
        assert qualified_name("s1", "x", 0) != qualified_name("s2", "x", 0)

    def test_placeholder(self):
        assert placeholder_name(3) == "unnamed_3"


class TestOptionId:

    def test_lowercases_and_sanitizes(self):
        assert option_id(1, "Not Sure") == "1_not_sure"

    def test_index_prefix(self):
        assert option_id(0, "Yes") == "0_yes"


class TestTruncateLabel:

    def test_long_label_cut_to_twenty(self):
        label = "abcdefghijklmnopqrstuvwxy"
        assert len(label) == 25
        assert truncate_label(label) == "abcdefghijklmnopqrst"

    def test_exactly_twenty_unchanged(self):
        label = "a" * 20
        assert truncate_label(label) == label

    def test_short_label_unchanged(self):
        assert truncate_label("Email") == "Email"

    def test_none_passes_through(self):
        assert truncate_label(None) is None
