"""
Tests for input sanitization utilities
"""

from coil.utils.sanitize import filter_nohtml, sanitize_text_field


class TestSanitizeTextField:
    def test_plain_value_unchanged(self):
        assert sanitize_text_field("gate-all") == "gate-all"

    def test_strips_tags(self):
        assert sanitize_text_field("<b>gate</b>-all") == "gate-all"

    def test_drops_script_and_style_contents(self):
        assert sanitize_text_field("<script>alert(1)</script>no") == "no"
        assert sanitize_text_field("<STYLE type=\"text/css\">p { color: red }</style>no-gating") == "no-gating"

    def test_ampersand_is_not_encoded(self):
        assert sanitize_text_field("Tom & Jerry") == "Tom & Jerry"

    def test_collapses_whitespace(self):
        assert sanitize_text_field("  no-gating \n\t ") == "no-gating"
        assert sanitize_text_field("a   b\nc") == "a b c"

    def test_removes_percent_octets(self):
        assert sanitize_text_field("gate%20all") == "gateall"

    def test_none_and_empty(self):
        assert sanitize_text_field(None) == ""
        assert sanitize_text_field("") == ""


class TestFilterNohtml:
    def test_strips_tags_keeps_line_breaks(self):
        assert filter_nohtml("<p>Line one</p>\nLine <em>two</em>") == "Line one\nLine two"

    def test_plain_text_unchanged(self):
        assert filter_nohtml("Verifying Web Monetization status. Please wait...") == (
            "Verifying Web Monetization status. Please wait..."
        )

    def test_none(self):
        assert filter_nohtml(None) == ""

    def test_ampersand_stored_as_plain_text(self):
        assert filter_nohtml("Tom & Jerry") == "Tom & Jerry"
        assert filter_nohtml("a < b") == "a < b"

    def test_drops_script_contents(self):
        assert filter_nohtml("Before<script>\nsteal()\n</script>\nAfter") == "Before\nAfter"
