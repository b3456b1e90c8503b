"""Unit tests for markup stripping."""

import pytest

from projectlink.util.sanitize import strip_markup


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("plain text", "plain text"),
        ("  padded  ", "padded"),
        ("<b>bold</b> move", "bold move"),
        ("<script>alert('x')</script>after", "after"),
        ("<SCRIPT type='text/javascript'>x()</SCRIPT>ok", "ok"),
        ("<style>body{}</style>styled", "styled"),
        ("see javascript:alert(1)", "see alert(1)"),
        ("a < b and c > d", "a < b and c > d"),
        ("<img src=x onerror=alert(1)>", ""),
        ("<<b>script>alert(1)<</b>/script>", ""),
        ("jajavascript:vascript:alert(1)", "alert(1)"),
    ],
)
def test_strip_markup(raw, expected):
    assert strip_markup(raw) == expected


def test_multiline_script_block():
    raw = "before<script>\nvar a = 1;\n</script>after"

    assert strip_markup(raw) == "beforeafter"
