"""Tests for utility modules: logger and StringBuilder."""

import logging

from markwalk.stringbuilder import StringBuilder
from markwalk.utils import get_logger


class TestGetLogger:
    def test_prefixes_name(self) -> None:
        assert get_logger("mymodule").name == "markwalk.mymodule"

    def test_keeps_package_names(self) -> None:
        assert get_logger("markwalk.renderers.html").name == "markwalk.renderers.html"
        assert get_logger("markwalk").name == "markwalk"

    def test_returns_stdlib_logger(self) -> None:
        assert isinstance(get_logger("x"), logging.Logger)


class TestStringBuilder:
    def test_build_joins_parts(self) -> None:
        sb = StringBuilder()
        sb.append("<p>").append("Hello").append("</p>")
        assert sb.build() == "<p>Hello</p>"

    def test_last_starts_as_newline(self) -> None:
        assert StringBuilder().last == "\n"

    def test_last_tracks_appended_chunk(self) -> None:
        sb = StringBuilder()
        sb.append("a").append("bc")
        assert sb.last == "bc"

    def test_empty_append_updates_last(self) -> None:
        sb = StringBuilder()
        sb.append("a").cr()
        sb.append("")
        sb.cr()
        assert sb.build() == "a\n\n"

    def test_cr_idempotent(self) -> None:
        sb = StringBuilder()
        sb.append("x")
        sb.cr().cr().cr()
        assert sb.build() == "x\n"

    def test_leading_cr_noop(self) -> None:
        sb = StringBuilder()
        sb.cr()
        assert sb.build() == ""

    def test_empty_append_becomes_last(self) -> None:
        sb = StringBuilder()
        sb.append("a").append("").append("b")
        assert sb.build() == "ab"
        sb.append("")
        assert sb.last == ""
        sb.cr()
        assert sb.build() == "ab\n"
