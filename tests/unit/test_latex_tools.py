"""Unit tests for LaTeX escaping helpers."""

import pytest

from quill.utils.latex_tools import (
    ESCAPE_PASSES,
    UNTYPESETTABLE_PLACEHOLDER,
    NoEscape,
    escape_latex,
    escape_url,
    finalize_latex,
    has_bare_reserved_characters,
    is_typesettable,
    to_plaintext,
)


@pytest.mark.unit
class TestEscapeLatex:
    """Test escape_latex() conversions."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("&", r"\&"),
            ("%", r"\%"),
            ("$", r"\$"),
            ("#", r"\#"),
            ("_", r"\_"),
            ("{", r"\{"),
            ("}", r"\}"),
            ("~", r"\textasciitilde{}"),
            ("^", r"\textasciicircum{}"),
            ("\\", r"\textbackslash{}"),
        ],
    )
    def test_single_reserved_character(self, raw, expected):
        """Each reserved character maps to its literal form."""
        assert escape_latex(raw) == expected

    def test_plain_text_unchanged(self):
        """Text without reserved characters passes through."""
        assert escape_latex("Senior Engineer, 2021") == "Senior Engineer, 2021"

    def test_empty_string(self):
        assert escape_latex("") == ""

    def test_backslash_braces_not_reescaped(self):
        """The braces of \\textbackslash{} are never escaped themselves."""
        assert escape_latex("C:\\temp") == r"C:\textbackslash{}temp"
        assert escape_latex("\\{") == r"\textbackslash{}\{"

    def test_tilde_and_caret_braces_kept(self):
        assert escape_latex("~^") == r"\textasciitilde{}\textasciicircum{}"

    def test_mixed_sentence(self):
        assert escape_latex("R&D: 100% of $5 #1") == r"R\&D: 100\% of \$5 \#1"

    def test_unicode_kept(self):
        """Latin letters and common typographic punctuation are kept."""
        assert escape_latex("Zoë Müller, São Paulo") == "Zoë Müller, São Paulo"
        assert escape_latex("Łódź – “Żółć” … 5 €") == "Łódź – “Żółć” … 5 €"

    @pytest.mark.parametrize("char", ["→", "🚀", "李", "Ω", "✓"])
    def test_untypesettable_replaced(self, char):
        """Characters the fonts cannot set become the placeholder, never fatal."""
        assert escape_latex(f"a {char} b") == f"a {UNTYPESETTABLE_PLACEHOLDER} b"
        assert not is_typesettable(char)

    def test_untypesettable_next_to_reserved(self):
        assert escape_latex("R&D 🚀_x") == r"R\&D ?\_x"

    def test_control_characters_dropped(self):
        """Control characters other than newline/CR/tab are dropped, never fatal."""
        assert escape_latex("a\x00b\x07c") == "abc"
        assert escape_latex("a\nb\tc\r") == "a\nb\tc\r"

    def test_lone_surrogate_dropped(self):
        assert escape_latex("a\ud800b") == "ab"

    def test_not_idempotent(self):
        """Escaping escaped text escapes it again."""
        once = escape_latex("Tom & Jerry")
        twice = escape_latex(once)
        assert once == r"Tom \& Jerry"
        assert twice != once
        assert twice == r"Tom \textbackslash{}\& Jerry"

    @pytest.mark.parametrize("raw", ["&", "a_b", "50%", "{x}", "~", "^", "\\"])
    def test_double_escape_differs_for_any_reserved(self, raw):
        assert escape_latex(escape_latex(raw)) != escape_latex(raw)

    def test_no_bare_reserved_characters_in_output(self):
        raw = "a & b % c $ d # e _ f { g } h ~ i ^ j \\ k"
        assert not has_bare_reserved_characters(escape_latex(raw))

    def test_pass_order(self):
        """Backslashes are parked before punctuation and restored last."""
        names = [name for name, _ in ESCAPE_PASSES]
        assert names[:2] == ["drop_unrepresentable", "replace_untypesettable"]
        assert names.index("park_backslashes") < names.index("escape_reserved_punctuation")
        assert names.index("escape_reserved_punctuation") < names.index("spell_out_operators")
        assert names[-1] == "restore_backslashes"


@pytest.mark.unit
class TestToPlaintext:
    """Test to_plaintext() reverses escape_latex()."""

    @pytest.mark.parametrize(
        "raw",
        [
            "plain",
            "Tom & Jerry",
            "C:\\Users\\{name}",
            "100% ~ 5^2 #1 $x_y",
            "\\textbackslash{}",
        ],
    )
    def test_reverses_escape(self, raw):
        assert to_plaintext(escape_latex(raw)) == raw

    def test_empty(self):
        assert to_plaintext("") == ""

    def test_unknown_commands_untouched(self):
        assert to_plaintext(r"\textbf{x}") == r"\textbf{x}"


@pytest.mark.unit
class TestFinalizeLatex:
    """Test the Jinja2 finalize hook."""

    def test_escapes_plain_strings(self):
        assert finalize_latex("a_b") == r"a\_b"

    def test_no_escape_passes_through(self):
        value = NoEscape(r"\section{Skills}")
        assert finalize_latex(value) == r"\section{Skills}"

    def test_none_becomes_empty(self):
        assert finalize_latex(None) == ""

    def test_non_strings_converted(self):
        assert finalize_latex(2021) == "2021"


@pytest.mark.unit
def test_has_bare_reserved_characters():
    """Detects reserved characters outside escape sequences."""
    assert has_bare_reserved_characters("50%")
    assert has_bare_reserved_characters("a_b")
    assert not has_bare_reserved_characters(r"50\% and \textasciitilde{}")


@pytest.mark.unit
class TestEscapeUrl:
    """Test escape_url() for \\href targets."""

    def test_tilde_and_underscore_literal(self):
        assert escape_url("https://jo.dev/~home/a_b") == "https://jo.dev/~home/a_b"

    def test_percent_and_hash_escaped(self):
        assert escape_url("https://x.dev/50%25#top") == r"https://x.dev/50\%25\#top"

    def test_unsafe_characters_percent_encoded(self):
        assert escape_url("https://x.dev/a b{c}\\d") == r"https://x.dev/a\%20b\%7Bc\%7D\%5Cd"

    def test_non_ascii_percent_encoded(self):
        assert escape_url("https://x.dev/é") == r"https://x.dev/\%C3\%A9"

    def test_returns_no_escape(self):
        assert isinstance(escape_url("https://x.dev"), NoEscape)
        assert escape_url("") == ""
