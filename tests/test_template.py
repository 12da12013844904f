"""Tests for runtime/template.py - @token:default substitution.

Python 3.13+.
"""

from __future__ import annotations

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from localestrings import LocaleContext
from localestrings.runtime.template import resolve_template

TABLE = {
    "greet": "howdy",
    "name": "Ada",
    "a:b": "colon id",
}


def lookup(token: str, default: str | None) -> str:
    """Dictionary-backed resolver mirroring LocaleContext semantics."""
    if token in TABLE:
        return TABLE[token]
    if default is not None:
        return default
    return f"%$$>{token}<$$%"


# ============================================================================
# Grammar
# ============================================================================


class TestResolveTemplate:
    """Test reference resolution."""

    def test_reference_with_default_present(self) -> None:
        """A present token ignores its default."""
        assert resolve_template("@greet:hi there", lookup) == "howdy"

    def test_reference_with_default_missing(self) -> None:
        """A missing token yields its default."""
        assert resolve_template("@missing:hi there", lookup) == "hi there"

    def test_bare_reference(self) -> None:
        """A bare token resolves without a default."""
        assert resolve_template("@greet", lookup) == "howdy"

    def test_bare_missing_reference_is_decorated(self) -> None:
        """A bare missing token renders the decorated placeholder."""
        assert resolve_template("@no.such.id", lookup) == "%$$>no.such.id<$$%"

    def test_literal_prefix(self) -> None:
        """Text before the first reference is kept."""
        assert resolve_template("Say @greet:", lookup) == "Say howdy"

    def test_adjacent_references_with_spacing(self) -> None:
        """Trailing spaces of a default become a separator."""
        assert resolve_template("@greet: @name:friend", lookup) == "howdy Ada"
        assert resolve_template("@greet: @missing:friend", lookup) == "howdy friend"

    def test_bare_token_trailing_space(self) -> None:
        """Trailing spaces after a bare token are kept as a separator."""
        assert resolve_template("@greet @name", lookup) == "howdy Ada"

    def test_default_trailing_space_preserved(self) -> None:
        """Every trailing space of a default survives."""
        assert resolve_template("@missing:hi  @name", lookup) == "hi  Ada"

    def test_empty_default(self) -> None:
        """An empty default is still a default."""
        assert resolve_template("@missing:", lookup) == ""

    def test_lone_marker_at_end_is_literal(self) -> None:
        """A trailing '@' with nothing after it is literal."""
        assert resolve_template("email@", lookup) == "email@"

    def test_lookup_receives_default_or_none(self) -> None:
        """The resolver sees None for bare tokens and text for defaults."""
        calls: list[tuple[str, str | None]] = []

        def recording(token: str, default: str | None) -> str:
            calls.append((token, default))
            return "x"

        resolve_template("@a @b:c", recording)

        assert calls == [("a", None), ("b", "c")]


class TestEscapes:
    """Test @@ and :: escapes."""

    def test_escapes_only(self) -> None:
        """Escaped delimiters become literals without any lookup."""
        assert resolve_template("@@literal::value", lookup) == "@literal:value"

    def test_escaped_marker_in_text(self) -> None:
        """'@@' in running text is a literal '@'."""
        assert resolve_template("mail me @@ home", lookup) == "mail me @ home"

    def test_escaped_separator_in_default(self) -> None:
        """'::' inside a default is a literal ':'."""
        assert resolve_template("@missing:10::30", lookup) == "10:30"

    def test_escaped_separator_in_token(self) -> None:
        """'::' inside a token is part of the identifier."""
        assert resolve_template("@a::b", lookup) == "colon id"

    def test_escaped_marker_in_default(self) -> None:
        """'@@' inside a default is a literal '@'."""
        assert resolve_template("@missing:me@@example.org", lookup) == "me@example.org"

    def test_no_marker_leaves_colons_alone(self) -> None:
        """Without any '@' the text is returned as is, '::' included."""
        assert resolve_template("a::b", lookup) == "a::b"


# ============================================================================
# Properties
# ============================================================================

# Excludes the private-use sentinels used for escapes.
SAFE_TEXT = st.text(
    alphabet=st.characters(blacklist_categories=("Cs", "Co")), max_size=40
)


class TestTemplateProperties:
    """Property-based tests for the template engine."""

    @given(SAFE_TEXT.filter(lambda s: "@" not in s))
    def test_fast_path_is_identity(self, text: str) -> None:
        """Strings without '@' come back unchanged and trigger no lookup."""

        def failing(token: str, default: str | None) -> str:
            pytest.fail(f"unexpected lookup of {token!r}")

        event(f"has_colon={':' in text}")
        assert resolve_template(text, failing) == text

    @given(SAFE_TEXT.filter(lambda s: "@" not in s and ":" not in s))
    def test_escaped_text_round_trips(self, text: str) -> None:
        """Doubling every delimiter yields the original text back."""
        escaped = "@@" + text.replace("x", "::") + "@@"

        assert resolve_template(escaped, lookup) == "@" + text.replace("x", ":") + "@"

    @given(st.sampled_from(sorted(TABLE)).filter(lambda k: ":" not in k), SAFE_TEXT)
    def test_present_token_ignores_default(self, token: str, default: str) -> None:
        """A present identifier always wins over any default text."""
        default = default.replace("@", "").replace(":", "").rstrip(" ")

        assert resolve_template(f"@{token}:{default}", lookup) == TABLE[token]


# ============================================================================
# LocaleContext integration
# ============================================================================


class TestContextTemplates:
    """Test template resolution through a LocaleContext."""

    def test_against_active_table(self, ctx: LocaleContext) -> None:
        """References resolve against the active locale."""
        assert ctx.resolve_template("@test.greeting:hi there") == "howdy dude"
        ctx.set_locale("en-GB")
        assert ctx.resolve_template("@test.greeting:hi there") == "hello, bloke"

    def test_missing_uses_default(self, ctx: LocaleContext) -> None:
        """A missing identifier yields the default."""
        assert ctx.resolve_template("@greet:hi there") == "hi there"

    def test_table_value_is_not_reexpanded(self, ctx: LocaleContext) -> None:
        """Resolved values are inserted verbatim."""
        assert ctx.resolve_template("@test.template") == "@test.greeting: @test.name:friend"

    def test_template_from_table(self, ctx: LocaleContext) -> None:
        """Templates stored in a table resolve like any other text."""
        template = ctx.get_locale_string("test.template")

        assert ctx.resolve_template(template) == "howdy dude friend"

    def test_no_missing_warnings(
        self, ctx: LocaleContext, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Template lookups never log missing-string warnings."""
        with caplog.at_level("WARNING", logger="localestrings.localization.context"):
            assert ctx.resolve_template("@no.such.id") == "%$$>no.such.id<$$%"

        assert caplog.records == []
