"""
Tests for the error taxonomy and its diagnostic formatter.

Tests error classes in isolation. No external dependencies or IO required.
"""

import pytest

from repobadge.domain.errors import (
    BRANCH_NOT_FOUND_MESSAGE,
    BadgeError,
    BranchNotFoundError,
    ClientError,
    Error,
    ErrorKind,
    GitError,
    InternalError,
    IoError,
    ParseError,
    SerialError,
    WrappedError,
)


class TestErrorKind:
    """Tests for the closed set of variants."""

    def test_exactly_eight_variants(self) -> None:
        """The taxonomy has one kind per failure source."""
        assert [kind.value for kind in ErrorKind] == [
            "Badge",
            "Client",
            "Git",
            "Internal",
            "Io",
            "Parse",
            "Serial",
            "BranchNotFound",
        ]

    @pytest.mark.parametrize(
        ("error", "kind"),
        [
            (BadgeError("x"), ErrorKind.BADGE),
            (ClientError(RuntimeError("x")), ErrorKind.CLIENT),
            (GitError(RuntimeError("x")), ErrorKind.GIT),
            (InternalError(), ErrorKind.INTERNAL),
            (IoError(OSError("x")), ErrorKind.IO),
            (ParseError(ValueError("x")), ErrorKind.PARSE),
            (SerialError(ValueError("x")), ErrorKind.SERIAL),
            (BranchNotFoundError(), ErrorKind.BRANCH_NOT_FOUND),
        ],
    )
    def test_each_variant_has_its_kind(self, error: Error, kind: ErrorKind) -> None:
        """Every concrete error reports the matching kind."""
        assert error.kind is kind
        assert isinstance(error, Error)


class TestDiagnosticFormat:
    """Tests for str(error)."""

    def test_badge_format(self) -> None:
        """Badge errors render their message verbatim."""
        assert str(BadgeError("bad format")) == "Badge(bad format)"

    def test_wrapped_error_renders_upstream_text(self) -> None:
        """Wrapping variants render the upstream exception's own text."""
        source = FileNotFoundError(2, "No such file or directory", "/srv/repos/x")
        assert str(IoError(source)) == f"Io({source})"

    def test_nested_error_formats_recursively(self) -> None:
        """An upstream error that is itself an Error renders its own form."""
        assert str(GitError(BadgeError("inner"))) == "Git(Badge(inner))"

    def test_internal_has_empty_detail(self) -> None:
        """Internal carries no payload."""
        assert str(InternalError()) == "Internal()"

    def test_branch_not_found_uses_fixed_sentence(self) -> None:
        """BranchNotFound renders a fixed sentence."""
        assert str(BranchNotFoundError()) == f"BranchNotFound({BRANCH_NOT_FOUND_MESSAGE})"


class TestWrappedErrors:
    """Tests for lossless wrapping."""

    def test_source_is_kept(self) -> None:
        """The original upstream exception is preserved."""
        source = ValueError("invalid literal for int() with base 10: 'abc'")
        error = ParseError(source)
        assert error.source is source
        assert error.__cause__ is source

    def test_raised_error_chains_to_source(self) -> None:
        """Raising a wrapped error keeps the upstream exception as cause."""
        source = OSError("disk on fire")
        with pytest.raises(IoError) as info:
            raise IoError(source)
        assert info.value.__cause__ is source

    def test_repr_includes_upstream_repr(self) -> None:
        """Debug form shows the variant and the wrapped exception."""
        assert repr(SerialError(ValueError("x"))) == "SerialError(ValueError('x'))"
        assert repr(BadgeError("bad")) == "BadgeError('bad')"
        assert repr(BranchNotFoundError()) == "BranchNotFoundError()"


class TestAbstractBases:
    """The taxonomy is closed; only concrete variants can be built."""

    def test_base_error_rejected(self) -> None:
        with pytest.raises(TypeError):
            Error("x")

    def test_wrapped_base_rejected(self) -> None:
        with pytest.raises(TypeError):
            WrappedError(OSError("y"))

    def test_subclass_without_kind_rejected(self) -> None:
        class Unclassified(Error):
            pass

        with pytest.raises(TypeError):
            Unclassified()
