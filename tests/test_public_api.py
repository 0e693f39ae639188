"""Tests for the top-level package exports."""
import arrayforge
from arrayforge import InvalidArgumentError


def test_all_names_are_importable():
    """Verify every name in __all__ exists on the package."""
    for name in arrayforge.__all__:
        assert hasattr(arrayforge, name), name


def test_version_is_a_string():
    """Verify __version__ is always defined."""
    assert isinstance(arrayforge.__version__, str)
    assert arrayforge.__version__


def test_invalid_argument_error_matches_builtin_kinds():
    """Verify the error kind can be caught as TypeError or ValueError."""
    assert issubclass(InvalidArgumentError, TypeError)
    assert issubclass(InvalidArgumentError, ValueError)
