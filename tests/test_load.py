import collections
import os.path

import pytest

from lazyholder.load import ImportFromStringError, import_from_string, lazy_import


def test_resolves_nested_attributes() -> None:
    assert import_from_string("os:path.join") is os.path.join


def test_non_strings_pass_through() -> None:
    assert import_from_string(dict) is dict


@pytest.mark.parametrize(
    ("import_str", "message"),
    [
        ("collections", "expected"),
        ("lazyholder_missing_module:thing", "no module named"),
        ("collections:Nope", "has no attribute path"),
    ],
)
def test_errors(import_str: str, message: str) -> None:
    with pytest.raises(ImportFromStringError, match=message) as exc_info:
        import_from_string(import_str)
    assert exc_info.value.import_str == import_str


def test_lazy_import_caches() -> None:
    assert lazy_import("collections:deque") is collections.deque
    assert lazy_import("collections:deque") is collections.deque


def test_trailing_colon_is_rejected() -> None:
    with pytest.raises(ImportFromStringError, match="expected"):
        import_from_string("collections:")
