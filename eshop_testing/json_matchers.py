# eshop_testing/json_matchers.py
"""
Assertions over JSON text for tests.

A matcher takes the JSON text under test and returns a ``MatcherResult``.
``should`` / ``should_not`` turn a result into an ``AssertionError``; the
``should_*`` helpers below are shortcuts for the common cases.

``None`` means there is no JSON at all and is rendered as ``null`` in
messages, while the JSON text ``"null"`` is rendered quoted as ``'null'``.

Paths are JSONPath expressions (``$.ok``, ``$.products[0].name``). A path
holding JSON ``null`` counts as present: ``contain_json_key("$.stock")``
passes for ``{"stock": null}``. Use ``contain_json_key_value(path, None)``
to tell a null value apart from a missing key.
"""
import json
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any, Callable, Optional, Type, TypeVar, Union

from jsonpath_ng import parse as parse_path
from jsonpath_ng.exceptions import JsonPathLexerError, JsonPathParserError

Json = Optional[str]
JsonKey = str
T = TypeVar("T")

_ABBREVIATE_AT = 50
_MISSING = object()


@dataclass(frozen=True)
class MatcherResult:
    passed: bool
    failure_message: str
    negated_failure_message: str


Matcher = Callable[[Json], MatcherResult]


def should(value: Json, matcher: Matcher) -> None:
    result = matcher(value)
    if not result.passed:
        raise AssertionError(result.failure_message)


def should_not(value: Json, matcher: Matcher) -> None:
    result = matcher(value)
    if result.passed:
        raise AssertionError(result.negated_failure_message)


# =====================================================
# helpers
# =====================================================
def representation(value: Json) -> str:
    """Render JSON text for messages, keeping ``None`` apart from ``"null"``."""
    if value is None:
        return "null"
    return f"'{value}'"


def _abbreviate(value: Json) -> Json:
    if value is None:
        return None
    if len(value) < _ABBREVIATE_AT:
        return value.strip()
    return value[:_ABBREVIATE_AT].strip() + "..."


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not a JSON value")


def _decode(value: str) -> Any:
    try:
        return json.loads(value, parse_constant=_reject_constant)
    except ValueError as e:
        raise AssertionError(f"{representation(_abbreviate(value))} is not valid JSON: {e}") from e


def _encode(tree: Any) -> str:
    return json.dumps(tree, sort_keys=True, default=repr)


def _read(value: Json, path: JsonKey) -> Any:
    """Value located by ``path``, a list of values for several matches, ``_MISSING`` otherwise."""
    if value is None:
        return _MISSING
    tree = _decode(value)
    try:
        expression = parse_path(path)
    except (JsonPathLexerError, JsonPathParserError) as e:
        raise AssertionError(f"'{path}' is not a valid JSON path: {e}") from e
    try:
        found = expression.find(tree)
    except (KeyError, IndexError, TypeError):
        # an index applied to an object or a field applied to a scalar
        return _MISSING
    if not found:
        return _MISSING
    if len(found) == 1:
        return found[0].value
    return [datum.value for datum in found]


def json_equal(left: Any, right: Any) -> bool:
    """Structural equality of decoded JSON; ``1``, ``1.0``, ``true`` and ``"1"`` all differ."""
    if type(left) is not type(right):
        return False
    if isinstance(left, dict):
        return left.keys() == right.keys() and all(json_equal(left[k], right[k]) for k in left)
    if isinstance(left, list):
        return len(left) == len(right) and all(json_equal(a, b) for a, b in zip(left, right))
    return left == right


def _is_of_type(value: Any, expected_type: Type) -> bool:
    if isinstance(value, bool) and expected_type in (int, float):
        return False
    return isinstance(value, expected_type)


def _load_resource(resource: Union[str, Path], package: Optional[str]) -> str:
    if package is not None:
        return resources.files(package).joinpath(str(resource)).read_text(encoding="utf-8")
    return Path(resource).read_text(encoding="utf-8")


# =====================================================
# key-value pair count
# =====================================================
def contain_exactly_key_value_pairs(count: int) -> Matcher:
    def test(value: Json) -> MatcherResult:
        tree = _decode(value) if value is not None else _MISSING
        if isinstance(tree, dict):
            actual = len(tree)
            found = f"{actual} found"
        else:
            actual = None
            found = "it is not a JSON object"
        return MatcherResult(
            actual == count,
            f"JSON object {representation(_abbreviate(value))} should contain exactly {count} key-value pairs but {found}.",
            f"JSON object {representation(_abbreviate(value))} should not contain exactly {count} key-value pairs but {found}.",
        )

    return test


def should_contain_exactly(value: Json, count: int) -> None:
    should(value, contain_exactly_key_value_pairs(count))


def should_not_contain_exactly(value: Json, count: int) -> None:
    should_not(value, contain_exactly_key_value_pairs(count))


# =====================================================
# whole document
# =====================================================
def _match_trees(actual: Any, expected: Any) -> MatcherResult:
    if actual is _MISSING or expected is _MISSING:
        passed = actual is expected
    else:
        passed = json_equal(actual, expected)

    def render(tree):
        return "null" if tree is _MISSING else representation(_abbreviate(_encode(tree)))

    return MatcherResult(
        passed,
        f"expected: {render(expected)} but was: {render(actual)}",
        f"expected not to match with: {render(expected)} but match: {render(actual)}",
    )


def match_json(expected: Json) -> Matcher:
    def test(value: Json) -> MatcherResult:
        actual_tree = _decode(value) if value is not None else _MISSING
        expected_tree = _decode(expected) if expected is not None else _MISSING
        return _match_trees(actual_tree, expected_tree)

    return test


def should_match_json(value: Json, expected: Json) -> None:
    should(value, match_json(expected))


def should_not_match_json(value: Json, expected: Json) -> None:
    should_not(value, match_json(expected))


def match_json_resource(resource: Union[str, Path], package: Optional[str] = None) -> Matcher:
    """
    Compare with the JSON stored in ``resource``.

    ``resource`` is a file path, or a resource name inside ``package`` when
    one is given.
    """

    def test(value: Json) -> MatcherResult:
        actual_tree = _decode(value) if value is not None else _MISSING
        expected_tree = _decode(_load_resource(resource, package))
        return _match_trees(actual_tree, expected_tree)

    return test


def should_match_json_resource(value: Json, resource: Union[str, Path], package: Optional[str] = None) -> None:
    should(value, match_json_resource(resource, package))


def should_not_match_json_resource(value: Json, resource: Union[str, Path], package: Optional[str] = None) -> None:
    should_not(value, match_json_resource(resource, package))


# =====================================================
# keys and values
# =====================================================
def contain_json_key(path: JsonKey) -> Matcher:
    def test(value: Json) -> MatcherResult:
        sub = _abbreviate(value)
        return MatcherResult(
            _read(value, path) is not _MISSING,
            f"{representation(sub)} should contain the path '{path}'",
            f"{representation(sub)} should not contain the path '{path}'",
        )

    return test


def should_contain_json_key(value: Json, path: JsonKey) -> str:
    """Assert ``path`` exists and return the located value as JSON text."""
    found = _read(value, path)
    if found is _MISSING:
        raise AssertionError(
            f"JSON object {representation(_abbreviate(value))} should contain '{path}' path but it doesn't."
        )
    return json.dumps(found)


def should_not_contain_json_key(value: Json, path: JsonKey) -> None:
    should_not(value, contain_json_key(path))


def contain_json_key_value(path: JsonKey, expected: Any) -> Matcher:
    def test(value: Json) -> MatcherResult:
        sub = _abbreviate(value)
        found = _read(value, path)
        passed = found is not _MISSING and json_equal(found, expected)
        actual = "missing" if found is _MISSING else _encode(found)
        return MatcherResult(
            passed,
            f"{representation(sub)} should contain the element '{path}' = {_encode(expected)} but it was {actual}",
            f"{representation(sub)} should not contain the element '{path}' = {_encode(expected)}",
        )

    return test


def should_contain_json_key_value(value: Json, path: JsonKey, expected: Any) -> None:
    should(value, contain_json_key_value(path, expected))


def should_not_contain_json_key_value(value: Json, path: JsonKey, expected: Any) -> None:
    should_not(value, contain_json_key_value(path, expected))


def should_contain_json_key_and_value_of_type(value: Json, path: JsonKey, expected_type: Type[T]) -> T:
    """Assert ``path`` holds a value of ``expected_type`` and return that value."""
    found = _read(value, path)
    if found is _MISSING:
        raise AssertionError(
            f"JSON object {representation(_abbreviate(value))} should contain '{path}' path but it doesn't."
        )
    if not _is_of_type(found, expected_type):
        raise AssertionError(
            f"JSON object {representation(_abbreviate(value))} should contain an element with type "
            f"{expected_type.__name__} by '{path}' path but it contains {representation(_encode(found))}."
        )
    return found


def should_contain_only_json_key(value: Json, path: JsonKey) -> str:
    should_contain_exactly(value, 1)
    return should_contain_json_key(value, path)


def should_contain_only_json_key_of_type(value: Json, path: JsonKey, expected_type: Type[T]) -> T:
    should_contain_exactly(value, 1)
    return should_contain_json_key_and_value_of_type(value, path, expected_type)
