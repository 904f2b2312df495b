"""JSONPath filtering of parsed JSON documents."""

from typing import Any

from jsonpath_ng.exceptions import JsonPathParserError
from jsonpath_ng.ext import parse
from jsonpath_ng.jsonpath import Fields, Index, Root, This


class JsonPathFilter:
    """Prune JSON data to JSONPath matches and their ancestors."""

    def __init__(self, expression: str) -> None:
        self.expression = expression.strip()
        self._expr = None
        if self.expression:
            try:
                self._expr = parse(self.expression)
            except JsonPathParserError:
                raise
            except Exception as e:
                raise JsonPathParserError(f"Filter error: {e}") from e

    def __bool__(self) -> bool:
        return self._expr is not None

    def apply(self, data: Any) -> Any:
        """Return new dict/list containing only matches and their ancestors.

        Without expression the data is returned untouched, without
        matches an empty dict is returned. A matched node is kept whole.
        """
        if self._expr is None:
            return data

        matched = {_path_tuple(m) for m in self._expr.find(data)}
        if not matched:
            return {}
        if () in matched:
            return data

        keeper_paths = set()
        for path_tuple in matched:
            for i in range(len(path_tuple) + 1):
                keeper_paths.add(path_tuple[:i])

        def recurse(value, path):
            if path in matched:
                return value
            if isinstance(value, dict):
                return {
                    key: recurse(item, path + (key,))
                    for key, item in value.items()
                    if path + (key,) in keeper_paths
                }
            if isinstance(value, list):
                return [
                    recurse(item, path + (i,))
                    for i, item in enumerate(value)
                    if path + (i,) in keeper_paths
                ]
            return value

        return recurse(data, ())


def _step_key(path) -> Any:
    """Return dict key or list index selected by one path step."""
    if isinstance(path, Index):
        indices = getattr(path, "indices", None)
        return indices[0] if indices else path.index
    if isinstance(path, Fields):
        return path.fields[0]
    return str(path)


def _path_tuple(match) -> tuple:
    """Return key/index tuple from the document root to match."""
    path = []
    current = match
    while current is not None and current.path is not None:
        if not isinstance(current.path, (Root, This)):
            path.insert(0, _step_key(current.path))
        current = current.context
    return tuple(path)
