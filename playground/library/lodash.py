"""
Utility belt exposed to examples as LODASH.

`_.times`, `_.map`, `_.startCase`... resolve to the pydash function of the
same name in snake_case (`start_case`), or with pydash's trailing underscore
where the plain name is a Python builtin (`map_`, `range_`).
"""

from __future__ import annotations

from typing import Any, Callable

import pydash


class Lodash:
    """Attribute facade over pydash with lodash's camelCase names."""

    def __init__(self) -> None:
        self._cache: dict[str, Callable[..., Any]] = {}

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._cache:
            return self._cache[name]
        snake = pydash.snake_case(name)
        for candidate in (snake, snake + "_"):
            fn = getattr(pydash, candidate, None)
            if callable(fn):
                self._cache[name] = fn
                return fn
        raise AttributeError(name)

    def __call__(self, value: Any, *_: Any) -> Any:
        return pydash.chain(value)


lodash = Lodash()
