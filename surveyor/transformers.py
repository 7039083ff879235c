"""Stock answer transformers.

A transformer takes the validated answer and returns its replacement, or
None to keep the answer as it is.
"""

from typing import Any, Callable

Transformer = Callable[[Any], Any]


def transform_string(fn: Callable[[str], str]) -> Transformer:
    """Apply ``fn`` to string answers; leave anything else alone."""
    def _transform(answer: Any) -> Any:
        if not isinstance(answer, str):
            return None
        return fn(answer)
    return _transform


to_lower = transform_string(str.lower)
title = transform_string(str.title)


def compose_transformers(*transformers: Transformer) -> Transformer:
    """Chain transformers left to right."""
    def _transform(answer: Any) -> Any:
        for transformer in transformers:
            result = transformer(answer)
            if result is not None:
                answer = result
        return answer
    return _transform


__all__ = ["Transformer", "transform_string", "to_lower", "title", "compose_transformers"]
