"""Path Pattern - Compile route patterns into matchers and path builders.

Copyright (c) 2024-2026 BlackRoad OS, Inc. All rights reserved.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple, Union

from pageroutes_core.routing.errors import (
    InvalidParameterError,
    MissingParameterError,
    PatternError,
)
from pageroutes_core.utils.querystring import encode_component

logger = logging.getLogger(__name__)

DEFAULT_CONSTRAINT = r"[^/]+"

# \x escape | :name, optional (constraint), optional modifier
_TOKEN_RE = re.compile(r"(\\.)|:(\w+)(?:\(((?:\\.|[^\\()])+)\))?([?*+])?")

RawValue = Union[str, Tuple[str, ...], None]


@dataclass(frozen=True)
class Key:
    """A named parameter slot in a pattern.

    Modifiers:
    - ""  one segment (required)
    - "?" one segment (optional)
    - "*" zero or more segments
    - "+" one or more segments
    """

    name: str
    prefix: str = ""
    modifier: str = ""
    constraint: str = DEFAULT_CONSTRAINT

    @property
    def optional(self) -> bool:
        return self.modifier in ("?", "*")

    @property
    def repeat(self) -> bool:
        return self.modifier in ("*", "+")


Token = Union[str, Key]


def parse(pattern: str) -> Tuple[Token, ...]:
    """Split a pattern into literal strings and Keys.

    A "/" directly before a parameter becomes that parameter's prefix, so
    it disappears together with an omitted optional parameter.
    """
    if not pattern.startswith("/"):
        raise PatternError(pattern, 'must start with "/"')

    tokens = []
    seen = set()
    literal = ""
    index = 0

    for match in _TOKEN_RE.finditer(pattern):
        literal += pattern[index:match.start()]
        index = match.end()

        escaped, name, constraint, modifier = match.groups()
        if escaped:
            literal += escaped[1]
            continue

        if name in seen:
            raise PatternError(pattern, f'duplicate parameter name "{name}"')
        seen.add(name)

        prefix = ""
        if literal.endswith("/"):
            prefix = "/"
            literal = literal[:-1]
        if literal:
            tokens.append(literal)
            literal = ""

        if constraint:
            try:
                re.compile(constraint)
            except re.error as e:
                raise PatternError(pattern, f'bad constraint for "{name}": {e}') from e

        tokens.append(Key(
            name=name,
            prefix=prefix,
            modifier=modifier or "",
            constraint=constraint or DEFAULT_CONSTRAINT,
        ))

    literal += pattern[index:]
    if literal:
        tokens.append(literal)

    return tuple(tokens)


class PathPattern:
    """Compiled route pattern.

    Supports:
    - Literal paths: /about
    - Path parameters: /users/:id
    - Optional parameters: /users/:id?
    - Variadic parameters: /files/:path*, /docs/:slug+
    - Custom constraints: /posts/:id(\\d+)

    Usage:
        pattern = PathPattern("/users/:id")
        pattern.match("/users/42")      # ("42",)
        pattern.to_path({"id": 42})     # "/users/42"
    """

    def __init__(self, pattern: str):
        self._pattern = pattern
        self._tokens = parse(pattern)
        self._keys = tuple(t for t in self._tokens if isinstance(t, Key))
        self._regex = self._compile()
        self._validators = {
            key.name: re.compile(key.constraint) for key in self._keys
        }

    @property
    def pattern(self) -> str:
        return self._pattern

    @property
    def tokens(self) -> Tuple[Token, ...]:
        return self._tokens

    @property
    def keys(self) -> Tuple[Key, ...]:
        return self._keys

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(key.name for key in self._keys)

    def _compile(self) -> re.Pattern:
        """Compile tokens to a regex with one named group per key."""
        parts = []
        last = len(self._tokens) - 1

        for position, token in enumerate(self._tokens):
            if isinstance(token, str):
                # Non-strict: the trailing slash is re-added as optional below
                if position == last and self._pattern != "/" and token.endswith("/"):
                    token = token[:-1]
                parts.append(re.escape(token))
                continue

            index = self._keys.index(token)
            capture = token.constraint
            if token.repeat:
                capture = f"(?:{capture})(?:/(?:{capture}))*"
            group = f"(?P<p{index}>{capture})"
            prefix = re.escape(token.prefix)

            if token.optional:
                parts.append(f"(?:{prefix}{group})?")
            else:
                parts.append(f"{prefix}{group}")

        # Non-strict: tolerate one trailing slash
        if self._pattern != "/":
            parts.append("/?")

        return re.compile("".join(parts))

    def match(self, path: str) -> Optional[Tuple[RawValue, ...]]:
        """Match a full path.

        Returns:
            One raw (still percent-encoded) value per key, None for absent
            optional keys, a tuple of segments for variadic keys. None if
            the path does not match.
        """
        match = self._regex.fullmatch(path)
        if not match:
            return None

        values = []
        for index, key in enumerate(self._keys):
            value = match.group(f"p{index}")
            if value is not None and key.repeat:
                value = tuple(value.split("/"))
            values.append(value)
        return tuple(values)

    def to_path(
        self,
        params: Optional[Mapping[str, Any]] = None,
        encode: Callable[[Any], str] = encode_component,
    ) -> str:
        """Render the pattern with the given parameters.

        Raises:
            MissingParameterError: a required parameter is absent
            InvalidParameterError: a value does not fit its token
        """
        params = params or {}
        path = []

        for token in self._tokens:
            if isinstance(token, str):
                path.append(token)
                continue

            value = params.get(token.name)
            if value is None:
                if token.optional:
                    continue
                raise MissingParameterError(token.name, self._pattern)

            if isinstance(value, (list, tuple)):
                if not token.repeat:
                    raise InvalidParameterError(
                        token.name, value, "expected a single value, got a list"
                    )
                if not value:
                    if token.optional:
                        continue
                    raise MissingParameterError(token.name, self._pattern)

                for position, item in enumerate(value):
                    segment = self._encode(token, item, encode)
                    path.append((token.prefix if position == 0 else "/") + segment)
                continue

            path.append(token.prefix + self._encode(token, value, encode))

        return "".join(path) or "/"

    def _encode(self, key: Key, value: Any, encode: Callable[[Any], str]) -> str:
        """Encode one segment and check it against the key's constraint."""
        segment = encode(value)
        if not self._validators[key.name].fullmatch(segment):
            raise InvalidParameterError(
                key.name, value, f"does not match {key.constraint}"
            )
        return segment

    def __repr__(self) -> str:
        return f"PathPattern({self._pattern!r})"


def compile_pattern(pattern: str) -> PathPattern:
    """Compile a pattern string."""
    logger.debug(f"Compiling pattern {pattern}")
    return PathPattern(pattern)


__all__ = [
    "DEFAULT_CONSTRAINT",
    "Key",
    "Token",
    "PathPattern",
    "parse",
    "compile_pattern",
]
