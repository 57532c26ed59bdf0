"""Format expression parsing and rendering.

A format expression is literal text with ``${...}`` placeholders:

- ``${0}``, ``${1}``: positional values
- ``${name}``: keyed values
- ``\\$`` and ``\\\\``: literal dollar sign and backslash

Expressions are parsed into literal and placeholder segments and rendered by
concatenation. Nothing in an expression is ever evaluated as code.
"""

import re
from dataclasses import dataclass
from functools import lru_cache

from .errors import TemplateError

_KEY_RE = re.compile(r"^(?:[0-9]+|[A-Za-z_][A-Za-z0-9_]*)$")
_ESCAPABLE = "$\\"


@dataclass(frozen=True)
class Placeholder:
    """A substitution point in a template."""

    key: int | str


class Template:
    """Parsed format expression.

    Attributes:
        source: Original expression text.
        segments: Literal strings and placeholders in output order.
    """

    def __init__(self, source: str, segments: list[str | Placeholder]) -> None:
        self.source = source
        self.segments = segments

    def _placeholder_keys(self) -> list[int | str]:
        return [s.key for s in self.segments if isinstance(s, Placeholder)]

    @property
    def positions(self) -> set[int]:
        """Positional indexes referenced by the template."""
        return {k for k in self._placeholder_keys() if isinstance(k, int)}

    @property
    def keys(self) -> set[str]:
        """Keyed names referenced by the template."""
        return {k for k in self._placeholder_keys() if isinstance(k, str)}

    def render(self, *values: str, **keyed: str) -> str:
        """Substitute values into the template.

        Args:
            *values: Positional values for ``${N}`` placeholders
            **keyed: Named values for ``${name}`` placeholders

        Returns:
            Rendered string

        Raises:
            TemplateError: If a placeholder has no matching value
        """
        parts: list[str] = []
        for segment in self.segments:
            if not isinstance(segment, Placeholder):
                parts.append(segment)
                continue
            key = segment.key
            if isinstance(key, int):
                if key >= len(values):
                    raise TemplateError(
                        f"Template {self.source!r} references ${{{key}}} "
                        f"but only {len(values)} value(s) were given"
                    )
                parts.append(str(values[key]))
            else:
                if key not in keyed:
                    raise TemplateError(f"Template {self.source!r} references unknown key '{key}'")
                parts.append(str(keyed[key]))
        return "".join(parts)

    def __repr__(self) -> str:
        return f"Template({self.source!r})"


@lru_cache(maxsize=256)
def compile_template(expression: str) -> Template:
    """Parse a format expression into a Template.

    Args:
        expression: Format expression text

    Returns:
        Parsed template

    Raises:
        TemplateError: On an unterminated or invalid placeholder
    """
    segments: list[str | Placeholder] = []
    literal: list[str] = []
    i = 0
    length = len(expression)

    while i < length:
        ch = expression[i]
        if ch == "\\" and i + 1 < length and expression[i + 1] in _ESCAPABLE:
            literal.append(expression[i + 1])
            i += 2
            continue
        if expression.startswith("${", i):
            end = expression.find("}", i + 2)
            if end == -1:
                raise TemplateError(
                    f"Unterminated placeholder at position {i} in {expression!r}"
                )
            key = expression[i + 2 : end].strip()
            if not _KEY_RE.match(key):
                raise TemplateError(f"Invalid placeholder '${{{key}}}' in {expression!r}")
            if literal:
                segments.append("".join(literal))
                literal = []
            segments.append(Placeholder(int(key) if key.isdigit() else key))
            i = end + 1
            continue
        literal.append(ch)
        i += 1

    if literal:
        segments.append("".join(literal))
    return Template(expression, segments)


def render(expression: str, answer: str) -> str:
    """Render a format expression against a single answer (``${0}``)."""
    return compile_template(expression).render(answer)
