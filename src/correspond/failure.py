"""Render facts as a failure message, and the assertion error that carries them.

Two layouts are used, chosen for the whole message:

* When every value fits on one line, keys are padded to a common width so
  the values line up::

      expected       : [a, b]
      testing whether: actual element starts with expected element
      but was        : [ax, c]

* When any value spans several lines, each fact becomes a ``key:`` line
  followed by its value indented by four spaces.

Simple facts (no value) render as their bare key in both layouts and do not
take part in alignment.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from correspond.facts import Fact

__all__ = ["FactsAssertionError", "render_facts"]

_INDENT = "    "


def render_facts(facts: Iterable[Fact], messages: Sequence[str] = ()) -> str:
    """Return the failure message for *facts*.

    Args:
        facts:    Facts in display order.
        messages: Optional free-form lines placed before the facts.

    Returns:
        The rendered, newline-joined message.
    """
    facts = list(facts)
    lines = list(messages)
    multiline = any(f.value is not None and "\n" in f.value for f in facts)
    width = max((len(f.key) for f in facts if f.value is not None), default=0)

    for f in facts:
        if f.value is None:
            lines.append(f.key)
        elif multiline:
            lines.append(f"{f.key}:")
            lines.extend(_INDENT + line for line in f.value.split("\n"))
        else:
            lines.append(f"{f.key.ljust(width)}: {f.value}")
    return "\n".join(lines)


class FactsAssertionError(AssertionError):
    """AssertionError whose message is rendered from a list of facts.

    Attributes:
        facts: The facts describing the failure, in display order.
    """

    def __init__(self, facts: Iterable[Fact], messages: Sequence[str] = ()) -> None:
        self.facts: tuple[Fact, ...] = tuple(facts)
        self.messages: tuple[str, ...] = tuple(messages)
        super().__init__(render_facts(self.facts, self.messages))

    def fact_value(self, key: str) -> str | None:
        """Return the value of the first fact with *key*, or None if absent or valueless."""
        for f in self.facts:
            if f.key == key:
                return f.value
        return None

    def keys(self) -> list[str]:
        return [f.key for f in self.facts]
