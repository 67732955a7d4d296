"""Greeting value object and the fixed sequence printed by the CLI.

Purpose
-------
Provide an immutable representation of a single greeting plus the canonical,
ordered collection the program renders.

Contents
--------
* :class:`Greeting` dataclass with line formatting and serialisation helpers.
* :data:`GREETINGS` - the five greetings in display order.
* :func:`summary_line` - trailing total line.

System Role
-----------
Sits in the domain layer; the use case and adapters only ever see these pure
data objects and the strings they format.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(slots=True, frozen=True)
class Greeting:
    """Immutable greeting rendered as one output line.

    Attributes
    ----------
    id:
        Positive display index, unique within the sequence.
    language:
        Display name of the language the message is written in.
    message:
        Greeting text.
    """

    id: int
    language: str
    message: str

    def __post_init__(self) -> None:
        if isinstance(self.id, bool) or not isinstance(self.id, int) or self.id < 1:
            raise ValueError(f"id must be a positive integer, got {self.id!r}")
        if not self.language.strip():
            raise ValueError("language must not be empty")
        if not self.message.strip():
            raise ValueError("message must not be empty")

    def format_line(self) -> str:
        """Return the ``<id>. [<language>] <message>`` output line.

        Examples
        --------
        >>> Greeting(1, "English", "Hello, World!").format_line()
        '1. [English] Hello, World!'
        """

        return f"{self.id}. [{self.language}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Serialize the greeting to a plain dictionary."""

        return {"id": self.id, "language": self.language, "message": self.message}


GREETINGS: tuple[Greeting, ...] = (
    Greeting(1, "English", "Hello, World!"),
    Greeting(2, "Spanish", "Hola, Mundo!"),
    Greeting(3, "French", "Bonjour, le Monde!"),
    Greeting(4, "German", "Hallo, Welt!"),
    Greeting(5, "Italian", "Ciao, Mondo!"),
)
# Display order; ids follow the 1-based position.


def summary_line(count: int) -> str:
    """Return the trailing ``Total greetings`` line.

    >>> summary_line(5)
    'Total greetings: 5'
    """

    return f"Total greetings: {count}"


__all__ = ["GREETINGS", "Greeting", "summary_line"]
