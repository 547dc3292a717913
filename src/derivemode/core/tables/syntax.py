"""Character classification tables.

Usage:
    table = SyntaxTable()
    table.modify_syntax_entry("_", "w")
    table[ord("_")]  # SyntaxClass.WORD

    table.modify_syntax_entry("(", "()")
    table.entry("(")  # SyntaxEntry(syntax_class=OPEN_PAREN, match=")")
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

SYNTAX_TABLE_SIZE = 256


class SyntaxClass(Enum):
    """Character classes, valued by their one-character designator."""

    WHITESPACE = " "
    PUNCTUATION = "."
    WORD = "w"
    SYMBOL = "_"
    OPEN_PAREN = "("
    CLOSE_PAREN = ")"
    EXPRESSION_PREFIX = "'"
    STRING_QUOTE = '"'
    PAIRED_DELIMITER = "$"
    ESCAPE = "\\"
    CHARACTER_QUOTE = "/"
    COMMENT_START = "<"
    COMMENT_END = ">"
    INHERIT = "@"
    GENERIC_COMMENT = "!"
    GENERIC_STRING = "|"

    @classmethod
    def from_designator(cls, designator: str) -> SyntaxClass:
        """Look up a class by designator; "-" is accepted for whitespace.

        Raises:
            ValueError: If designator names no class.
        """
        if designator == "-":
            return cls.WHITESPACE
        try:
            return cls(designator)
        except ValueError:
            raise ValueError(f"Invalid syntax class designator: {designator!r}") from None


@dataclass(frozen=True, slots=True)
class SyntaxEntry:
    """Classification of one character, plus its matching delimiter if any."""

    syntax_class: SyntaxClass
    match: str | None = None

    @classmethod
    def parse(cls, descriptor: str) -> SyntaxEntry:
        """Build an entry from a descriptor such as "w", "()" or ")(".

        Only the class designator and the optional matching character are
        significant; trailing flag characters are ignored.
        """
        if not descriptor:
            raise ValueError("Empty syntax descriptor")
        syntax_class = SyntaxClass.from_designator(descriptor[0])
        match = descriptor[1] if len(descriptor) > 1 and descriptor[1] != " " else None
        return cls(syntax_class=syntax_class, match=match)


def _slot(char: str | int) -> int:
    index = ord(char) if isinstance(char, str) else char
    if not 0 <= index < SYNTAX_TABLE_SIZE:
        raise IndexError(f"Character {char!r} outside syntax table range")
    return index


class SyntaxTable:
    """Fixed 256-slot table; an unset slot holds None.

    Indexing by int or one-character string returns the slot's SyntaxClass.
    Use entry() to also see the matching delimiter.
    """

    def __init__(self, name: str | None = None):
        self._slots: list[SyntaxEntry | None] = [None] * SYNTAX_TABLE_SIZE
        self.name = name

    def entry(self, char: str | int) -> SyntaxEntry | None:
        """Full entry for a slot, or None if unset."""
        return self._slots[_slot(char)]

    def set_entry(self, char: str | int, entry: SyntaxEntry | None) -> None:
        """Set or clear a slot."""
        self._slots[_slot(char)] = entry

    def modify_syntax_entry(self, chars: str | int, descriptor: str) -> None:
        """Classify one character, or every character of a string, per descriptor."""
        entry = SyntaxEntry.parse(descriptor)
        targets = [chars] if isinstance(chars, int) else list(chars)
        for char in targets:
            self.set_entry(char, entry)

    def is_set(self, char: str | int) -> bool:
        return self._slots[_slot(char)] is not None

    def entries(self) -> Iterator[tuple[int, SyntaxEntry]]:
        """Iterate (slot, entry) for every set slot."""
        for index, entry in enumerate(self._slots):
            if entry is not None:
                yield index, entry

    def copy(self) -> SyntaxTable:
        clone = SyntaxTable(name=self.name)
        clone._slots = list(self._slots)
        return clone

    def __getitem__(self, char: str | int) -> SyntaxClass | None:
        entry = self._slots[_slot(char)]
        return entry.syntax_class if entry is not None else None

    def __setitem__(self, char: str | int, value: SyntaxClass | SyntaxEntry | None) -> None:
        if isinstance(value, SyntaxClass):
            value = SyntaxEntry(syntax_class=value)
        self.set_entry(char, value)

    def __len__(self) -> int:
        return SYNTAX_TABLE_SIZE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SyntaxTable):
            return NotImplemented
        return self._slots == other._slots

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        set_count = sum(1 for entry in self._slots if entry is not None)
        return f"SyntaxTable({self.name or hex(id(self))}, set={set_count})"


def standard_syntax_table() -> SyntaxTable:
    """Build the fully populated table used by root modes.

    Control characters and space are whitespace, letters, digits and the
    upper half are word constituents, brackets are paired, and the remaining
    printable characters are split between symbol and punctuation.
    """
    table = SyntaxTable(name="standard-syntax-table")
    for index in range(SYNTAX_TABLE_SIZE):
        table[index] = SyntaxClass.WHITESPACE if index <= 0x20 else SyntaxClass.WORD
    table[0x7F] = SyntaxClass.PUNCTUATION
    for char in "_-+*/&|<>=":
        table[char] = SyntaxClass.SYMBOL
    for char in ".,;:?!#@~^'`%":
        table[char] = SyntaxClass.PUNCTUATION
    for open_char, close_char in ("()", "[]", "{}"):
        table.modify_syntax_entry(open_char, "(" + close_char)
        table.modify_syntax_entry(close_char, ")" + open_char)
    table.modify_syntax_entry('"', '"')
    table.modify_syntax_entry("\\", "\\")
    return table
