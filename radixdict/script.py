"""Operation scripts replayed against a fresh Dictionary.

A script is a count followed by that many operations, each introduced by
an integer opcode::

    5
    1 cat feline
    1 car a road vehicle
    4 ca 2
    5
    6 cat ca-t

Tokens are whitespace separated. Definitions (``add``) and expected
results (queries) run to the end of their line.
"""

from __future__ import annotations

from enum import IntEnum
from pathlib import Path


class ScriptError(ValueError):
    """Raised for a malformed operation script."""


class OperationType(IntEnum):
    ADD = 1
    REMOVE = 2
    GET_DEF = 3
    COUNT = 4
    COMPRESS = 5
    GET_SEQ = 6


class Operation:
    """One scripted call plus the text its result should render as."""

    __slots__ = ("type", "word", "definition", "expected")

    def __init__(
        self,
        type: OperationType,
        word: str | None = None,
        definition: str | None = None,
        expected: str | None = None,
    ):
        self.type = type
        self.word = word
        self.definition = definition
        self.expected = expected

    def __repr__(self) -> str:
        if self.type is OperationType.ADD:
            return f'Op:[add {self.word} "{self.definition}"]'
        if self.type is OperationType.REMOVE:
            return f"Op:[remove {self.word}]"
        if self.type is OperationType.GET_DEF:
            return f"Op:[getDefinition {self.word}]"
        if self.type is OperationType.GET_SEQ:
            return f"Op:[getSequence {self.word}]"
        if self.type is OperationType.COUNT:
            return f"Op:[countPrefix {self.word}]"
        return "Op:[compress]"


class Script:
    """Parsed script: a name (usually the file name) and its operations."""

    def __init__(self, name: str, operations: list[Operation]):
        self.name = name
        self.operations = operations

    def __len__(self) -> int:
        return len(self.operations)

    def __str__(self) -> str:
        lines = [f"Operations[{len(self.operations)}]:{{"]
        lines.extend(f"  {op!r}" for op in self.operations)
        lines.append("}")
        return "\n".join(lines)


class _Reader:
    """Token / rest-of-line cursor over script text."""

    def __init__(self, text: str):
        self.lines = text.splitlines()
        self.row = 0
        self.col = 0

    def token(self) -> str:
        while self.row < len(self.lines):
            line = self.lines[self.row]
            while self.col < len(line) and line[self.col].isspace():
                self.col += 1
            if self.col < len(line):
                start = self.col
                while self.col < len(line) and not line[self.col].isspace():
                    self.col += 1
                return line[start:self.col]
            self.row += 1
            self.col = 0
        raise ScriptError("unexpected end of script")

    def rest_of_line(self) -> str:
        if self.row >= len(self.lines):
            return ""
        rest = self.lines[self.row][self.col:]
        self.row += 1
        self.col = 0
        return rest.strip()


def _read_operation(reader: _Reader) -> Operation:
    raw = reader.token()
    try:
        op_type = OperationType(int(raw))
    except ValueError:
        raise ScriptError(f"invalid operation type: {raw!r}") from None

    if op_type is OperationType.COMPRESS:
        reader.rest_of_line()
        return Operation(op_type)
    word = reader.token()
    if op_type is OperationType.ADD:
        return Operation(op_type, word, definition=reader.rest_of_line())
    if op_type is OperationType.REMOVE:
        reader.rest_of_line()
        return Operation(op_type, word)
    return Operation(op_type, word, expected=reader.rest_of_line())


def parse_script(text: str, name: str = "<script>", source: str | None = None) -> Script:
    """Parse script text; raises ScriptError naming the failing operation.

    ``source`` (usually the full file path) prefixes error messages and
    defaults to ``name``.
    """
    source = source or name
    reader = _Reader(text)
    try:
        count = int(reader.token())
    except ValueError as exc:
        raise ScriptError(f"{source}: bad operation count ({exc})") from None
    reader.rest_of_line()

    operations: list[Operation] = []
    for i in range(count):
        try:
            operations.append(_read_operation(reader))
        except ScriptError as exc:
            raise ScriptError(f"{source}: operation {i}: {exc}") from None
    return Script(name, operations)


def load_script(path: str | Path) -> Script:
    path = Path(path)
    return parse_script(path.read_text(encoding="utf-8"), name=path.name, source=str(path))
