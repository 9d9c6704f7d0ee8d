"""Token stream representation consumed by rules."""

from __future__ import annotations

import io
import tokenize
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple


@dataclass(frozen=True)
class Token:
    """A single lexical token with its source position."""

    type: int
    text: str
    line: int
    column: int
    source_line: str = ""

    @property
    def type_name(self) -> str:
        return tokenize.tok_name.get(self.type, str(self.type))

    def is_a(self, type_: int, text: Optional[str] = None) -> bool:
        """Return True if the token has the given type (and text, when provided)."""

        if self.type != type_:
            return False
        return text is None or self.text == text


class File(Sequence[Token]):
    """Immutable token sequence for one source file with a rewindable cursor.

    Indexing, ``len()`` and iteration always see the complete sequence. The
    cursor (``rewind``/``current``/``next``/``seek``) is the shared traversal
    state that the engine resets before handing the file to each rule.
    """

    def __init__(self, path: str, tokens: Sequence[Token], source: str = "") -> None:
        self.path = path
        self.source = source
        self._tokens: Tuple[Token, ...] = tuple(tokens)
        self._position = 0

    def __getitem__(self, index):
        return self._tokens[index]

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"File({self.path!r}, tokens={len(self._tokens)})"

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------
    def rewind(self) -> None:
        self._position = 0

    def valid(self) -> bool:
        return 0 <= self._position < len(self._tokens)

    def key(self) -> int:
        return self._position

    def current(self) -> Optional[Token]:
        if not self.valid():
            return None
        return self._tokens[self._position]

    def next(self) -> Optional[Token]:
        """Advance the cursor and return the token it now points at."""

        if self._position < len(self._tokens):
            self._position += 1
        return self.current()

    def peek(self, offset: int = 1) -> Optional[Token]:
        index = self._position + offset
        if 0 <= index < len(self._tokens):
            return self._tokens[index]
        return None

    def seek(self, index: int) -> None:
        if not 0 <= index < len(self._tokens):
            raise IndexError(f"Token index {index} out of range for {self.path}")
        self._position = index

    # ------------------------------------------------------------------
    # Source helpers
    # ------------------------------------------------------------------
    @property
    def lines(self) -> List[str]:
        # Split on "\n" only, as tokenize does; str.splitlines also breaks on \x0c and friends.
        return [line.rstrip("\r\n") for line in io.StringIO(self.source).readlines()]

    def first_token_on_line(self, lineno: int) -> Optional[Token]:
        for token in self._tokens:
            if token.line == lineno:
                return token
            if token.line > lineno:
                break
        return None


def tokenize_source(label: str, contents: str) -> File:
    """Tokenize ``contents`` into a :class:`File` labelled ``label``.

    Callers are expected to have passed the source through the lint check
    first; ``tokenize.TokenError`` on malformed input is not caught here.
    """

    tokens = [
        Token(
            type=tok.type,
            text=tok.string,
            line=tok.start[0],
            column=tok.start[1],
            source_line=tok.line,
        )
        for tok in tokenize.generate_tokens(io.StringIO(contents).readline)
    ]
    return File(label, tokens, source=contents)
