"""
Playground Kernel — Import Rewriter

Turns the leading block of `import ... from '...'` statements of a snippet
into `const` bindings against uppercase registry symbols:

    import React, { Component } from 'react'
    import { Button as Btn } from 'semantic-ui-react'

    →  const React = REACT
       const { Component } = REACT
       const { Button: Btn } = SEMANTIC_UI_REACT

Two passes: ImportScanner splits the block into statements (skipping
whitespace and comments), parse_import() turns one statement into an
ImportRecord. A statement that does not have the supported shape raises
ParseSkipError and is dropped by rewrite_imports().
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import pydash

from playground.kernel.errors import ParseSkipError
from playground.kernel.types import ImportName, ImportRecord, ImportRewrite

logger = logging.getLogger(__name__)

_IDENT_CHARS = re.compile(r"[\w$]")
_MODULE_KEY_RE = re.compile(r"^[\w\-]+$")
_TOKEN_RE = re.compile(
    r"""\s*(?:
        (?P<string>'[^'\n]*'|"[^"\n]*")
      | (?P<ident>[A-Za-z_$][\w$]*)
      | (?P<punct>[{},;*])
    )""",
    re.VERBOSE,
)


# ---------------------------------------------------------------------------
# Scanner
# ---------------------------------------------------------------------------


@dataclass
class ImportBlock:
    """Raw import statements and the offset just past the last one."""

    statements: list[str]
    end: int


class ImportScanner:
    """
    Splits the leading run of import statements out of a snippet.

    The block ends at the first top-level token that is not `import`. A
    statement ends after the module specifier string (plus an optional `;`),
    or at a line break that cannot continue an import clause.
    """

    def __init__(self, source: str) -> None:
        self.source = source
        self.pos = 0

    def scan(self) -> ImportBlock:
        statements: list[str] = []
        end = 0
        while True:
            self._skip_trivia()
            if not self._at_keyword("import"):
                break
            start = self.pos
            self.pos = self._statement_end(start)
            statements.append(self.source[start : self.pos])
            end = self.pos
        return ImportBlock(statements=statements, end=end)

    def _skip_trivia(self) -> None:
        src = self.source
        while self.pos < len(src):
            if src[self.pos].isspace():
                self.pos += 1
            elif src.startswith("//", self.pos):
                newline = src.find("\n", self.pos)
                self.pos = len(src) if newline < 0 else newline + 1
            elif src.startswith("/*", self.pos):
                close = src.find("*/", self.pos + 2)
                self.pos = len(src) if close < 0 else close + 2
            else:
                return

    def _at_keyword(self, word: str) -> bool:
        if not self.source.startswith(word, self.pos):
            return False
        after = self.pos + len(word)
        return after >= len(self.source) or not _IDENT_CHARS.match(self.source[after])

    def _statement_end(self, start: int) -> int:
        src = self.source
        i = start + len("import")
        depth = 0
        while i < len(src):
            ch = src[i]
            if ch in "'\"":
                close = src.find(ch, i + 1)
                if close < 0:
                    return len(src)
                i = close + 1
                while i < len(src) and src[i] in " \t":
                    i += 1
                if i < len(src) and src[i] == ";":
                    i += 1
                return i
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth = max(depth - 1, 0)
            elif ch == ";" and depth == 0:
                return i + 1
            elif ch == "\n" and depth == 0 and not self._continues(start, i):
                return i
            i += 1
        return i

    def _continues(self, start: int, newline: int) -> bool:
        """Whether the clause before a line break goes on past it."""
        before = self.source[start:newline].rstrip()
        if before.endswith((",", "{", "import")):
            return True
        rest = self.source[newline:].lstrip()
        return rest.startswith(("from", ",", "{", "}"))


def scan_imports(source: str) -> ImportBlock:
    """Return the raw statements of the leading import block."""
    return ImportScanner(source).scan()


# ---------------------------------------------------------------------------
# Statement parser
# ---------------------------------------------------------------------------


def _tokenize(statement: str) -> list[tuple[str, str]]:
    tokens: list[tuple[str, str]] = []
    pos = 0
    text = statement.rstrip()
    while pos < len(text):
        m = _TOKEN_RE.match(text, pos)
        if m is None or m.end() == pos:
            raise ParseSkipError(f"Unexpected character {text[pos:].lstrip()[:1]!r} in import")
        kind = m.lastgroup or ""
        tokens.append((kind, m.group(kind)))
        pos = m.end()
    return tokens


def symbol_name(module_key: str) -> str:
    """Word-boundary normalised uppercase name: 'semantic-ui-react' → 'SEMANTIC_UI_REACT'."""
    return pydash.snake_case(module_key).upper()


def module_key_of(module: str) -> str:
    """Final path segment of a module specifier: 'docs/src/common' → 'common'."""
    key = module.rstrip("/").rsplit("/", 1)[-1]
    if not _MODULE_KEY_RE.match(key):
        raise ParseSkipError(f"Unsupported module specifier {module!r}")
    return key


def parse_import(statement: str) -> ImportRecord:
    """
    Parse one import statement.

    Supported shape:
        import [Default] [,] [{ A, B as C }] from 'module'[;]

    Raises ParseSkipError for anything else (side-effect imports, namespace
    imports, type-only imports, malformed text).
    """
    tokens = _tokenize(statement)
    pos = 0

    def peek(offset: int = 0) -> tuple[str, str] | None:
        return tokens[pos + offset] if pos + offset < len(tokens) else None

    def expect_punct(value: str) -> None:
        nonlocal pos
        tok = peek()
        if tok != ("punct", value):
            raise ParseSkipError(f"Expected {value!r} in import, got {tok[1] if tok else 'end of statement'!r}")
        pos += 1

    if peek() != ("ident", "import"):
        raise ParseSkipError("Not an import statement")
    pos += 1

    if peek() == ("ident", "type") and peek(1) is not None and peek(1) != ("ident", "from"):
        raise ParseSkipError("Type-only imports are not supported")

    default_name: str | None = None
    tok = peek()
    if tok is not None and tok[0] == "ident" and tok[1] != "from":
        default_name = tok[1]
        pos += 1
        if peek() == ("punct", ","):
            pos += 1

    destructured: tuple[ImportName, ...] | None = None
    if peek() == ("punct", "{"):
        pos += 1
        names: list[ImportName] = []
        while peek() != ("punct", "}"):
            tok = peek()
            if tok is None or tok[0] != "ident":
                raise ParseSkipError("Malformed destructured import clause")
            imported = tok[1]
            pos += 1
            local = imported
            if peek() == ("ident", "as"):
                pos += 1
                alias = peek()
                if alias is None or alias[0] != "ident":
                    raise ParseSkipError("Malformed alias in destructured import")
                local = alias[1]
                pos += 1
            names.append(ImportName(imported=imported, local=local))
            if peek() == ("punct", ","):
                pos += 1
            elif peek() != ("punct", "}"):
                raise ParseSkipError("Malformed destructured import clause")
        expect_punct("}")
        destructured = tuple(names)

    if default_name is None and destructured is None:
        raise ParseSkipError("Import has neither a default nor a destructured clause")

    if peek() != ("ident", "from"):
        raise ParseSkipError("Expected 'from' in import")
    pos += 1

    tok = peek()
    if tok is None or tok[0] != "string":
        raise ParseSkipError("Expected a module specifier string")
    module = tok[1][1:-1]
    pos += 1
    if peek() == ("punct", ";"):
        pos += 1
    if peek() is not None:
        raise ParseSkipError(f"Unexpected {peek()[1]!r} after module specifier")

    key = module_key_of(module)
    return ImportRecord(
        module=module,
        module_key=key,
        symbol=symbol_name(key),
        default_name=default_name,
        destructured=destructured,
    )


def parse_imports(source: str) -> list[ImportRecord]:
    """Parse the import block, silently dropping unsupported statements."""
    return rewrite_imports(source).records


# ---------------------------------------------------------------------------
# Rewriting
# ---------------------------------------------------------------------------


def render_bindings(records: list[ImportRecord]) -> list[str]:
    """One `const` line per clause, in source order."""
    lines: list[str] = []
    for record in records:
        if record.default_name:
            lines.append(f"const {record.default_name} = {record.symbol}")
        if record.destructured is not None:
            pattern = ", ".join(name.to_pattern() for name in record.destructured)
            lines.append(f"const {{ {pattern} }} = {record.symbol}")
    return lines


def rewrite_imports(source: str) -> ImportRewrite:
    """Scan, parse and rewrite the import block of a snippet."""
    block = scan_imports(source)
    records: list[ImportRecord] = []
    skipped: list[str] = []

    for statement in block.statements:
        try:
            records.append(parse_import(statement))
        except ParseSkipError as e:
            logger.debug("imports: skipping %r: %s", " ".join(statement.split()), e.message)
            skipped.append(statement)

    return ImportRewrite(
        records=records,
        bindings=render_bindings(records),
        end=block.end,
        skipped=skipped,
    )
