"""Logic for extracting raw type signatures from PHP source files.

This is a declaration scanner, not a PHP parser: it tokenizes the source,
tracks ``namespace`` and ``use`` statements, and reads class, interface,
trait and enum declarations together with their doc comments and method
signatures. Method bodies, properties, constants and attributes are skipped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from phpdocs_md.raw_signature import RawMember, RawParam, RawSignature
from phpdocs_md.type_names import NAMESPACE_SEPARATOR, is_class_reference

if TYPE_CHECKING:
    from pathlib import Path

TOKEN_RE = re.compile(
    r"""
    (?P<doc>/\*\*.*?\*/)
  | (?P<comment>/\*.*?\*/|//[^\n]*|\#(?!\[)[^\n]*)
  | (?P<heredoc><<<[ \t]*(?P<hq>['"]?)(?P<hl>[A-Za-z_]\w*)(?P=hq)\r?\n.*?\n[ \t]*(?P=hl)\b)
  | (?P<string>'(?:[^'\\]|\\.)*'|"(?:[^"\\]|\\.)*")
  | (?P<tag><\?php|<\?=|<\?|\?>)
  | (?P<variable>\$[A-Za-z_]\w*)
  | (?P<name>\\?[A-Za-z_]\w*(?:\\[A-Za-z_]\w*)*\\?)
  | (?P<number>\d[\w.]*)
  | (?P<attr>\#\[)
  | (?P<punct>::|\.\.\.|=>|\?->|->|\?\?=?|[{}()\[\];,=?|&:])
  | (?P<space>\s+)
  | (?P<other>.)
    """,
    re.VERBOSE | re.DOTALL,
)

SKIPPED_KINDS = {"comment", "space", "tag"}
TYPE_KINDS = {"class", "interface", "trait", "enum"}
CLASS_MODIFIERS = {"abstract", "final", "readonly"}
MEMBER_MODIFIERS = {
    "public",
    "protected",
    "private",
    "static",
    "abstract",
    "final",
    "var",
    "readonly",
}
PROMOTION_MODIFIERS = {"public", "protected", "private", "readonly"}
NAME_RE = re.compile(r"\\?[A-Za-z_]\w*(?:\\[A-Za-z_]\w*)*")
OPENERS = {"(": ")", "[": "]", "{": "}"}


@dataclass(frozen=True)
class Token:
    """One significant token of PHP source."""

    kind: str
    text: str
    start: int
    end: int


def tokenize(source: str) -> list[Token]:
    """Split PHP source into significant tokens (comments and whitespace dropped)."""
    tokens = []
    for m in TOKEN_RE.finditer(source):
        kind = m.lastgroup or "other"
        if kind in ("hq", "hl"):
            kind = "heredoc"
        if kind in SKIPPED_KINDS:
            continue
        tokens.append(Token(kind, m.group(0), m.start(), m.end()))
    return tokens


class PhpSourceScanner:
    """Reads type declarations out of PHP source text."""

    def scan_file(self, path: Path) -> list[RawSignature]:
        """Scan one PHP file."""
        return self.scan(path.read_text(encoding="utf-8", errors="replace"), path)

    def scan(self, source: str, file: Path | None = None) -> list[RawSignature]:
        """Scan PHP source and return its declarations in source order."""
        return _DeclarationReader(source, tokenize(source), file).read()


class _DeclarationReader:
    """Single-use cursor over the token stream of one file."""

    def __init__(self, source: str, tokens: list[Token], file: Path | None) -> None:
        self.source = source
        self.tokens = tokens
        self.file = file
        self.pos = 0
        self.namespace = ""
        self.imports: dict[str, str] = {}
        self.signatures: list[RawSignature] = []

    # Cursor helpers

    def _next(self) -> Token | None:
        if self.pos >= len(self.tokens):
            return None
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _peek(self) -> Token | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _previous_text(self, offset: int) -> str:
        idx = self.pos - offset
        return self.tokens[idx].text.lower() if idx >= 0 else ""

    def _skip_balanced(self, opener: str) -> None:
        """Skip to the closer matching an ``opener`` that was just consumed."""
        stack = [OPENERS[opener]]
        while stack:
            tok = self._next()
            if tok is None:
                return
            if tok.text in OPENERS:
                stack.append(OPENERS[tok.text])
            elif tok.kind == "attr":
                stack.append("]")
            elif tok.text == stack[-1]:
                stack.pop()

    def _skip_attribute(self) -> None:
        self._skip_balanced("[")

    def _skip_statement(self) -> None:
        """Skip to the end of a statement: ``;`` or a top-level ``{...}`` block."""
        while (tok := self._next()) is not None:
            if tok.text == ";":
                return
            if tok.text == "{":
                self._skip_balanced("{")
                return
            if tok.text in ("(", "["):
                self._skip_balanced(tok.text)
            elif tok.kind == "attr":
                self._skip_attribute()
            elif tok.text == "}":
                self.pos -= 1
                return

    def _slice(self, tokens: list[Token]) -> str:
        if not tokens:
            return ""
        return self.source[tokens[0].start : tokens[-1].end].strip()

    # Name resolution

    def _qualify(self, name: str) -> str:
        """Resolve a class name as PHP does: imports, then the current namespace."""
        if name.startswith(NAMESPACE_SEPARATOR):
            return name.lstrip(NAMESPACE_SEPARATOR)
        head, _, rest = name.partition(NAMESPACE_SEPARATOR)
        if head in self.imports:
            return self.imports[head] + (NAMESPACE_SEPARATOR + rest if rest else "")
        if self.namespace:
            return self.namespace + NAMESPACE_SEPARATOR + name
        return name

    def _expand_type(self, type_text: str) -> str | None:
        """Expand imported names inside a declared type; other names stay as written."""
        type_text = re.sub(r"\s+", "", type_text)
        if not type_text:
            return None

        def repl(m: re.Match) -> str:
            name = m.group(0)
            if not is_class_reference(name) or name.startswith(NAMESPACE_SEPARATOR):
                return name
            head, _, rest = name.partition(NAMESPACE_SEPARATOR)
            if head in self.imports:
                fqn = self.imports[head] + (NAMESPACE_SEPARATOR + rest if rest else "")
                return NAMESPACE_SEPARATOR + fqn
            return name

        return NAME_RE.sub(repl, type_text)

    # Top level

    def read(self) -> list[RawSignature]:
        doc = ""
        modifiers: list[str] = []
        while (tok := self._next()) is not None:
            text = tok.text.lower()
            if tok.kind == "doc":
                doc = tok.text
                continue
            if tok.kind == "attr":
                self._skip_attribute()
                continue
            if tok.kind == "name" and text in CLASS_MODIFIERS:
                modifiers.append(text)
                continue
            if tok.kind == "name" and text in TYPE_KINDS:
                if self._previous_text(2) not in ("::", "new", "->", "?->"):
                    self._read_type(text, modifiers, doc)
            elif tok.kind == "name" and text == "namespace":
                self._read_namespace()
            elif tok.kind == "name" and text == "use":
                self._read_use()
            elif tok.kind == "name" and text == "function":
                self._skip_function()
            doc = ""
            modifiers = []
        return self.signatures

    def _read_namespace(self) -> None:
        tok = self._peek()
        if tok is not None and tok.kind == "name":
            self._next()
            self.namespace = tok.text.strip(NAMESPACE_SEPARATOR)
        else:
            self.namespace = ""
        self.imports = {}

    def _read_use(self) -> None:
        """Record ``use`` imports, including aliases and group imports."""
        tok = self._peek()
        if tok is None or tok.text == "(":
            return
        if tok.text.lower() in ("function", "const"):
            self._skip_statement()
            return

        prefix = ""
        items: list[list[str]] = [[]]
        while (tok := self._next()) is not None and tok.text != ";":
            if tok.text == "{":
                prefix = items[-1].pop() if items[-1] else ""
            elif tok.text == ",":
                items.append([])
            elif tok.kind == "name":
                items[-1].append(tok.text)

        for item in items:
            if not item or item[0].lower() in ("function", "const"):
                continue
            fqn = (prefix.rstrip(NAMESPACE_SEPARATOR) + NAMESPACE_SEPARATOR + item[0])
            fqn = fqn.strip(NAMESPACE_SEPARATOR)
            if len(item) >= 3 and item[1].lower() == "as":
                alias = item[2]
            else:
                alias = fqn.split(NAMESPACE_SEPARATOR)[-1]
            self.imports[alias] = fqn

    def _skip_function(self) -> None:
        """Skip a top-level function or closure, including its body."""
        while (tok := self._next()) is not None:
            if tok.text == "(":
                self._skip_balanced("(")
            elif tok.text == "{":
                self._skip_balanced("{")
                return
            elif tok.text == ";":
                return

    # Type declarations

    def _read_type(self, kind: str, modifiers: list[str], doc: str) -> None:
        name_tok = self._peek()
        if name_tok is None or name_tok.kind != "name":
            return
        self._next()

        extends: list[str] = []
        implements: list[str] = []
        current: list[str] | None = None
        while (tok := self._next()) is not None and tok.text != "{":
            text = tok.text.lower()
            if text == "extends":
                current = extends
            elif text == "implements":
                current = implements
            elif tok.text == ":":
                current = None
            elif tok.kind == "name" and current is not None:
                current.append(self._qualify(tok.text))
        if tok is None:
            return

        if kind == "interface":
            implements, extends = extends, []
        class_modifiers = list(modifiers)
        if kind == "enum":
            kind = "class"
            class_modifiers.append("final")

        short_name = name_tok.text
        full_name = (
            self.namespace + NAMESPACE_SEPARATOR + short_name
            if self.namespace
            else short_name
        )
        signature = RawSignature(
            name=full_name,
            kind=kind,
            namespace=self.namespace,
            raw_comment=doc,
            extends=extends[0] if extends else None,
            implements=implements,
            modifiers=class_modifiers,
            imports=dict(self.imports),
            file=self.file,
        )
        self.signatures.append(signature)
        signature.members = self._read_body()

    def _read_body(self) -> list[RawMember]:
        members: list[RawMember] = []
        doc = ""
        modifiers: list[str] = []
        while (tok := self._next()) is not None:
            text = tok.text.lower()
            if tok.kind == "doc":
                doc = tok.text
                continue
            if tok.kind == "attr":
                self._skip_attribute()
                continue
            if tok.text == "}":
                break
            if tok.kind == "name" and text in MEMBER_MODIFIERS:
                modifiers.append(text)
                continue
            if tok.kind == "name" and text == "function":
                member = self._read_method(modifiers, doc)
                if member is not None:
                    members.append(member)
            else:
                self.pos -= 1
                self._skip_statement()
            doc = ""
            modifiers = []
        return members

    def _read_method(self, modifiers: list[str], doc: str) -> RawMember | None:
        tok = self._next()
        if tok is not None and tok.text == "&":
            tok = self._next()
        if tok is None or tok.kind != "name":
            return None
        name = tok.text

        params: list[RawParam] = []
        if (nxt := self._next()) is not None and nxt.text == "(":
            params = self._read_params()

        return_tokens: list[Token] = []
        if (nxt := self._peek()) is not None and nxt.text == ":":
            self._next()
            while (nxt := self._peek()) is not None and nxt.text not in ("{", ";"):
                return_tokens.append(nxt)
                self._next()

        end = self._next()
        if end is not None and end.text == "{":
            self._skip_balanced("{")

        return RawMember(
            name=name,
            raw_comment=doc,
            modifiers=[m for m in modifiers if m != "var"],
            params=params,
            native_return_type=self._expand_type(self._slice(return_tokens)),
        )

    def _read_params(self) -> list[RawParam]:
        params: list[RawParam] = []
        current: list[Token] = []
        depth = 0
        while (tok := self._next()) is not None:
            if tok.kind == "attr":
                self._skip_attribute()
                continue
            if tok.text in OPENERS:
                depth += 1
            elif tok.text in (")", "]", "}"):
                if depth == 0:
                    break
                depth -= 1
            elif tok.text == "," and depth == 0:
                params.extend(self._build_param(current))
                current = []
                continue
            current.append(tok)
        params.extend(self._build_param(current))
        return params

    def _build_param(self, tokens: list[Token]) -> list[RawParam]:
        """Build a parameter from its tokens; empty list for a trailing comma."""
        while tokens and tokens[0].text.lower() in PROMOTION_MODIFIERS:
            tokens = tokens[1:]
        var_idx = next(
            (i for i, t in enumerate(tokens) if t.kind == "variable"),
            None,
        )
        if var_idx is None:
            return []

        type_tokens = [t for t in tokens[:var_idx] if t.text not in ("...",)]
        if type_tokens and type_tokens[-1].text == "&":
            type_tokens = type_tokens[:-1]
        default_tokens = tokens[var_idx + 1 :]
        default = None
        if default_tokens and default_tokens[0].text == "=":
            default = self._slice(default_tokens[1:])

        return [
            RawParam(
                name=tokens[var_idx].text,
                native_type=self._expand_type(self._slice(type_tokens)),
                default=default,
            )
        ]
