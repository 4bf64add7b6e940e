"""
Playground Kernel — JIT source transpiler

Compiles the assembled example program (ES + JSX + legacy class decorators,
type annotations tolerated) into Python source that the sandbox can exec.
Syntax transform only: no type checking, no module resolution.

Shape of the output:

    def _main_():
        def _fn1_(*_args_):
            React = REACT
            class Example(__rt__.member(React, "Component")):
                ...
            return Example
        return _fn1_()
    __result__ = _main_()

Mapping rules:
- every JS function (declaration, expression, arrow, method) becomes a def;
  expressions that contain one hoist the def just before their statement
- JS operators become `__rt__` helper calls so they keep JS semantics
  (`a + b` → `__rt__.add(a, b)`, `a.b` → `__rt__.member(a, "b")`)
- `&&`, `||`, `??` and `?:` become conditional expressions, with a walrus
  temporary holding the left operand
- JSX becomes `__rt__.jsx(type, props, *children)` (automatic runtime)
- assignments to variables of an enclosing function become `nonlocal`
- a `let`/`const` that shadows a visible name inside a block gets its own
  Python name (`x` → `x_b4_`) for the extent of the block
- a loop body that creates closures runs as a def called once per
  iteration (`_it5_`), so each iteration captures fresh bindings; the def
  returns (signal, value, *loop vars) and the loop acts on the signal
- every loop iteration and function entry calls `__rt__.tick()`, which
  enforces the run's time budget
- JS names that are Python keywords, sandbox names, or end in "_" get an
  extra "_"; generated temporaries look like `_t3_` and never collide

Anything outside the supported subset raises SnippetSyntaxError
"Unsupported syntax: <node type>".
"""

from __future__ import annotations

import html
import keyword
import re
from contextlib import contextmanager
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Iterator

from playground.kernel.errors import SnippetSyntaxError
from playground.kernel.parser import check_syntax, node_text, parse, syntax_error_at
from playground.kernel.runtime import number_to_string
from playground.kernel.types import DEFAULT_TRANSFORM, TransformOptions

RESULT_NAME = "__result__"
MAIN_NAME = "_main_"
UNDEFINED = "__rt__.undefined"
INDENT = "    "

# Names generated code relies on; snippet identifiers never shadow them.
RESERVED_NAMES = frozenset(keyword.kwlist) | {
    "classmethod",
    "property",
    "super",
    "Exception",
}

SKIP_TYPES = {"comment", "hash_bang_line", "html_comment"}

# Statements that only carry type information.
TYPE_ONLY_TYPES = {
    "interface_declaration",
    "type_alias_declaration",
    "ambient_declaration",
}

# Expression wrappers that only carry type information.
TYPE_WRAPPER_TYPES = {
    "as_expression",
    "non_null_expression",
    "satisfies_expression",
    "type_assertion",
}

FUNCTION_TYPES = {"function_expression", "function", "arrow_function", "method_definition"}

# Nodes that create a closure over the bindings around them.
CLOSURE_TYPES = FUNCTION_TYPES | {"class", "class_declaration", "abstract_class_declaration", "function_declaration"}

TICK = "__rt__.tick()"

# Signals returned by a per-iteration def.
ITERATION_NEXT = 0
ITERATION_BREAK = 1
ITERATION_RETURN = 2

BINARY_HELPERS = {
    "+": "add",
    "-": "sub",
    "*": "mul",
    "/": "div",
    "%": "mod",
    "**": "power",
    "==": "loose_eq",
    "!=": "loose_ne",
    "===": "strict_eq",
    "!==": "strict_ne",
    "<": "lt",
    "<=": "le",
    ">": "gt",
    ">=": "ge",
    "instanceof": "instanceof",
}

BITWISE_OPERATORS = {"&", "|", "^", "<<", ">>", ">>>"}
LOGICAL_OPERATORS = {"&&", "||", "??"}

# Binary operators whose helper already returns a Python bool.
BOOLEAN_OPERATORS = {"==", "!=", "===", "!==", "<", "<=", ">", ">=", "instanceof", "in"}

_ESCAPE_RE = re.compile(r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|[0-7]{1,3}|\r\n|[\s\S])")
_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
    "\n": "",
    "\r": "",
    "\r\n": "",
    "\u2028": "",
    "\u2029": "",
}
_LEGACY_OCTAL_RE = re.compile(r"^0[0-7]+$")
_PY_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


@lru_cache(maxsize=256)
def transpile(text: str, options: TransformOptions = DEFAULT_TRANSFORM) -> str:
    """
    Compile program text into Python source.

    The generated module leaves the value of the program's last expression
    statement in `__result__`. Raises SnippetSyntaxError.
    """
    if options.target != "python3":
        raise ValueError(f"Unsupported transpile target {options.target!r}")
    return Transpiler(text, options).run()


def py_name(name: str) -> str:
    """Python spelling of a JS identifier."""
    name = name.replace("$", "_dollar_")
    if name in RESERVED_NAMES or name.endswith("_"):
        return name + "_"
    return name


def unescape_js(raw: str) -> str:
    """Decode the backslash escapes of a JS string literal body."""

    def replace(match: re.Match[str]) -> str:
        seq = match.group(1)
        if seq.startswith("u{"):
            return chr(int(seq[2:-1], 16))
        if seq[0] == "u" and len(seq) == 5:
            return chr(int(seq[1:], 16))
        if seq[0] == "x" and len(seq) == 3:
            return chr(int(seq[1:], 16))
        if seq[0] in "01234567":
            return chr(int(seq, 8))
        return _SIMPLE_ESCAPES.get(seq, seq)

    decoded = _ESCAPE_RE.sub(replace, raw)
    # Join surrogate pairs written as two \u escapes
    return decoded.encode("utf-16", "surrogatepass").decode("utf-16")


def clean_jsx_text(raw: str) -> str:
    """
    JSX whitespace rules: lines are trimmed where they meet a line break,
    whitespace-only lines disappear, the rest join with one space.
    """
    lines = re.split(r"\r\n|\n|\r", raw)
    last_non_empty = max((i for i, line in enumerate(lines) if line.strip(" \t")), default=-1)
    out = []
    for i, line in enumerate(lines):
        text = line.replace("\t", " ")
        if i != 0:
            text = text.lstrip(" ")
        if i != len(lines) - 1:
            text = text.rstrip(" ")
        if text:
            if i != last_non_empty:
                text += " "
            out.append(text)
    return "".join(out)


def parse_number(text: str) -> int | float:
    """Value of a JS numeric literal."""
    clean = text.replace("_", "")
    lower = clean.lower()
    if lower.startswith(("0x", "0o", "0b")):
        return int(clean, 0)
    if _LEGACY_OCTAL_RE.match(clean):
        return int(clean, 8)
    if "." in lower or "e" in lower:
        return float(clean)
    return int(clean)


# ---------------------------------------------------------------------------
# Transpiler
# ---------------------------------------------------------------------------


@dataclass
class _Loop:
    kind: str  # "loop", "for", "do", "switch", "iteration"
    update: Any = None  # for: increment node
    condition: Any = None  # do: condition node
    flag: str | None = None  # switch: continue flag, once a continue crosses it


@dataclass
class _Scope:
    """One generated Python function."""

    declared: set[str]
    this: str
    alias: str | None = None  # class alias for super() in methods
    constructor: bool = False
    loops: list[_Loop] = field(default_factory=list)
    top: set[str] = field(default_factory=set)  # names bound at function level
    blocks: list[dict[str, str]] = field(default_factory=list)  # renamed block bindings, innermost last
    iteration: list[str] | None = None  # per-iteration def: its loop variables


class Transpiler:
    """Single-use compiler for one program text."""

    def __init__(self, source: str, options: TransformOptions = DEFAULT_TRANSFORM) -> None:
        self.source = source
        self.options = options
        self.data = source.encode("utf-8")
        self.lines: list[str] = []
        self.depth = 0
        self.counter = 0
        self.scopes: list[_Scope] = []

    def run(self) -> str:
        tree = parse(self.source)
        check_syntax(tree, self.source)
        statements = self._named(tree.root_node)

        declared, assigned, var_names = self._collect_scope(statements)
        self._emit(f"def {MAIN_NAME}():")
        self._push(_Scope(declared=declared, this=UNDEFINED, top=self._block_names(statements, lexical_only=False) | var_names))
        self.depth += 1
        self._emit_scope_declarations(assigned - declared, var_names)
        if statements and statements[-1].type == "expression_statement":
            self._statements(statements[:-1])
            self._emit(f"return {self._expr(self._named(statements[-1])[0])}")
        else:
            self._statements(statements)
            self._emit(f"return {UNDEFINED}")
        self.depth -= 1
        self.scopes.pop()
        self._emit(f"{RESULT_NAME} = {MAIN_NAME}()")
        return "\n".join(self.lines) + "\n"

    # -- output ------------------------------------------------------------

    def _emit(self, line: str) -> None:
        self.lines.append(INDENT * self.depth + line)

    @contextmanager
    def _indent(self) -> Iterator[None]:
        self.depth += 1
        start = len(self.lines)
        yield
        if len(self.lines) == start:
            self._emit("pass")
        self.depth -= 1

    @contextmanager
    def _capture(self) -> Iterator[list[str]]:
        saved = self.lines
        buffer: list[str] = []
        self.lines = buffer
        try:
            yield buffer
        finally:
            self.lines = saved

    def _temp(self, prefix: str) -> str:
        self.counter += 1
        return f"_{prefix}{self.counter}_"

    # -- helpers -----------------------------------------------------------

    @property
    def scope(self) -> _Scope:
        return self.scopes[-1]

    def _push(self, scope: _Scope) -> None:
        self.scopes.append(scope)

    def _named(self, node: Any) -> list[Any]:
        return [c for c in node.named_children if c.type not in SKIP_TYPES]

    def _text(self, node: Any) -> str:
        return node_text(node)

    def _raw(self, start: int, end: int) -> str:
        return self.data[start:end].decode("utf-8")

    def _unsupported(self, node: Any, what: str | None = None) -> SnippetSyntaxError:
        return syntax_error_at(node, self.source, f"Unsupported syntax: {what or node.type}")

    def _name(self, node: Any) -> str:
        return self._resolve(self._text(node))

    def _resolve(self, name: str) -> str:
        """Python name a JS identifier refers to at the current position."""
        for scope in reversed(self.scopes):
            for renames in reversed(scope.blocks):
                if name in renames:
                    return renames[name]
            if name in scope.declared:
                break
        return py_name(name)

    def _unwrap(self, node: Any) -> Any:
        while node.type == "parenthesized_expression" or node.type in TYPE_WRAPPER_TYPES:
            inner = self._named(node)
            if not inner:
                break
            node = inner[0]
        return node

    def _has_token(self, node: Any, token: str) -> bool:
        return any(c.type == token for c in node.children)

    # -- scope analysis ----------------------------------------------------

    def _collect_scope(self, nodes: list[Any]) -> tuple[set[str], set[str], set[str]]:
        """(declared, assigned, var-declared) JS names of one function body."""
        declared: set[str] = set()
        assigned: set[str] = set()
        var_names: set[str] = set()
        for node in nodes:
            self._collect(node, declared, assigned, var_names)
        return declared, assigned, var_names

    def _collect(self, node: Any, declared: set[str], assigned: set[str], var_names: set[str]) -> None:
        t = node.type
        if t in FUNCTION_TYPES or t == "class":
            return
        if t == "function_declaration" or t in ("class_declaration", "abstract_class_declaration"):
            name = node.child_by_field_name("name")
            if name is not None:
                declared.add(self._text(name))
            return
        if t in ("lexical_declaration", "variable_declaration"):
            for declarator in self._named(node):
                if declarator.type != "variable_declarator":
                    continue
                names: set[str] = set()
                self._pattern_names(declarator.child_by_field_name("name"), names)
                declared |= names
                if t == "variable_declaration":
                    var_names |= names
                value = declarator.child_by_field_name("value")
                if value is not None:
                    self._collect(value, declared, assigned, var_names)
            return
        if t in ("assignment_expression", "augmented_assignment_expression"):
            left = self._unwrap(node.child_by_field_name("left"))
            self._pattern_names(left, assigned)
        elif t == "update_expression":
            argument = self._unwrap(node.child_by_field_name("argument"))
            if argument.type == "identifier":
                assigned.add(self._text(argument))
        elif t == "for_in_statement":
            left = node.child_by_field_name("left")
            kind = node.child_by_field_name("kind")
            names = set()
            self._pattern_names(left, names)
            if kind is None:
                assigned |= names
            else:
                declared |= names
                if self._text(kind) == "var":
                    var_names |= names
        elif t == "catch_clause":
            parameter = node.child_by_field_name("parameter")
            if parameter is not None:
                self._pattern_names(parameter, declared)
        for child in node.named_children:
            self._collect(child, declared, assigned, var_names)

    def _pattern_names(self, node: Any, out: set[str]) -> None:
        if node is None:
            return
        t = node.type
        if t in ("identifier", "shorthand_property_identifier_pattern"):
            out.add(self._text(node))
        elif t in ("object_pattern", "array_pattern"):
            for child in self._named(node):
                self._pattern_names(child, out)
        elif t == "pair_pattern":
            self._pattern_names(node.child_by_field_name("value"), out)
        elif t in ("object_assignment_pattern", "assignment_pattern"):
            self._pattern_names(node.child_by_field_name("left"), out)
        elif t == "rest_pattern":
            for child in self._named(node):
                self._pattern_names(child, out)
        elif t in ("required_parameter", "optional_parameter"):
            self._pattern_names(node.child_by_field_name("pattern"), out)
        elif t == "parenthesized_expression" or t in TYPE_WRAPPER_TYPES:
            self._pattern_names(self._unwrap(node), out)

    def _block_names(self, nodes: list[Any], lexical_only: bool = True) -> set[str]:
        """Names declared directly in a statement list (let/const only, or every declaration)."""
        names: set[str] = set()
        for node in nodes:
            if node.type == "export_statement":
                node = node.child_by_field_name("declaration") or node
            t = node.type
            if t == "lexical_declaration" or (t == "variable_declaration" and not lexical_only):
                for declarator in self._named(node):
                    if declarator.type == "variable_declarator":
                        self._pattern_names(declarator.child_by_field_name("name"), names)
            elif not lexical_only and t in ("function_declaration", "class_declaration", "abstract_class_declaration"):
                name = node.child_by_field_name("name")
                if name is not None:
                    names.add(self._text(name))
        return names

    def _visible(self, name: str) -> bool:
        return any(name in scope.top or any(name in renames for renames in scope.blocks) for scope in self.scopes)

    @contextmanager
    def _block_scope(self, names: set[str]) -> Iterator[None]:
        """Give block-level let/const names that shadow a visible binding their own Python name."""
        renames: dict[str, str] = {}
        for name in sorted(names):
            if self._visible(name):
                self.counter += 1
                renames[name] = f"{py_name(name).rstrip('_')}_b{self.counter}_"
        self.scope.blocks.append(renames)
        try:
            yield
        finally:
            self.scope.blocks.pop()

    def _has_closure(self, node: Any) -> bool:
        if node.type in CLOSURE_TYPES:
            return True
        return any(self._has_closure(child) for child in node.named_children)

    def _emit_scope_declarations(self, free_assigned: set[str], var_names: set[str], params: set[str] | None = None) -> None:
        """nonlocal/global lines, then `var` names bound to undefined."""
        enclosing = self.scopes[:-1]
        nonlocals = sorted(n for n in free_assigned if any(n in s.declared for s in enclosing))
        globals_ = sorted(n for n in free_assigned if n not in nonlocals)
        if nonlocals:
            self._emit("nonlocal " + ", ".join(sorted({self._resolve(n) for n in nonlocals})))
        if globals_:
            self._emit("global " + ", ".join(py_name(n) for n in globals_))
        for name in sorted(var_names - (params or set())):
            self._emit(f"{py_name(name)} = {UNDEFINED}")

    # -- statements --------------------------------------------------------

    def _statements(self, nodes: list[Any]) -> None:
        # Function declarations are hoisted to the top of their block
        for node in nodes:
            if node.type == "function_declaration":
                self._statement(node)
        for node in nodes:
            if node.type != "function_declaration":
                self._statement(node)

    def _block(self, node: Any) -> None:
        if node.type == "statement_block":
            nodes = self._named(node)
            with self._block_scope(self._block_names(nodes)):
                self._statements(nodes)
        else:
            self._statement(node)

    def _statement(self, node: Any) -> None:
        if node.type in SKIP_TYPES or node.type in TYPE_ONLY_TYPES:
            return
        handler = getattr(self, f"_s_{node.type}", None)
        if handler is None:
            raise self._unsupported(node)
        handler(node)

    def _s_empty_statement(self, node: Any) -> None:
        return None

    def _s_debugger_statement(self, node: Any) -> None:
        return None

    def _s_statement_block(self, node: Any) -> None:
        self._block(node)

    def _s_expression_statement(self, node: Any) -> None:
        for expr in self._named(node):
            self._expression_statement(expr)

    def _expression_statement(self, node: Any) -> None:
        node = self._unwrap(node)
        t = node.type
        if t == "sequence_expression":
            for part in self._sequence_parts(node):
                self._expression_statement(part)
        elif t == "assignment_expression":
            self._assign_statement(node)
        elif t == "augmented_assignment_expression":
            self._modify_statement(node.child_by_field_name("left"), self._compound_builder(node))
        elif t == "update_expression":
            self._modify_statement(node.child_by_field_name("argument"), self._update_builder(node))
        else:
            self._emit(self._expr(node))

    def _s_lexical_declaration(self, node: Any) -> None:
        is_var = node.type == "variable_declaration"
        for declarator in self._named(node):
            if declarator.type != "variable_declarator":
                continue
            target = declarator.child_by_field_name("name")
            value = declarator.child_by_field_name("value")
            if value is None:
                if not is_var and target.type == "identifier":
                    self._emit(f"{self._name(target)} = {UNDEFINED}")
                continue
            self._bind(target, self._expr(value))

    _s_variable_declaration = _s_lexical_declaration

    def _s_function_declaration(self, node: Any) -> None:
        if self._has_token(node, "async"):
            raise self._unsupported(node, "async function")
        name = node.child_by_field_name("name")
        self._emit_function(self._name(name), node, this=UNDEFINED)

    def _s_class_declaration(self, node: Any) -> None:
        self._emit_class(node)

    _s_abstract_class_declaration = _s_class_declaration

    def _s_export_statement(self, node: Any) -> None:
        # Named exports inside the body are plain declarations here
        declaration = node.child_by_field_name("declaration")
        if declaration is None:
            raise self._unsupported(node, "export")
        self._statement(declaration)

    def _s_return_statement(self, node: Any) -> None:
        value = self._named(node)
        self._emit_return(self._expr(value[0]) if value else None)

    def _emit_return(self, value: str | None) -> None:
        if self.scope.iteration is not None:
            self._emit(self._iteration_exit(ITERATION_RETURN, value or UNDEFINED))
        elif self.scope.constructor:
            if value:
                self._emit(value)
            self._emit("return")
        else:
            self._emit(f"return {value or UNDEFINED}")

    def _s_throw_statement(self, node: Any) -> None:
        self._emit(f"raise __rt__.throw({self._expr(self._named(node)[0])})")

    def _s_if_statement(self, node: Any) -> None:
        condition = self._condition(node.child_by_field_name("condition"))
        self._if_chain(node, condition, "if")

    def _if_chain(self, node: Any, condition: str, keyword_: str) -> None:
        self._emit(f"{keyword_} {condition}:")
        with self._indent():
            self._block(node.child_by_field_name("consequence"))
        alternative = node.child_by_field_name("alternative")
        if alternative is None:
            return
        inner = self._named(alternative)[0] if alternative.type == "else_clause" else alternative
        if inner.type == "if_statement":
            self.depth += 1
            with self._capture() as prelude:
                next_condition = self._condition(inner.child_by_field_name("condition"))
            self.depth -= 1
            if not prelude:
                self._if_chain(inner, next_condition, "elif")
                return
            self._emit("else:")
            self.lines.extend(prelude)
            self.depth += 1
            self._if_chain(inner, next_condition, "if")
            self.depth -= 1
            return
        self._emit("else:")
        with self._indent():
            self._block(inner)

    @contextmanager
    def _loop(self, loop: _Loop) -> Iterator[_Loop]:
        self.scope.loops.append(loop)
        try:
            yield loop
        finally:
            self.scope.loops.pop()

    def _s_while_statement(self, node: Any) -> None:
        self._emit(f"while {self._condition(node.child_by_field_name('condition'))}:")
        with self._loop(_Loop("loop")), self._indent():
            self._emit(TICK)
            self._loop_body(node.child_by_field_name("body"), [])

    def _s_do_statement(self, node: Any) -> None:
        condition = node.child_by_field_name("condition")
        self._emit("while True:")
        with self._loop(_Loop("do", condition=condition)), self._indent():
            self._emit(TICK)
            self._loop_body(node.child_by_field_name("body"), [])
            self._emit(f"if not {self._condition(condition)}:")
            with self._indent():
                self._emit("break")

    def _s_for_statement(self, node: Any) -> None:
        initializer = node.child_by_field_name("initializer")
        condition = node.child_by_field_name("condition")
        increment = node.child_by_field_name("increment")
        names = self._block_names([initializer]) if initializer is not None else set()

        with self._block_scope(names):
            if initializer is not None:
                self._for_clause(initializer)

            if condition is not None and condition.type == "expression_statement":
                inner = self._named(condition)
                condition = inner[0] if inner else None
            if condition is not None and condition.type in ("empty_statement", ";"):
                condition = None

            self._emit(f"while {self._condition(condition)}:" if condition is not None else "while True:")
            with self._loop(_Loop("for", update=increment)), self._indent():
                self._emit(TICK)
                self._loop_body(node.child_by_field_name("body"), sorted(names), writeback=True)
                if increment is not None:
                    self._expression_statement(increment)

    def _for_clause(self, node: Any) -> None:
        if node.type in ("lexical_declaration", "variable_declaration", "expression_statement", "empty_statement"):
            self._statement(node)
        elif node.type != ";":
            self._expression_statement(node)

    def _s_for_in_statement(self, node: Any) -> None:
        left = node.child_by_field_name("left")
        right = self._expr(node.child_by_field_name("right"))
        operator = node.child_by_field_name("operator")
        op = self._text(operator) if operator is not None else ("of" if self._has_token(node, "of") else "in")
        if self._has_token(node, "await"):
            raise self._unsupported(node, "for await")
        source = f"__rt__.iterate({right})" if op == "of" else f"__rt__.keys({right})"
        body = node.child_by_field_name("body")

        kind = node.child_by_field_name("kind")
        names: set[str] = set()
        if kind is not None and self._text(kind) in ("let", "const"):
            self._pattern_names(left, names)

        with self._block_scope(names):
            left = self._unwrap(left)
            if left.type == "identifier":
                self._emit(f"for {self._name(left)} in {source}:")
                with self._loop(_Loop("loop")), self._indent():
                    self._emit(TICK)
                    self._loop_body(body, sorted(names))
                return
            item = self._temp("t")
            self._emit(f"for {item} in {source}:")
            with self._loop(_Loop("loop")), self._indent():
                self._emit(TICK)
                self._bind(left, item)
                self._loop_body(body, sorted(names))

    def _loop_body(self, body: Any, loop_vars: list[str], writeback: bool = False) -> None:
        """
        Emit a loop body.

        When closures in the body can capture per-iteration bindings (loop
        variables declared with let/const, or block declarations of the body)
        the body becomes a def called once per iteration, so every iteration
        gets fresh cells. Plain bodies are emitted inline.
        """
        nodes = self._named(body) if body.type == "statement_block" else [body]
        declared, assigned, var_names = self._collect_scope(nodes)
        local = declared - var_names
        if not (loop_vars or local) or not any(self._has_closure(n) for n in nodes):
            self._block(body)
            return

        params = [self._resolve(name) for name in loop_vars]
        func = self._temp("it")
        result = self._temp("r")
        parent = self.scope
        self._emit(f"def {func}({', '.join(params)}):")
        self._push(_Scope(declared=local, this=parent.this, alias=parent.alias, loops=[_Loop("iteration")], iteration=params))
        with self._indent():
            self._emit_scope_declarations((assigned | var_names) - local - set(loop_vars), set())
            self._block(body)
            self._emit(self._iteration_exit(ITERATION_NEXT))
        self.scopes.pop()

        self._emit(f"{result} = {func}({', '.join(params)})")
        if writeback and params:
            self._emit(f"{', '.join(params)}, = {result}[2:]")
        self._emit(f"if {result}[0] == {ITERATION_BREAK}:")
        with self._indent():
            self._emit("break")
        self._emit(f"if {result}[0] == {ITERATION_RETURN}:")
        with self._indent():
            self._emit_return(f"{result}[1]")

    def _iteration_exit(self, signal: int, value: str = UNDEFINED) -> str:
        return f"return ({', '.join([str(signal), value, *(self.scope.iteration or [])])})"

    def _s_break_statement(self, node: Any) -> None:
        if node.child_by_field_name("label") is not None:
            raise self._unsupported(node, "labeled break")
        if not self.scope.loops:
            raise syntax_error_at(node, self.source, "Illegal break statement")
        if self.scope.loops[-1].kind == "iteration":
            self._emit(self._iteration_exit(ITERATION_BREAK))
            return
        self._emit("break")

    def _s_continue_statement(self, node: Any) -> None:
        if node.child_by_field_name("label") is not None:
            raise self._unsupported(node, "labeled continue")
        if not any(loop.kind != "switch" for loop in self.scope.loops):
            raise syntax_error_at(node, self.source, "Illegal continue statement")
        self._emit_continue(len(self.scope.loops) - 1)

    def _emit_continue(self, level: int) -> None:
        loop = self.scope.loops[level]
        if loop.kind == "iteration":
            self._emit(self._iteration_exit(ITERATION_NEXT))
            return
        if loop.kind == "switch":
            if loop.flag is None:
                loop.flag = self._temp("c")
            self._emit(f"{loop.flag} = True")
            self._emit("break")
            return
        if loop.kind == "for" and loop.update is not None:
            self._expression_statement(loop.update)
        if loop.kind == "do":
            self._emit(f"if {self._condition(loop.condition)}:")
            with self._indent():
                self._emit("continue")
            self._emit("break")
            return
        self._emit("continue")

    def _s_switch_statement(self, node: Any) -> None:
        discriminant = self._expr(node.child_by_field_name("value"))
        cases = self._named(node.child_by_field_name("body"))
        subject = self._temp("sw")
        matched = self._temp("m")
        has_default = any(c.type == "switch_default" for c in cases)
        fallback = self._temp("d") if has_default else None

        self._emit(f"{subject} = {discriminant}")
        self._emit(f"{matched} = False")
        if fallback:
            self._emit(f"{fallback} = False")
        flag_at = len(self.lines)
        self._emit("while True:")

        with self._loop(_Loop("switch")) as loop, self._block_scope(self._block_names([s for c in cases for s in self._case_body(c)])):
            self.depth += 1
            for case in cases:
                if case.type == "switch_case":
                    value = case.child_by_field_name("value")
                    test = f"__rt__.strict_eq({subject}, {self._expr(value)})"
                    if fallback:
                        test = f"(not {fallback} and {test})"
                    self._emit(f"if {matched} or {test}:")
                else:
                    self._emit(f"if {matched} or {fallback}:")
                with self._indent():
                    self._emit(f"{matched} = True")
                    self._statements(self._case_body(case))
            if fallback:
                self._emit(f"if {matched} or {fallback}:")
                with self._indent():
                    self._emit("break")
                self._emit(f"{fallback} = True")
            else:
                self._emit("break")
            self.depth -= 1

        if loop.flag is not None:
            self.lines.insert(flag_at, INDENT * self.depth + f"{loop.flag} = False")
            self._emit(f"if {loop.flag}:")
            with self._indent():
                self._emit_continue(len(self.scope.loops) - 1)

    def _case_body(self, case: Any) -> list[Any]:
        if case.type == "switch_case":
            return [c for c in case.children_by_field_name("body") if c.type not in SKIP_TYPES]
        return self._named(case)

    def _s_try_statement(self, node: Any) -> None:
        self._emit("try:")
        with self._indent():
            self._block(node.child_by_field_name("body"))
        handler = node.child_by_field_name("handler")
        finalizer = node.child_by_field_name("finalizer")
        if handler is not None:
            error = self._temp("e")
            self._emit(f"except Exception as {error}:")
            parameter = handler.child_by_field_name("parameter")
            names: set[str] = set()
            self._pattern_names(parameter, names)
            with self._indent(), self._block_scope(names):
                if parameter is not None:
                    self._bind(parameter, f"__rt__.caught({error})")
                self._block(handler.child_by_field_name("body"))
        if finalizer is not None:
            self._emit("finally:")
            with self._indent():
                self._block(finalizer.child_by_field_name("body"))

    # -- bindings and assignment -------------------------------------------

    def _bind(self, pattern: Any, value: str) -> None:
        """Emit statements binding a name or destructuring pattern to value."""
        pattern = self._unwrap(pattern)
        t = pattern.type
        if t in ("identifier", "shorthand_property_identifier_pattern"):
            self._emit(f"{self._name(pattern)} = {value}")
        elif t in ("member_expression", "subscript_expression"):
            self._emit(self._store(pattern, value))
        elif t in ("required_parameter", "optional_parameter"):
            self._bind(pattern.child_by_field_name("pattern"), value)
        elif t in ("assignment_pattern", "object_assignment_pattern"):
            left = pattern.child_by_field_name("left")
            if left.type in ("identifier", "shorthand_property_identifier_pattern"):
                self._bind(left, value)
                self._apply_default(self._name(left), pattern.child_by_field_name("right"))
            else:
                temp = self._temp("t")
                self._emit(f"{temp} = {value}")
                self._apply_default(temp, pattern.child_by_field_name("right"))
                self._bind(left, temp)
        elif t == "object_pattern":
            self._bind_object(pattern, value)
        elif t == "array_pattern":
            self._bind_array(pattern, value)
        else:
            raise self._unsupported(pattern)

    def _apply_default(self, target: str, default: Any) -> None:
        self._emit(f"if {target} is {UNDEFINED}:")
        with self._indent():
            self._emit(f"{target} = {self._expr(default)}")

    def _bind_object(self, pattern: Any, value: str) -> None:
        source = self._temp("t")
        self._emit(f"{source} = __rt__.destructure({value})")
        used: list[str] = []
        for prop in self._named(pattern):
            t = prop.type
            if t == "shorthand_property_identifier_pattern":
                key = self._text(prop)
                used.append(key)
                self._bind(prop, f"__rt__.member({source}, {key!r})")
            elif t == "object_assignment_pattern":
                left = prop.child_by_field_name("left")
                key = self._text(left)
                used.append(key)
                self._bind(prop, f"__rt__.member({source}, {key!r})")
            elif t == "pair_pattern":
                key_expr, key = self._property_key(prop.child_by_field_name("key"))
                if key is not None:
                    used.append(key)
                    getter = f"__rt__.member({source}, {key!r})"
                else:
                    getter = f"__rt__.index({source}, {key_expr})"
                self._bind(prop.child_by_field_name("value"), getter)
            elif t == "rest_pattern":
                self._bind(self._named(prop)[0], f"__rt__.object_rest({source}, {used!r})")
            else:
                raise self._unsupported(prop)

    def _bind_array(self, pattern: Any, value: str) -> None:
        source = self._temp("t")
        self._emit(f"{source} = __rt__.array_rest({value}, 0)")
        position = 0
        for child in pattern.children[1:-1]:
            if child.type == ",":
                position += 1
            elif child.type in SKIP_TYPES:
                continue
            elif child.type == "rest_pattern":
                self._bind(self._named(child)[0], f"__rt__.array_rest({source}, {position})")
            else:
                self._bind(child, f"__rt__.index({source}, {position})")

    def _assign_statement(self, node: Any) -> None:
        left = self._unwrap(node.child_by_field_name("left"))
        value = self._expr(node.child_by_field_name("right"))
        if left.type == "identifier":
            self._emit(f"{self._name(left)} = {value}")
        else:
            self._bind(left, value)

    def _store(self, target: Any, value: str) -> str:
        """Expression assigning value to target and evaluating to it."""
        target = self._unwrap(target)
        if target.type == "identifier":
            return f"({self._name(target)} := {value})"
        if target.type == "member_expression":
            obj = self._member_object(target)
            prop = self._text(target.child_by_field_name("property"))
            return f"__rt__.set_member({obj}, {prop!r}, {value})"
        if target.type == "subscript_expression":
            obj = self._expr(target.child_by_field_name("object"))
            key = self._expr(target.child_by_field_name("index"))
            return f"__rt__.set_index({obj}, {key}, {value})"
        raise self._unsupported(target, f"assignment to {target.type}")

    def _compound_builder(self, node: Any) -> Any:
        operator = self._text(node.child_by_field_name("operator"))[:-1]
        right = node.child_by_field_name("right")

        def build(current: str) -> str:
            value = self._expr(right)
            if operator in LOGICAL_OPERATORS:
                return self._logical(operator, current, value)
            if operator in BITWISE_OPERATORS:
                return f"__rt__.bitop({operator!r}, {current}, {value})"
            return f"__rt__.{BINARY_HELPERS[operator]}({current}, {value})"

        return build

    def _update_builder(self, node: Any) -> Any:
        delta = ", -1" if self._has_token(node, "--") else ""
        return lambda current: f"__rt__.inc({current}{delta})"

    def _is_postfix(self, node: Any) -> bool:
        return node.children[0].is_named

    def _simple(self, node: Any) -> bool:
        return node.type in ("identifier", "this", "string", "number")

    def _modify_statement(self, target: Any, build: Any) -> None:
        target = self._unwrap(target)
        if target.type == "identifier":
            name = self._name(target)
            self._emit(f"{name} = {build(name)}")
            return
        if target.type == "member_expression":
            obj_node = target.child_by_field_name("object")
            obj = self._member_object(target)
            if not self._simple(obj_node) and obj_node.type != "super":
                temp = self._temp("t")
                self._emit(f"{temp} = {obj}")
                obj = temp
            prop = self._text(target.child_by_field_name("property"))
            self._emit(f"__rt__.set_member({obj}, {prop!r}, {build(f'__rt__.member({obj}, {prop!r})')})")
            return
        if target.type == "subscript_expression":
            obj = self._simple_or_temp(target.child_by_field_name("object"))
            key = self._simple_or_temp(target.child_by_field_name("index"))
            self._emit(f"__rt__.set_index({obj}, {key}, {build(f'__rt__.index({obj}, {key})')})")
            return
        raise self._unsupported(target, f"assignment to {target.type}")

    def _simple_or_temp(self, node: Any) -> str:
        value = self._expr(node)
        if self._simple(self._unwrap(node)):
            return value
        temp = self._temp("t")
        self._emit(f"{temp} = {value}")
        return temp

    def _modify_expr(self, target: Any, build: Any, postfix: bool) -> str:
        target = self._unwrap(target)
        old = self._temp("t")
        if target.type == "identifier":
            name = self._name(target)
            if postfix:
                return f"__rt__.seq(({old} := {name}), ({name} := {build(old)}), {old})"
            return f"({name} := {build(name)})"
        obj = self._temp("t")
        if target.type == "member_expression":
            prop = repr(self._text(target.child_by_field_name("property")))
            bind = f"({obj} := {self._member_object(target)})"
            getter = f"__rt__.member({obj}, {prop})"
            setter = "set_member"
            key = prop
        elif target.type == "subscript_expression":
            key = self._temp("t")
            bind = f"({obj} := {self._expr(target.child_by_field_name('object'))}), ({key} := {self._expr(target.child_by_field_name('index'))})"
            getter = f"__rt__.index({obj}, {key})"
            setter = "set_index"
        else:
            raise self._unsupported(target, f"assignment to {target.type}")
        if postfix:
            return f"__rt__.seq({bind}, ({old} := {getter}), __rt__.{setter}({obj}, {key}, {build(old)}), {old})"
        return f"__rt__.seq({bind}, __rt__.{setter}({obj}, {key}, {build(getter)}))"

    # -- functions ---------------------------------------------------------

    def _params(self, node: Any) -> list[Any]:
        single = node.child_by_field_name("parameter")
        if single is not None:
            return [single]
        params = node.child_by_field_name("parameters")
        return [] if params is None else self._named(params)

    def _param_parts(self, param: Any) -> tuple[Any, Any, bool] | None:
        """(pattern, default, is_rest) of one formal parameter."""
        default = None
        pattern = param
        if param.type in ("required_parameter", "optional_parameter"):
            pattern = param.child_by_field_name("pattern")
            default = param.child_by_field_name("value")
        elif param.type == "assignment_pattern":
            pattern = param.child_by_field_name("left")
            default = param.child_by_field_name("right")
        if pattern is None or pattern.type == "this":
            return None
        if pattern.type == "rest_pattern":
            return self._named(pattern)[0], None, True
        return pattern, default, False

    def _emit_function(
        self,
        py_func: str,
        node: Any,
        *,
        this: str | None = None,
        this_param: bool = False,
        alias: str | None = None,
        decorators: tuple[str, ...] = (),
        constructor: bool = False,
        fields: tuple[list[Any], bool] | None = None,
        self_name: str | None = None,
    ) -> None:
        """
        Emit a def for a function-like node.

        this=None inherits the enclosing `this` (arrow functions); methods pass
        this_param so the def takes `this` as its first parameter.
        """
        if self._has_token(node, "async") or self._has_token(node, "*"):
            raise self._unsupported(node, "async or generator function")

        parts = [p for p in (self._param_parts(n) for n in self._params(node)) if p is not None]
        params: set[str] = set()
        for pattern, _, _ in parts:
            self._pattern_names(pattern, params)

        body = node.child_by_field_name("body")
        body_nodes = self._named(body) if body.type == "statement_block" else []
        declared, assigned, var_names = self._collect_scope(body_nodes if body.type == "statement_block" else [body])
        declared |= params
        if self_name:
            declared.add(self_name)

        signature: list[str] = ["this"] if this_param else []
        prologue: list[tuple[Any, Any, str]] = []
        has_rest = False
        for pattern, default, rest in parts:
            if rest:
                has_rest = True
                name = py_name(self._text(pattern)) if pattern.type == "identifier" else self._temp("p")
                signature.append(f"*{name}")
                prologue.append((pattern, None, f"__rt__.array_rest({name}, 0)"))
            elif pattern.type == "identifier" and default is None:
                signature.append(f"{py_name(self._text(pattern))}={UNDEFINED}")
            else:
                name = py_name(self._text(pattern)) if pattern.type == "identifier" else self._temp("p")
                signature.append(f"{name}={UNDEFINED}")
                prologue.append((pattern, default, name))
        if not has_rest:
            signature.append("*_args_")

        parent = self.scopes[-1] if self.scopes else None
        for decorator in decorators:
            self._emit(f"@{decorator}")
        self._emit(f"def {py_func}({', '.join(signature)}):")
        self._push(
            _Scope(
                declared=declared,
                this=this if this is not None else (parent.this if parent else UNDEFINED),
                alias=alias if alias is not None else (parent.alias if parent and this is None else None),
                constructor=constructor,
                top=params | var_names | self._block_names(body_nodes, lexical_only=False) | ({self_name} if self_name else set()),
            )
        )
        with self._indent():
            self._emit_scope_declarations(assigned - declared, var_names, params)
            self._emit(TICK)
            if self_name:
                self._emit(f"{py_name(self_name)} = {py_func}")
            for pattern, default, name in prologue:
                if default is None:
                    self._bind(pattern, name)
                elif pattern.type == "identifier":
                    self._apply_default(name, default)
                else:
                    self._apply_default(name, default)
                    self._bind(pattern, name)

            if body.type != "statement_block":
                self._emit(f"return {self._expr(body)}")
            else:
                self._function_body(body_nodes, fields)
                if not constructor and (not body_nodes or body_nodes[-1].type not in ("return_statement", "throw_statement")):
                    self._emit(f"return {UNDEFINED}")
        self.scopes.pop()

    def _function_body(self, nodes: list[Any], fields: tuple[list[Any], bool] | None) -> None:
        if fields is None:
            self._statements(nodes)
            return
        initializers, derived = fields
        if not derived:
            self._emit_fields(initializers)
            self._statements(nodes)
            return
        for node in nodes:
            if node.type == "function_declaration":
                self._statement(node)
        for node in nodes:
            if node.type == "function_declaration":
                continue
            self._statement(node)
            if self._is_super_call(node):
                self._emit_fields(initializers)

    def _is_super_call(self, node: Any) -> bool:
        if node.type != "expression_statement":
            return False
        inner = self._named(node)
        if not inner or inner[0].type != "call_expression":
            return False
        return inner[0].child_by_field_name("function").type == "super"

    # -- classes -----------------------------------------------------------

    def _emit_class(self, node: Any) -> str:
        """Emit a class statement; returns the Python name bound to the class."""
        name_node = node.child_by_field_name("name")
        cls = self._name(name_node) if name_node is not None else self._temp("cls")
        alias = self._temp("cls")

        decorators = [self._named(c)[0] for c in node.children if c.type == "decorator"]
        if decorators and not self.options.decorators_legacy:
            raise self._unsupported(node, "decorator")

        base = None
        for child in node.children:
            if child.type == "class_heritage":
                base = self._heritage(child)

        constructor = None
        fields: list[Any] = []
        statics: list[Any] = []
        methods: list[Any] = []
        for member in self._named(node.child_by_field_name("body")):
            t = member.type
            if t == "method_definition":
                if self._member_name(member) == "constructor" and not self._has_token(member, "static"):
                    constructor = member
                else:
                    methods.append(member)
            elif t in ("public_field_definition", "field_definition"):
                if any(c.type == "decorator" for c in member.children):
                    raise self._unsupported(member, "field decorator")
                (statics if self._has_token(member, "static") else fields).append(member)
            elif t in ("method_signature", "abstract_method_signature", "index_signature"):
                continue
            elif t == "decorator":
                raise self._unsupported(member, "method decorator")
            else:
                raise self._unsupported(member)

        self._emit(f"class {cls}({base}):" if base else f"class {cls}:")
        renamed: list[tuple[str, str]] = []
        with self._indent():
            if constructor is not None:
                self._emit_function(
                    "__init__",
                    constructor,
                    this="this",
                    this_param=True,
                    alias=alias,
                    constructor=True,
                    fields=(fields, base is not None),
                )
            else:
                self._emit_default_constructor(fields, base is not None, alias)
            for method in methods:
                renamed.extend(self._emit_method(method, alias))
        self._emit(f"{alias} = {cls}")

        for js_method, py_method in renamed:
            self._emit(f"__rt__.set_member({cls}, {js_method!r}, __rt__.member({cls}, {py_method!r}))")
        saved_this = self.scope.this
        self.scope.this = cls
        for member in statics:
            key = self._field_key(member)
            value = member.child_by_field_name("value")
            self._emit(f"__rt__.set_member({cls}, {key!r}, {self._expr(value) if value is not None else UNDEFINED})")
        self.scope.this = saved_this

        for decorator in reversed(decorators):
            self._emit(f"{cls} = {self._expr(decorator)}({cls})")
        return cls

    def _heritage(self, node: Any) -> str | None:
        for child in self._named(node):
            if child.type == "implements_clause":
                continue
            if child.type == "extends_clause":
                value = child.child_by_field_name("value") or self._named(child)[0]
                return self._expr(value)
            return self._expr(child)
        return None

    def _member_name(self, member: Any) -> str:
        name = member.child_by_field_name("name") or member.child_by_field_name("property")
        if name.type == "computed_property_name":
            raise self._unsupported(name, "computed class member name")
        if name.type == "string":
            return unescape_js(self._raw(name.start_byte + 1, name.end_byte - 1))
        if name.type == "number":
            return number_to_string(parse_number(self._text(name)))
        return self._text(name)

    def _field_key(self, member: Any) -> str:
        return self._member_name(member)

    def _emit_default_constructor(self, fields: list[Any], derived: bool, alias: str) -> None:
        self._emit("def __init__(this, *_args_):")
        self._push(_Scope(declared=set(), this="this", alias=alias, constructor=True))
        with self._indent():
            if derived:
                self._emit(f"super({alias}, this).__init__(*_args_)")
            self._emit_fields(fields)
        self.scopes.pop()

    def _emit_fields(self, fields: list[Any]) -> None:
        for member in fields:
            key = self._field_key(member)
            value = member.child_by_field_name("value")
            self._emit(f"__rt__.set_member(this, {key!r}, {self._expr(value) if value is not None else UNDEFINED})")

    def _emit_method(self, member: Any, alias: str) -> list[tuple[str, str]]:
        name = self._member_name(member)
        is_static = self._has_token(member, "static")
        is_getter = self._has_token(member, "get")
        if self._has_token(member, "set"):
            raise self._unsupported(member, "setter")
        if is_static and is_getter:
            raise self._unsupported(member, "static getter")

        decorators: tuple[str, ...] = ()
        if is_static:
            decorators = ("classmethod",)
        elif is_getter:
            decorators = ("property",)

        renamed: list[tuple[str, str]] = []
        method = name
        if not _PY_IDENTIFIER_RE.match(name) or keyword.iskeyword(name) or name.startswith("__"):
            if is_getter:
                raise self._unsupported(member, "getter name")
            method = self._temp("m")
            renamed.append((name, method))
        self._emit_function(method, member, this="this", this_param=True, alias=alias, decorators=decorators)
        return renamed

    # -- expressions -------------------------------------------------------

    def _expr(self, node: Any) -> str:
        if node.type in TYPE_WRAPPER_TYPES:
            return self._expr(self._named(node)[0])
        handler = getattr(self, f"_e_{node.type}", None)
        if handler is None:
            raise self._unsupported(node)
        return handler(node)

    def _condition(self, node: Any) -> str:
        """Python bool expression for a JS condition."""
        node = self._unwrap(node)
        if node.type == "binary_expression" and self._text(node.child_by_field_name("operator")) in BOOLEAN_OPERATORS:
            return self._expr(node)
        if node.type == "unary_expression" and self._text(node.child_by_field_name("operator")) == "!":
            return self._expr(node)
        if node.type in ("true", "false"):
            return self._expr(node)
        return f"__rt__.truthy({self._expr(node)})"

    def _logical(self, operator: str, left: str, right: str) -> str:
        temp = self._temp("t")
        if operator == "&&":
            return f"({right} if __rt__.truthy({temp} := {left}) else {temp})"
        if operator == "||":
            return f"({temp} if __rt__.truthy({temp} := {left}) else {right})"
        return f"({right} if __rt__.is_nullish({temp} := {left}) else {temp})"

    def _e_identifier(self, node: Any) -> str:
        text = self._text(node)
        if text == "undefined":
            return UNDEFINED
        return self._resolve(text)

    def _e_undefined(self, node: Any) -> str:
        return UNDEFINED

    def _e_true(self, node: Any) -> str:
        return "True"

    def _e_false(self, node: Any) -> str:
        return "False"

    def _e_null(self, node: Any) -> str:
        return "None"

    def _e_this(self, node: Any) -> str:
        return self.scope.this

    def _e_number(self, node: Any) -> str:
        text = self._text(node)
        if text.endswith("n"):
            raise self._unsupported(node, "BigInt literal")
        value = parse_number(text)
        if value == float("inf"):
            return "__rt__.Infinity"
        return repr(value)

    def _e_string(self, node: Any) -> str:
        return repr(unescape_js(self._raw(node.start_byte + 1, node.end_byte - 1)))

    def _e_template_string(self, node: Any) -> str:
        parts: list[str] = []
        cursor = node.start_byte + 1
        for child in node.named_children:
            if child.type != "template_substitution":
                continue
            text = unescape_js(self._raw(cursor, child.start_byte))
            if text:
                parts.append(repr(text))
            parts.append(self._expr(self._named(child)[0]))
            cursor = child.end_byte
        tail = unescape_js(self._raw(cursor, node.end_byte - 1))
        if tail:
            parts.append(repr(tail))
        if not parts:
            return "''"
        if len(parts) == 1 and parts[0][0] in "'\"":
            return parts[0]
        return f"__rt__.template({', '.join(parts)})"

    def _e_parenthesized_expression(self, node: Any) -> str:
        inner = self._named(node)
        if len(inner) != 1:
            raise self._unsupported(node)
        return self._expr(inner[0])

    def _sequence_parts(self, node: Any) -> list[Any]:
        parts: list[Any] = []
        for child in self._named(node):
            if child.type == "sequence_expression":
                parts.extend(self._sequence_parts(child))
            else:
                parts.append(child)
        return parts

    def _e_sequence_expression(self, node: Any) -> str:
        return f"__rt__.seq({', '.join(self._expr(p) for p in self._sequence_parts(node))})"

    def _e_unary_expression(self, node: Any) -> str:
        operator = self._text(node.child_by_field_name("operator"))
        argument = node.child_by_field_name("argument")
        if operator == "delete":
            target = self._unwrap(argument)
            if target.type == "member_expression":
                prop = self._text(target.child_by_field_name("property"))
                return f"__rt__.delete({self._expr(target.child_by_field_name('object'))}, {prop!r})"
            if target.type == "subscript_expression":
                return f"__rt__.delete({self._expr(target.child_by_field_name('object'))}, {self._expr(target.child_by_field_name('index'))})"
            return "True"
        if operator == "-" and argument.type == "number":
            return f"(-{self._e_number(argument)})"
        value = self._expr(argument)
        helper = {
            "!": "not_",
            "-": "neg",
            "+": "pos",
            "~": "bit_not",
            "typeof": "typeof",
            "void": "void",
        }.get(operator)
        if helper is None:
            raise self._unsupported(node, f"unary operator {operator}")
        return f"__rt__.{helper}({value})"

    def _e_binary_expression(self, node: Any) -> str:
        operator = self._text(node.child_by_field_name("operator"))
        left = node.child_by_field_name("left")
        right = node.child_by_field_name("right")
        if left.type == "private_property_identifier":
            raise self._unsupported(left, "private name in")
        a = self._expr(left)
        b = self._expr(right)
        if operator in LOGICAL_OPERATORS:
            return self._logical(operator, a, b)
        if operator in BITWISE_OPERATORS:
            return f"__rt__.bitop({operator!r}, {a}, {b})"
        if operator == "in":
            return f"__rt__.in_({a}, {b})"
        helper = BINARY_HELPERS.get(operator)
        if helper is None:
            raise self._unsupported(node, f"binary operator {operator}")
        return f"__rt__.{helper}({a}, {b})"

    def _e_ternary_expression(self, node: Any) -> str:
        condition = self._condition(node.child_by_field_name("condition"))
        consequence = self._expr(node.child_by_field_name("consequence"))
        alternative = self._expr(node.child_by_field_name("alternative"))
        return f"({consequence} if {condition} else {alternative})"

    def _e_assignment_expression(self, node: Any) -> str:
        left = self._unwrap(node.child_by_field_name("left"))
        if left.type in ("object_pattern", "array_pattern"):
            raise self._unsupported(left, "destructuring assignment expression")
        return self._store(left, self._expr(node.child_by_field_name("right")))

    def _e_augmented_assignment_expression(self, node: Any) -> str:
        return self._modify_expr(node.child_by_field_name("left"), self._compound_builder(node), postfix=False)

    def _e_update_expression(self, node: Any) -> str:
        return self._modify_expr(node.child_by_field_name("argument"), self._update_builder(node), self._is_postfix(node))

    def _member_object(self, node: Any) -> str:
        obj = node.child_by_field_name("object")
        if obj.type == "super":
            if self.scope.alias is None:
                raise syntax_error_at(obj, self.source, "'super' keyword unexpected here")
            return f"super({self.scope.alias}, {self.scope.this})"
        return self._expr(obj)

    def _e_member_expression(self, node: Any) -> str:
        obj = self._member_object(node)
        prop = self._text(node.child_by_field_name("property"))
        helper = "member_opt" if self._has_token(node, "optional_chain") else "member"
        return f"__rt__.{helper}({obj}, {prop!r})"

    def _e_subscript_expression(self, node: Any) -> str:
        obj = self._expr(node.child_by_field_name("object"))
        key = self._expr(node.child_by_field_name("index"))
        helper = "index_opt" if self._has_token(node, "optional_chain") else "index"
        return f"__rt__.{helper}({obj}, {key})"

    def _arguments(self, node: Any | None) -> list[str]:
        if node is None:
            return []
        if node.type == "template_string":
            raise self._unsupported(node, "tagged template")
        out = []
        for arg in self._named(node):
            if arg.type == "spread_element":
                out.append(f"*__rt__.iterate({self._expr(self._named(arg)[0])})")
            else:
                out.append(self._expr(arg))
        return out

    def _e_call_expression(self, node: Any) -> str:
        function = node.child_by_field_name("function")
        args = self._arguments(node.child_by_field_name("arguments"))
        if function.type == "import":
            raise self._unsupported(function, "dynamic import")
        if function.type == "super":
            if self.scope.alias is None or not self.scope.constructor:
                raise syntax_error_at(function, self.source, "'super' keyword unexpected here")
            return f"super({self.scope.alias}, this).__init__({', '.join(args)})"
        callee = self._expr(function)
        if self._has_token(node, "optional_chain"):
            return f"__rt__.call_opt({', '.join([callee, *args])})"
        return f"{callee}({', '.join(args)})"

    def _e_new_expression(self, node: Any) -> str:
        constructor = self._expr(node.child_by_field_name("constructor"))
        args = self._arguments(node.child_by_field_name("arguments"))
        return f"{constructor}({', '.join(args)})"

    def _e_arrow_function(self, node: Any) -> str:
        name = self._temp("fn")
        self._emit_function(name, node, this=None)
        return name

    def _e_function_expression(self, node: Any) -> str:
        name = self._temp("fn")
        own = node.child_by_field_name("name")
        self._emit_function(name, node, this=UNDEFINED, self_name=self._text(own) if own is not None else None)
        return name

    _e_function = _e_function_expression

    def _e_class(self, node: Any) -> str:
        return self._emit_class(node)

    def _property_key(self, node: Any) -> tuple[str, str | None]:
        """(python key expression, static key) of an object property name."""
        t = node.type
        if t in ("property_identifier", "private_property_identifier", "identifier"):
            key = self._text(node)
        elif t == "string":
            key = unescape_js(self._raw(node.start_byte + 1, node.end_byte - 1))
        elif t == "number":
            key = number_to_string(parse_number(self._text(node)))
        elif t == "computed_property_name":
            return f"__rt__.to_property_key({self._expr(self._named(node)[0])})", None
        else:
            raise self._unsupported(node)
        return repr(key), key

    def _e_object(self, node: Any) -> str:
        entries: list[str] = []
        for prop in self._named(node):
            t = prop.type
            if t == "pair":
                key, _ = self._property_key(prop.child_by_field_name("key"))
                entries.append(f"{key}: {self._expr(prop.child_by_field_name('value'))}")
            elif t == "shorthand_property_identifier":
                entries.append(f"{self._text(prop)!r}: {self._name(prop)}")
            elif t == "spread_element":
                entries.append(f"**__rt__.spread_props({self._expr(self._named(prop)[0])})")
            elif t == "method_definition":
                if self._has_token(prop, "get") or self._has_token(prop, "set"):
                    raise self._unsupported(prop, "object accessor")
                key, _ = self._property_key(prop.child_by_field_name("name"))
                name = self._temp("fn")
                self._emit_function(name, prop, this=UNDEFINED)
                entries.append(f"{key}: {name}")
            else:
                raise self._unsupported(prop)
        return f"__rt__.obj({{{', '.join(entries)}}})" if entries else "__rt__.obj()"

    def _e_array(self, node: Any) -> str:
        items: list[str] = []
        pending = True
        for child in node.children[1:-1]:
            if child.type in SKIP_TYPES:
                continue
            if child.type == ",":
                if pending:
                    items.append(UNDEFINED)
                pending = True
                continue
            if child.type == "spread_element":
                items.append(f"*__rt__.iterate({self._expr(self._named(child)[0])})")
            else:
                items.append(self._expr(child))
            pending = False
        return f"[{', '.join(items)}]"

    # -- JSX ---------------------------------------------------------------

    def _check_jsx(self, node: Any) -> None:
        if not self.options.jsx:
            raise self._unsupported(node, "JSX")

    def _jsx_type(self, name: Any | None) -> str | None:
        if name is None:
            return None
        t = name.type
        if t == "identifier":
            text = self._text(name)
            if text[0].islower() or "-" in text:
                return repr(text)
            return self._resolve(text)
        if t == "jsx_namespace_name":
            return repr(self._text(name))
        if t == "nested_identifier":
            parts = self._text(name).split(".")
            expr = self._resolve(parts[0])
            for part in parts[1:]:
                expr = f"__rt__.member({expr}, {part!r})"
            return expr
        return self._expr(name)

    def _jsx_props(self, attributes: list[Any]) -> str:
        entries: list[str] = []
        for attr in attributes:
            if attr.type == "jsx_expression":
                inner = self._named(attr)
                if not inner or inner[0].type != "spread_element":
                    raise self._unsupported(attr, "JSX attribute expression")
                entries.append(f"**__rt__.spread_props({self._expr(self._named(inner[0])[0])})")
                continue
            if attr.type != "jsx_attribute":
                continue
            parts = self._named(attr)
            name = self._text(parts[0])
            if len(parts) == 1:
                value = "True"
            else:
                value = self._jsx_attribute_value(parts[1])
            entries.append(f"{name!r}: {value}")
        return f"{{{', '.join(entries)}}}" if entries else "None"

    def _jsx_attribute_value(self, node: Any) -> str:
        if node.type == "string":
            return repr(html.unescape(self._raw(node.start_byte + 1, node.end_byte - 1)))
        if node.type == "jsx_expression":
            inner = self._named(node)
            if not inner:
                raise syntax_error_at(node, self.source, "JSX attributes must only be assigned a non-empty expression")
            return self._expr(inner[0])
        return self._expr(node)

    def _jsx_children(self, start: int, end: int, nodes: list[Any]) -> list[str]:
        children: list[str] = []
        cursor = start

        def text_until(position: int) -> None:
            text = clean_jsx_text(html.unescape(self._raw(cursor, position)))
            if text:
                children.append(repr(text))

        for child in nodes:
            if child.type not in ("jsx_expression", "jsx_element", "jsx_self_closing_element", "jsx_fragment"):
                continue
            text_until(child.start_byte)
            cursor = child.end_byte
            if child.type == "jsx_expression":
                inner = self._named(child)
                if not inner:
                    continue
                if inner[0].type == "spread_element":
                    children.append(f"*__rt__.iterate({self._expr(self._named(inner[0])[0])})")
                else:
                    children.append(self._expr(inner[0]))
            else:
                children.append(self._expr(child))
        text_until(end)
        return children

    def _jsx_call(self, type_: str | None, props: str, children: list[str]) -> str:
        if type_ is None:
            return f"__rt__.jsx_fragment({', '.join([props, *children])})"
        return f"__rt__.jsx({', '.join([type_, props, *children])})"

    def _e_jsx_element(self, node: Any) -> str:
        self._check_jsx(node)
        opening = node.child_by_field_name("open_tag") or node.children[0]
        closing = node.child_by_field_name("close_tag") or node.children[-1]
        name = opening.child_by_field_name("name")
        close_name = closing.child_by_field_name("name")
        if (name is None) != (close_name is None) or (
            name is not None and self._text(name) != self._text(close_name)
        ):
            expected = self._text(name) if name is not None else ""
            raise syntax_error_at(closing, self.source, f"Expected corresponding JSX closing tag for <{expected}>")
        attributes = [c for c in self._named(opening) if c.type in ("jsx_attribute", "jsx_expression")]
        children = self._jsx_children(opening.end_byte, closing.start_byte, node.children[1:-1])
        return self._jsx_call(self._jsx_type(name), self._jsx_props(attributes), children)

    def _e_jsx_self_closing_element(self, node: Any) -> str:
        self._check_jsx(node)
        name = node.child_by_field_name("name")
        attributes = [c for c in self._named(node) if c.type in ("jsx_attribute", "jsx_expression")]
        return self._jsx_call(self._jsx_type(name), self._jsx_props(attributes), [])

    def _e_jsx_fragment(self, node: Any) -> str:
        # Older grammars parse `<>...</>` as a node of its own
        self._check_jsx(node)
        children = self._jsx_children(node.children[0].end_byte, node.children[-1].start_byte, node.children)
        return self._jsx_call(None, "None", children)
