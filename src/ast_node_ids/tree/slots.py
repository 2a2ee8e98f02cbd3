"""The closed grammar: every node variant and its ordered child slots.

Each concrete ``ast`` node class is declared here with the fields through
which child *nodes* are reachable, in the class's ASDL field order.  Fields
holding plain values (identifiers, constants, ints) are not slots.  Neither
are the token-like kinds ``expr_context``, ``boolop``, ``operator``,
``unaryop`` and ``cmpop``: CPython hands out one shared instance of each
(every ``Load()`` in a tree is the same object), so they cannot be told apart
by identity and carry no position of their own.

Slot kinds:

- ``ONE``:      required child; a missing value is a ``MalformedNodeError``.
- ``OPTIONAL``: child or ``None``.
- ``MANY``:     ordered list; children are labelled ``"0"``, ``"1"``, ...
                ``None`` entries (``Dict.keys`` for ``**spread``,
                ``arguments.kw_defaults``) are skipped but keep their index.
- ``KEYED``:    mapping from name to child, walked in sorted key order.

Classes that only exist on newer interpreters are declared by name and
registered only when the running ``ast`` module defines them.  Fields an
interpreter lacks (``type_params`` before 3.12) read as empty.
"""

from __future__ import annotations

import ast
import threading
from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum, auto
from types import MappingProxyType

from cachetools import LRUCache, cached

from ast_node_ids.errors import UnknownNodeTypeError
from ast_node_ids.tree.nodes import Package, SourceFile

__all__ = ["SLOT_TABLE", "Slot", "SlotKind", "slots_for"]


class SlotKind(StrEnum):
    """How many children a slot holds and how they are labelled."""

    ONE = auto()
    OPTIONAL = auto()
    MANY = auto()
    KEYED = auto()


@dataclass(frozen=True, slots=True)
class Slot:
    """A named position under a node through which children are reachable."""

    name: str
    kind: SlotKind


def _one(name: str) -> Slot:
    return Slot(name, SlotKind.ONE)


def _opt(name: str) -> Slot:
    return Slot(name, SlotKind.OPTIONAL)


def _many(name: str) -> Slot:
    return Slot(name, SlotKind.MANY)


_AST_GRAMMAR: dict[str, tuple[Slot, ...]] = {
    # Modules
    "Module": (_many("body"), _many("type_ignores")),
    "Interactive": (_many("body"),),
    "Expression": (_one("body"),),
    "FunctionType": (_many("argtypes"), _one("returns")),
    # Statements
    "FunctionDef": (
        _one("args"),
        _many("body"),
        _many("decorator_list"),
        _opt("returns"),
        _many("type_params"),
    ),
    "AsyncFunctionDef": (
        _one("args"),
        _many("body"),
        _many("decorator_list"),
        _opt("returns"),
        _many("type_params"),
    ),
    "ClassDef": (
        _many("bases"),
        _many("keywords"),
        _many("body"),
        _many("decorator_list"),
        _many("type_params"),
    ),
    "Return": (_opt("value"),),
    "Delete": (_many("targets"),),
    "Assign": (_many("targets"), _one("value")),
    "TypeAlias": (_one("name"), _many("type_params"), _one("value")),
    "AugAssign": (_one("target"), _one("value")),
    "AnnAssign": (_one("target"), _one("annotation"), _opt("value")),
    "For": (_one("target"), _one("iter"), _many("body"), _many("orelse")),
    "AsyncFor": (_one("target"), _one("iter"), _many("body"), _many("orelse")),
    "While": (_one("test"), _many("body"), _many("orelse")),
    "If": (_one("test"), _many("body"), _many("orelse")),
    "With": (_many("items"), _many("body")),
    "AsyncWith": (_many("items"), _many("body")),
    "Match": (_one("subject"), _many("cases")),
    "Raise": (_opt("exc"), _opt("cause")),
    "Try": (_many("body"), _many("handlers"), _many("orelse"), _many("finalbody")),
    "TryStar": (
        _many("body"),
        _many("handlers"),
        _many("orelse"),
        _many("finalbody"),
    ),
    "Assert": (_one("test"), _opt("msg")),
    "Import": (_many("names"),),
    "ImportFrom": (_many("names"),),
    "Global": (),
    "Nonlocal": (),
    "Expr": (_one("value"),),
    "Pass": (),
    "Break": (),
    "Continue": (),
    # Expressions
    "BoolOp": (_many("values"),),
    "NamedExpr": (_one("target"), _one("value")),
    "BinOp": (_one("left"), _one("right")),
    "UnaryOp": (_one("operand"),),
    "Lambda": (_one("args"), _one("body")),
    "IfExp": (_one("test"), _one("body"), _one("orelse")),
    "Dict": (_many("keys"), _many("values")),
    "Set": (_many("elts"),),
    "ListComp": (_one("elt"), _many("generators")),
    "SetComp": (_one("elt"), _many("generators")),
    "DictComp": (_one("key"), _one("value"), _many("generators")),
    "GeneratorExp": (_one("elt"), _many("generators")),
    "Await": (_one("value"),),
    "Yield": (_opt("value"),),
    "YieldFrom": (_one("value"),),
    "Compare": (_one("left"), _many("comparators")),
    "Call": (_one("func"), _many("args"), _many("keywords")),
    "FormattedValue": (_one("value"), _opt("format_spec")),
    "Interpolation": (_one("value"), _opt("format_spec")),
    "JoinedStr": (_many("values"),),
    "TemplateStr": (_many("values"),),
    "Constant": (),
    "Attribute": (_one("value"),),
    "Subscript": (_one("value"), _one("slice")),
    "Starred": (_one("value"),),
    "Name": (),
    "List": (_many("elts"),),
    "Tuple": (_many("elts"),),
    "Slice": (_opt("lower"), _opt("upper"), _opt("step")),
    # Helper nodes
    "comprehension": (_one("target"), _one("iter"), _many("ifs")),
    "ExceptHandler": (_opt("type"), _many("body")),
    "arguments": (
        _many("posonlyargs"),
        _many("args"),
        _opt("vararg"),
        _many("kwonlyargs"),
        _many("kw_defaults"),
        _opt("kwarg"),
        _many("defaults"),
    ),
    "arg": (_opt("annotation"),),
    "keyword": (_one("value"),),
    "alias": (),
    "withitem": (_one("context_expr"), _opt("optional_vars")),
    "match_case": (_one("pattern"), _opt("guard"), _many("body")),
    # Patterns
    "MatchValue": (_one("value"),),
    "MatchSingleton": (),
    "MatchSequence": (_many("patterns"),),
    "MatchMapping": (_many("keys"), _many("patterns")),
    "MatchClass": (_one("cls"), _many("patterns"), _many("kwd_patterns")),
    "MatchStar": (),
    "MatchAs": (_opt("pattern"),),
    "MatchOr": (_many("patterns"),),
    # Type ignores and type parameters
    "TypeIgnore": (),
    "TypeVar": (_opt("bound"), _opt("default_value")),
    "ParamSpec": (_opt("default_value"),),
    "TypeVarTuple": (_opt("default_value"),),
}


def _build_table() -> Mapping[type, tuple[Slot, ...]]:
    table: dict[type, tuple[Slot, ...]] = {
        getattr(ast, name): slots
        for name, slots in _AST_GRAMMAR.items()
        if hasattr(ast, name)
    }
    table[SourceFile] = (_one("module"),)
    table[Package] = (Slot("files", SlotKind.KEYED),)
    return MappingProxyType(table)


SLOT_TABLE: Mapping[type, tuple[Slot, ...]] = _build_table()


@cached(cache=LRUCache(maxsize=256), lock=threading.Lock())
def slots_for(node_type: type) -> tuple[Slot, ...]:
    """Return the ordered child slots of ``node_type``.

    Exact matches come straight from ``SLOT_TABLE``.  A subclass of a known
    variant (a user-defined ``ast.Name`` subclass, say) resolves to the
    nearest registered class in its MRO.  Lookups are memoised in one
    process-wide cache guarded by a lock; it only ever holds immutable slot
    tuples, so walks running side by side share no mutable state through it.
    Failures are not cached.

    Raises:
        UnknownNodeTypeError: If neither ``node_type`` nor any of its bases
            is part of the grammar.
    """
    for klass in node_type.__mro__:
        slots = SLOT_TABLE.get(klass)
        if slots is not None:
            return slots
    raise UnknownNodeTypeError(node_type)
