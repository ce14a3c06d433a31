"""
Rule table contracts.

A rule table holds one RuleSet per name kind. Each RuleSet has two ordered
lists of rules: ``exceptions`` are matched against the whole word and
``suffixes`` against the word ending. The first matching rule wins, so the
order of rules inside a list is significant.

Modifiers are stored in the compact notation of the published petrovich
rules (``"--ой"``: drop two letters, then append "ой"; ``"."``: no change) and
are parsed into typed edit operations when the table is built.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..constants import DELETE_LAST_MARK, IDENTITY_MARK, MODIFIERS_PER_RULE
from .base_contracts import Gender, NameKind


@dataclass(frozen=True)
class DeleteLast:
    """Remove the last character of the word"""


@dataclass(frozen=True)
class Append:
    """Append a single character to the word"""

    char: str


EditOp = Union[DeleteLast, Append]


class Modifier:
    """Immutable edit script that turns a nominative form into another case"""

    __slots__ = ("_ops", "_source")

    def __init__(self, ops: Iterable[EditOp] = (), source: Optional[str] = None):
        ops = tuple(ops)
        object.__setattr__(self, "_ops", ops)
        object.__setattr__(self, "_source", source if source is not None else _render(ops))

    def __setattr__(self, name, value):
        raise AttributeError("Modifier is immutable")

    @classmethod
    def parse(cls, notation: str) -> "Modifier":
        """Parse rule-table notation into edit operations"""
        ops: List[EditOp] = []
        for ch in notation:
            if ch == DELETE_LAST_MARK:
                ops.append(DeleteLast())
            elif ch != IDENTITY_MARK:
                ops.append(Append(ch))
        return cls(ops, notation)

    @property
    def ops(self) -> Tuple[EditOp, ...]:
        return self._ops

    @property
    def is_identity(self) -> bool:
        return not self._ops

    def __iter__(self):
        return iter(self._ops)

    def __len__(self) -> int:
        return len(self._ops)

    def __eq__(self, other) -> bool:
        if isinstance(other, Modifier):
            return self._ops == other._ops
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._ops)

    def __str__(self) -> str:
        return self._source

    def __repr__(self) -> str:
        return f"Modifier({self._source!r})"


def _render(ops: Tuple[EditOp, ...]) -> str:
    if not ops:
        return IDENTITY_MARK
    return "".join(DELETE_LAST_MARK if isinstance(op, DeleteLast) else op.char for op in ops)


Modifier.IDENTITY = Modifier((), IDENTITY_MARK)


class Rule(BaseModel):
    """One inflection pattern"""

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    gender: Gender
    test: Tuple[str, ...]
    mods: Tuple[Modifier, ...]
    tags: Tuple[str, ...] = ()

    @field_validator("test", mode="before")
    @classmethod
    def normalize_test(cls, v):
        if isinstance(v, str):
            v = [v]
        if not v:
            raise ValueError("rule must have at least one test string")
        normalized = []
        for item in v:
            if not isinstance(item, str) or not item:
                raise ValueError(f"test strings must be non-empty strings, got {item!r}")
            normalized.append(item.lower())
        return tuple(normalized)

    @field_validator("mods", mode="before")
    @classmethod
    def parse_mods(cls, v):
        if not isinstance(v, (list, tuple)) or len(v) != MODIFIERS_PER_RULE:
            raise ValueError(f"rule must have exactly {MODIFIERS_PER_RULE} modifiers")
        mods = []
        for item in v:
            if isinstance(item, Modifier):
                mods.append(item)
            elif isinstance(item, str):
                mods.append(Modifier.parse(item))
            else:
                raise ValueError(f"modifier must be a string, got {item!r}")
        return tuple(mods)

    @field_validator("tags", mode="before")
    @classmethod
    def normalize_tags(cls, v):
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return tuple(v)


class RuleSet(BaseModel):
    """Ordered exception and suffix rules for one name kind"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    exceptions: Tuple[Rule, ...] = ()
    suffixes: Tuple[Rule, ...] = ()

    @field_validator("exceptions", "suffixes", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        return () if v is None else v

    def __len__(self) -> int:
        return len(self.exceptions) + len(self.suffixes)


class RuleTable(BaseModel):
    """Rule sets for last, first and middle names"""

    model_config = ConfigDict(frozen=True, extra="forbid")

    lastname: RuleSet
    firstname: RuleSet
    middlename: RuleSet

    def for_kind(self, kind: Union[NameKind, str]) -> RuleSet:
        return getattr(self, NameKind(kind).value)

    def stats(self) -> dict:
        """Rule counts per kind"""
        return {
            kind.value: {
                "exceptions": len(self.for_kind(kind).exceptions),
                "suffixes": len(self.for_kind(kind).suffixes),
            }
            for kind in NameKind
        }
