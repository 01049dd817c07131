"""
Entity kinds recognised in Protocol Buffers schema files.

The kind table is fixed: each kind has a one-letter code, a singular name,
a plural description and a default-enabled flag. Which kinds are actually
emitted is decided by a ``KindSelection``, an immutable value built from
the defaults or from a ctags style ``--kinds`` string.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from .errors import KindSelectionError


class EntityKind(str, Enum):
    """Kinds of named entities extracted from .proto files."""

    PACKAGE = "package"
    MESSAGE = "message"
    FIELD = "field"
    ENUMERATOR = "enumerator"  # enum constant
    ENUM = "enum"
    SERVICE = "service"
    RPC = "rpc"


class KindDefinition(BaseModel):
    """
    Static description of one entity kind.

    Attributes:
        kind: The kind being described
        letter: Single-character code used in tags files and --kinds flags
        name: Singular display name
        description: Plural category label
        enabled: Whether tags of this kind are emitted by default
    """

    kind: EntityKind
    letter: str
    name: str
    description: str
    enabled: bool = True

    model_config = ConfigDict(frozen=True)


KIND_DEFINITIONS: tuple[KindDefinition, ...] = (
    KindDefinition(kind=EntityKind.PACKAGE, letter="p", name="package", description="packages"),
    KindDefinition(kind=EntityKind.MESSAGE, letter="m", name="message", description="messages"),
    KindDefinition(kind=EntityKind.FIELD, letter="f", name="field", description="fields"),
    KindDefinition(
        kind=EntityKind.ENUMERATOR, letter="e", name="enumerator", description="enum constants"
    ),
    KindDefinition(kind=EntityKind.ENUM, letter="g", name="enum", description="enum types"),
    KindDefinition(kind=EntityKind.SERVICE, letter="s", name="service", description="services"),
    KindDefinition(
        kind=EntityKind.RPC, letter="r", name="rpc", description="RPC methods", enabled=False
    ),
)

_BY_KIND = {d.kind: d for d in KIND_DEFINITIONS}
_BY_LETTER = {d.letter: d for d in KIND_DEFINITIONS}


def get_definition(kind: EntityKind) -> KindDefinition:
    """Return the table entry for a kind."""
    return _BY_KIND[kind]


def kind_for_letter(letter: str) -> EntityKind:
    """
    Look up a kind by its one-letter code.

    Raises:
        KindSelectionError: If no kind uses this letter
    """
    definition = _BY_LETTER.get(letter)
    if definition is None:
        known = "".join(_BY_LETTER)
        raise KindSelectionError(f"Unknown kind letter {letter!r} (known letters: {known})")
    return definition.kind


class KindSelection(BaseModel):
    """The set of kinds whose tags are emitted during a scan."""

    enabled: frozenset[EntityKind]

    model_config = ConfigDict(frozen=True)

    @classmethod
    def default(cls) -> KindSelection:
        """Selection using each kind's default-enabled flag."""
        return cls(enabled=frozenset(d.kind for d in KIND_DEFINITIONS if d.enabled))

    @classmethod
    def all_kinds(cls) -> KindSelection:
        """Selection enabling every kind."""
        return cls(enabled=frozenset(EntityKind))

    @classmethod
    def from_flags(cls, flags: str) -> KindSelection:
        """
        Build a selection from a ctags style kinds string.

        ``"+r"`` enables RPC methods on top of the defaults, ``"-f"`` drops
        fields from the defaults, ``"pmg"`` enables exactly packages,
        messages and enums, and ``"*"`` enables everything. Within a string
        each letter follows the most recent sign, so ``"+r-fe"`` enables
        RPC methods and disables fields and enum constants.

        Raises:
            KindSelectionError: If the string contains an unknown letter
        """
        flags = flags.strip()
        if not flags:
            return cls.default()

        if flags[0] in "+-":
            enabled = set(cls.default().enabled)
        else:
            enabled = set()

        mode = "+"
        for ch in flags:
            if ch in "+-":
                mode = ch
            elif ch == "*":
                if mode == "+":
                    enabled = set(EntityKind)
                else:
                    enabled.clear()
            elif ch.isspace() or ch == ",":
                continue
            else:
                kind = kind_for_letter(ch)
                if mode == "+":
                    enabled.add(kind)
                else:
                    enabled.discard(kind)

        return cls(enabled=frozenset(enabled))

    def is_enabled(self, kind: EntityKind) -> bool:
        return kind in self.enabled

    def to_flags(self) -> str:
        """Letters of the enabled kinds, in table order."""
        return "".join(d.letter for d in KIND_DEFINITIONS if d.kind in self.enabled)
