"""Tests for the kind table, kind selection and tag model."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from prototags.core.errors import KindSelectionError
from prototags.core.kinds import (
    KIND_DEFINITIONS,
    EntityKind,
    KindSelection,
    get_definition,
    kind_for_letter,
)
from prototags.core.tags import Tag


class TestKindTable:
    def test_every_kind_has_one_definition(self) -> None:
        assert [d.kind for d in KIND_DEFINITIONS] == list(EntityKind)

    def test_letters_are_unique(self) -> None:
        letters = [d.letter for d in KIND_DEFINITIONS]
        assert len(letters) == len(set(letters))
        assert "".join(letters) == "pmfegsr"

    def test_only_rpc_disabled_by_default(self) -> None:
        disabled = [d.kind for d in KIND_DEFINITIONS if not d.enabled]
        assert disabled == [EntityKind.RPC]

    def test_labels(self) -> None:
        enumerator = get_definition(EntityKind.ENUMERATOR)
        assert enumerator.letter == "e"
        assert enumerator.name == "enumerator"
        assert enumerator.description == "enum constants"
        assert get_definition(EntityKind.RPC).description == "RPC methods"

    def test_definitions_are_immutable(self) -> None:
        with pytest.raises(ValidationError):
            KIND_DEFINITIONS[0].enabled = False

    def test_kind_for_letter(self) -> None:
        assert kind_for_letter("g") == EntityKind.ENUM

    def test_unknown_letter(self) -> None:
        with pytest.raises(KindSelectionError, match="'x'"):
            kind_for_letter("x")


class TestKindSelection:
    def test_default(self) -> None:
        selection = KindSelection.default()
        assert not selection.is_enabled(EntityKind.RPC)
        assert selection.is_enabled(EntityKind.FIELD)
        assert selection.to_flags() == "pmfegs"

    def test_empty_flags_mean_default(self) -> None:
        assert KindSelection.from_flags("") == KindSelection.default()

    def test_add_to_defaults(self) -> None:
        selection = KindSelection.from_flags("+r")
        assert selection.to_flags() == "pmfegsr"

    def test_remove_from_defaults(self) -> None:
        selection = KindSelection.from_flags("-f")
        assert selection.to_flags() == "pmegs"

    def test_exact_list(self) -> None:
        selection = KindSelection.from_flags("pm")
        assert selection.enabled == frozenset({EntityKind.PACKAGE, EntityKind.MESSAGE})

    def test_exact_list_then_modify(self) -> None:
        assert KindSelection.from_flags("pm+r").to_flags() == "pmr"

    def test_mixed_signs(self) -> None:
        selection = KindSelection.from_flags("+r-fe")
        assert selection.is_enabled(EntityKind.RPC)
        assert not selection.is_enabled(EntityKind.FIELD)
        assert not selection.is_enabled(EntityKind.ENUMERATOR)
        assert selection.is_enabled(EntityKind.MESSAGE)

    def test_star(self) -> None:
        assert KindSelection.from_flags("*") == KindSelection.all_kinds()
        assert KindSelection.from_flags("-*").enabled == frozenset()

    def test_unknown_letter(self) -> None:
        with pytest.raises(KindSelectionError):
            KindSelection.from_flags("+q")

    def test_default_is_not_changed_by_selections(self) -> None:
        KindSelection.from_flags("+r")
        assert not KindSelection.default().is_enabled(EntityKind.RPC)
        assert not get_definition(EntityKind.RPC).enabled


class TestTag:
    def test_derived_fields(self) -> None:
        tag = Tag(name="Color", kind=EntityKind.ENUM, line=3, file=Path("a/b.proto"))
        assert tag.letter == "g"
        assert tag.kind_name == "enum"
        assert tag.to_dict() == {
            "name": "Color",
            "kind": "enum",
            "letter": "g",
            "line": 3,
            "file": "a/b.proto",
        }

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Tag(name="", kind=EntityKind.MESSAGE)

    def test_non_identifier_name_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Tag(name="a.b", kind=EntityKind.MESSAGE)

    def test_tags_are_immutable(self) -> None:
        tag = Tag(name="A", kind=EntityKind.MESSAGE)
        with pytest.raises(ValidationError):
            tag.name = "B"
