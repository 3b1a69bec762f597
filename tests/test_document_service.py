from __future__ import annotations

import pytest

from initiative.data.errors import DataValidationError
from initiative.domain.models import NPC, Character, Document, Game
from initiative.services.document_service import DocumentService


def _build_document() -> Document:
    game = Game(
        name="Lost Mine of Phandelver",
        characters={"c1": Character("Shandra"), "c2": Character("Tordek")},
        npcs={"n1": NPC("Sildar")},
    )
    return Document(games={"g1": game, "g2": Game(name="Curse of Strahd")})


def test_serialize_writes_version_and_omits_empty_rosters() -> None:
    payload = DocumentService().serialize(_build_document())

    assert payload["version"] == 1
    assert payload["games"]["g1"] == {
        "name": "Lost Mine of Phandelver",
        "characters": {"c1": {"name": "Shandra"}, "c2": {"name": "Tordek"}},
        "npcs": {"n1": {"name": "Sildar"}},
    }
    assert payload["games"]["g2"] == {"name": "Curse of Strahd"}


def test_deserialize_restores_identifiers_and_order() -> None:
    service = DocumentService()
    document = _build_document()

    restored = service.deserialize(service.serialize(document))

    assert restored == document
    assert list(restored.games) == ["g1", "g2"]
    assert list(restored.games["g1"].characters) == ["c1", "c2"]


def test_deserialize_empty_payload_is_empty_document() -> None:
    service = DocumentService()
    assert service.deserialize(None) == Document()
    assert service.deserialize({}) == Document()
    assert service.deserialize({"games": None}) == Document()


def test_deserialize_accepts_missing_version() -> None:
    document = DocumentService().deserialize({"games": {"g1": {"name": "Solo"}}})
    assert document.games["g1"] == Game(name="Solo")


def test_deserialize_rejects_unknown_version() -> None:
    with pytest.raises(DataValidationError, match="version"):
        DocumentService().deserialize({"version": 2, "games": {}})


def test_deserialize_rejects_non_mapping_root() -> None:
    with pytest.raises(DataValidationError):
        DocumentService().deserialize(["not", "a", "mapping"])


def test_deserialize_reports_path_of_bad_name() -> None:
    payload = {"games": {"g1": {"name": "Game", "characters": {"c1": {"name": 5}}}}}
    with pytest.raises(DataValidationError, match=r"games\.g1\.characters\.c1\.name"):
        DocumentService().deserialize(payload)


def test_deserialize_rejects_missing_game_name() -> None:
    with pytest.raises(DataValidationError, match=r"games\.g1\.name"):
        DocumentService().deserialize({"games": {"g1": {"characters": {}}}})


def test_deserialize_rejects_non_mapping_roster() -> None:
    with pytest.raises(DataValidationError, match=r"games\.g1\.npcs"):
        DocumentService().deserialize({"games": {"g1": {"name": "Game", "npcs": ["Sildar"]}}})
