"""Conversion between the in-memory Document and its persisted payload."""
from __future__ import annotations

from typing import Any, Callable, Dict, Mapping, TypeVar

from initiative.data.errors import DataValidationError
from initiative.domain.models import NPC, Character, Document, Game

DocumentPayload = Dict[str, Any]

_RecordT = TypeVar("_RecordT", Character, NPC)


class DocumentService:
    """Converts the Document to/from a validated, versioned payload."""

    DOCUMENT_VERSION = 1

    def serialize(self, document: Document) -> DocumentPayload:
        """Return a YAML-serializable payload for disk persistence."""
        games: Dict[str, Any] = {}
        for game_id, game in document.games.items():
            games[game_id] = self._serialize_game(game)
        return {"version": self.DOCUMENT_VERSION, "games": games}

    def deserialize(self, payload: object) -> Document:
        """Rebuild a Document from a persisted payload."""
        if payload is None:
            return Document()
        if not isinstance(payload, Mapping):
            raise DataValidationError("Data file must contain a mapping at the top level.")
        version = payload.get("version", self.DOCUMENT_VERSION)
        if version != self.DOCUMENT_VERSION:
            raise DataValidationError(f"Unsupported data file version: {version!r}")

        games_payload = payload.get("games")
        if games_payload is None:
            return Document()
        games_mapping = self._require_mapping(games_payload, "games")
        document = Document()
        for game_id, game_payload in games_mapping.items():
            game_key = self._require_str(game_id, "games key")
            document.games[game_key] = self._deserialize_game(game_payload, f"games.{game_key}")
        return document

    def _serialize_game(self, game: Game) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"name": game.name}
        # empty rosters are omitted to keep the file short
        if game.characters:
            payload["characters"] = {
                character_id: {"name": character.name} for character_id, character in game.characters.items()
            }
        if game.npcs:
            payload["npcs"] = {npc_id: {"name": npc.name} for npc_id, npc in game.npcs.items()}
        return payload

    def _deserialize_game(self, value: Any, context: str) -> Game:
        mapping = self._require_mapping(value, context)
        name = self._require_str(mapping.get("name"), f"{context}.name")
        characters = self._coerce_records(mapping.get("characters"), f"{context}.characters", Character)
        npcs = self._coerce_records(mapping.get("npcs"), f"{context}.npcs", NPC)
        return Game(name=name, characters=characters, npcs=npcs)

    def _coerce_records(
        self, value: Any, context: str, factory: Callable[[str], _RecordT]
    ) -> Dict[str, _RecordT]:
        if value is None:
            return {}
        mapping = self._require_mapping(value, context)
        result: Dict[str, _RecordT] = {}
        for record_id, entry in mapping.items():
            record_key = self._require_str(record_id, f"{context} key")
            entry_mapping = self._require_mapping(entry, f"{context}.{record_key}")
            name = self._require_str(entry_mapping.get("name"), f"{context}.{record_key}.name")
            result[record_key] = factory(name)
        return result

    @staticmethod
    def _require_mapping(value: Any, context: str) -> Mapping[Any, Any]:
        if not isinstance(value, Mapping):
            raise DataValidationError(f"{context} must be a mapping.")
        return value

    @staticmethod
    def _require_str(value: Any, context: str) -> str:
        if not isinstance(value, str):
            raise DataValidationError(f"{context} must be a string.")
        return value
