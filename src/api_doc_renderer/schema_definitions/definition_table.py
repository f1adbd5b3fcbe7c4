"""Named schema definitions collected during one render pass."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Any

from api_doc_renderer.type_model import TypeIdentifier

DYNAMIC_DEFINITION_NAME = "JsonObject"
DEFINITIONS_POINTER_PREFIX = "#/definitions/"

_NUMBERED_SUFFIX = re.compile(r"^(?P<prefix>.*_)(?P<index>\d+)$")

logger = logging.getLogger(__name__)

SchemaFragment = dict[str, Any]


@dataclass(frozen=True)
class DefinitionEntry:
    """Definition fragment together with the raw type name that owns it."""

    owner: str
    fragment: SchemaFragment


class DefinitionTable:
    """Mapping of definition names to owned fragments; names are never released."""

    def __init__(self) -> None:
        self._entries: dict[str, DefinitionEntry] = {}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def owner_of(self, name: str) -> str | None:
        entry = self._entries.get(name)
        return entry.owner if entry else None

    def resolve_name(self, identifier: TypeIdentifier) -> str:
        """Return the definition name for an identifier, probing past foreign owners.

        The probe sequence is ``name``, ``name_2``, ``name_3`` and so on; the first name that
        is free or already owned by the same raw type wins.
        """
        base_name = (
            DYNAMIC_DEFINITION_NAME if identifier.is_dynamic else identifier.short_name
        )
        candidate = base_name
        while True:
            owner = self.owner_of(candidate)
            if owner is None or owner == identifier.raw_name:
                return candidate
            next_candidate = _next_candidate(candidate)
            logger.debug(
                "Definition name %s is owned by %s; trying %s for %s",
                candidate,
                owner,
                next_candidate,
                identifier.raw_name,
            )
            candidate = next_candidate

    def reserve(self, name: str, owner: str) -> None:
        """Record an empty placeholder so recursive lookups see the name as taken."""
        self._entries[name] = DefinitionEntry(owner=owner, fragment={})

    def finalize(self, name: str, fragment: SchemaFragment) -> None:
        entry = self._entries[name]
        self._entries[name] = DefinitionEntry(owner=entry.owner, fragment=fragment)

    def snapshot(self) -> dict[str, SchemaFragment]:
        """Definitions sorted by name."""
        return {name: self._entries[name].fragment for name in sorted(self._entries)}


def reference_to(name: str) -> SchemaFragment:
    return {"$ref": f"{DEFINITIONS_POINTER_PREFIX}{name}"}


def _next_candidate(name: str) -> str:
    match = _NUMBERED_SUFFIX.match(name)
    if match is None:
        return f"{name}_2"
    return f"{match.group('prefix')}{int(match.group('index')) + 1}"
