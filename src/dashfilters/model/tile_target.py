# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

"""
Per-tile exceptions to a dashboard filter rule.

At runtime a rule keeps a mapping from tile id to either ``False`` (the tile
ignores the filter) or a `FilterTarget` (the tile filters on another field).
On the wire the same information is an ordered list of single-key records.
Older configs may also contain bare tile id strings, which carry no
information and are decoded to `LegacyTileTarget` so that they can be skipped.
"""

from dataclasses import dataclass
from typing import Any, Literal, Mapping

from marshmallow import fields

from .target import FilterTarget, FilterTargetSchema

TileTargetValue = FilterTarget | Literal[False]


@dataclass(frozen=True)
class LegacyTileTarget:
    tile_id: str


@dataclass(frozen=True)
class DisabledTileTarget:
    tile_id: str


@dataclass(frozen=True)
class OverrideTileTarget:
    tile_id: str
    target: FilterTarget


TileTarget = LegacyTileTarget | DisabledTileTarget | OverrideTileTarget


class TileTargetValueField(fields.Field):
    default_error_messages = {
        "invalid": "Tile target must be false or a field target.",
    }

    def _serialize(self, value: Any, attr: str | None, obj: Any, **kwargs) -> Any:
        if value is None:
            return None
        if value is False:
            return False
        if isinstance(value, FilterTarget):
            return FilterTargetSchema().dump(value)
        raise ValueError(f'Cannot serialize tile target "{value!r}"')

    def _deserialize(self, value: Any, attr: str | None, data: Mapping[str, Any] | None, **kwargs) -> TileTargetValue:
        if value is False:
            return False
        if isinstance(value, Mapping):
            return FilterTargetSchema().load(value)
        raise self.make_error("invalid")


class TileTargetField(fields.Field):
    default_error_messages = {
        "invalid": "Tile target must be a tile id or a mapping with a single tile id.",
        "invalid_tile_id": "Tile id must be a string.",
        "invalid_value": "Tile target for {tile_id} must be false or a field target.",
    }

    def _serialize(self, value: Any, attr: str | None, obj: Any, **kwargs) -> Any:
        match value:
            case None:
                return None
            case LegacyTileTarget(tile_id=tile_id):
                return tile_id
            case DisabledTileTarget(tile_id=tile_id):
                return {tile_id: False}
            case OverrideTileTarget(tile_id=tile_id, target=target):
                return {tile_id: FilterTargetSchema().dump(target)}
        raise ValueError(f'Cannot serialize tile target "{value!r}"')

    def _deserialize(self, value: Any, attr: str | None, data: Mapping[str, Any] | None, **kwargs) -> TileTarget:
        if isinstance(value, str):
            return LegacyTileTarget(value)

        if not isinstance(value, Mapping) or len(value) != 1:
            raise self.make_error("invalid")

        ((tile_id, tile_value),) = value.items()
        if not isinstance(tile_id, str):
            raise self.make_error("invalid_tile_id")

        if tile_value is False:
            return DisabledTileTarget(tile_id)
        if isinstance(tile_value, Mapping):
            return OverrideTileTarget(tile_id, FilterTargetSchema().load(tile_value))

        raise self.make_error("invalid_value", tile_id=tile_id)
