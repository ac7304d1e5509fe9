# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from marshmallow import RAISE, Schema, fields, post_dump, post_load, validate
from pyrsistent import pvector

from .operator import conditional_operators
from .target import FieldTargetSchema, FilterTarget, FilterTargetSchema
from .tile_target import TileTarget, TileTargetField, TileTargetValue, TileTargetValueField


@dataclass(frozen=True)
class FilterRule:
    id: str
    target: FilterTarget
    operator: str
    values: Sequence[Any] = ()
    disabled: bool = False
    label: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "values", pvector(self.values))


@dataclass(frozen=True)
class DashboardFilterRule(FilterRule):
    tile_targets: Mapping[str, TileTargetValue] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "tile_targets", dict(self.tile_targets))

    def get_tile_target(self, tile_id: str) -> FilterTarget | None:
        """
        Resolve the field that a tile filters on.

        Returns ``None`` if the tile is excluded from this filter rule. Tiles
        without an entry use the default target of the rule.
        """
        tile_target = self.tile_targets.get(tile_id)
        if tile_target is None:
            return self.target
        if tile_target is False:
            return None
        return tile_target


@dataclass(frozen=True)
class CompressedDashboardFilterRule(FilterRule):
    tile_targets: Sequence[TileTarget] = ()

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "tile_targets", pvector(self.tile_targets))


class FilterRuleSchema(Schema):
    class Meta:
        unknown = RAISE

    id = fields.Str(required=True)
    label = fields.Str(allow_none=True)
    target = fields.Nested(FieldTargetSchema, required=True)
    operator = fields.Str(validate=validate.OneOf(conditional_operators), required=True)
    values = fields.List(fields.Raw(allow_none=True), load_default=list)
    disabled = fields.Bool(dump_default=False, load_default=False)

    @post_load
    def make_object(self, data, **_):
        return FilterRule(**data)

    @post_dump
    def remove_none(self, data, **_):
        return {key: value for key, value in data.items() if value is not None}


class DashboardFilterRuleSchema(FilterRuleSchema):
    target = fields.Nested(FilterTargetSchema, required=True)
    tile_targets = fields.Dict(
        keys=fields.Str(),
        values=TileTargetValueField(),
        data_key="tileTargets",
        load_default=dict,
    )

    @post_load
    def make_object(self, data, **_):
        return DashboardFilterRule(**data)


class CompressedDashboardFilterRuleSchema(FilterRuleSchema):
    target = fields.Nested(FilterTargetSchema, required=True)
    tile_targets = fields.List(TileTargetField(), data_key="tileTargets", load_default=list)

    @post_load
    def make_object(self, data, **_):
        return CompressedDashboardFilterRule(**data)
