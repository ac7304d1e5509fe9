# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from dataclasses import dataclass
from typing import Sequence

from marshmallow import RAISE, Schema, ValidationError, fields, post_load, validates_schema
from pyrsistent import pvector

from .rule import (
    CompressedDashboardFilterRule,
    CompressedDashboardFilterRuleSchema,
    DashboardFilterRule,
    DashboardFilterRuleSchema,
)

collection_names = ["dimensions", "metrics", "table_calculations"]


@dataclass(frozen=True)
class DashboardFilters:
    dimensions: Sequence[DashboardFilterRule] = ()
    metrics: Sequence[DashboardFilterRule] = ()
    table_calculations: Sequence[DashboardFilterRule] = ()

    def __post_init__(self) -> None:
        for name in collection_names:
            object.__setattr__(self, name, pvector(getattr(self, name)))


@dataclass(frozen=True)
class CompressedDashboardFilters:
    dimensions: Sequence[CompressedDashboardFilterRule] = ()
    metrics: Sequence[CompressedDashboardFilterRule] = ()
    table_calculations: Sequence[CompressedDashboardFilterRule] = ()

    def __post_init__(self) -> None:
        for name in collection_names:
            object.__setattr__(self, name, pvector(getattr(self, name)))


class BaseDashboardFiltersSchema(Schema):
    class Meta:
        unknown = RAISE

    @validates_schema
    def validate_ids(self, data, **_):
        for name in collection_names:
            if name not in data:
                continue  # validation error will be raised independently
            ids = [rule.id for rule in data[name]]
            if len(ids) > len(set(ids)):
                raise ValidationError(f'Duplicate filter id in "{name}"')


class DashboardFiltersSchema(BaseDashboardFiltersSchema):
    dimensions = fields.List(fields.Nested(DashboardFilterRuleSchema), load_default=list)
    metrics = fields.List(fields.Nested(DashboardFilterRuleSchema), load_default=list)
    table_calculations = fields.List(
        fields.Nested(DashboardFilterRuleSchema),
        data_key="tableCalculations",
        load_default=list,
    )

    @post_load
    def make_object(self, data, **_):
        return DashboardFilters(**data)


class CompressedDashboardFiltersSchema(BaseDashboardFiltersSchema):
    dimensions = fields.List(fields.Nested(CompressedDashboardFilterRuleSchema), load_default=list)
    metrics = fields.List(fields.Nested(CompressedDashboardFilterRuleSchema), load_default=list)
    table_calculations = fields.List(
        fields.Nested(CompressedDashboardFilterRuleSchema),
        data_key="tableCalculations",
        load_default=list,
    )

    @post_load
    def make_object(self, data, **_):
        return CompressedDashboardFilters(**data)
