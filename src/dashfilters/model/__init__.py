# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from .dashboard import (
    CompressedDashboardFilters,
    CompressedDashboardFiltersSchema,
    DashboardFilters,
    DashboardFiltersSchema,
)
from .group import (
    Combinator,
    FilterGroup,
    FilterGroupItem,
    FilterGroupSchema,
    Filters,
    FiltersSchema,
    get_filter_rules_from_group,
    is_filter_group,
    is_filter_rule,
    iter_filter_group_items,
)
from .operator import ConditionalOperator
from .rule import (
    CompressedDashboardFilterRule,
    CompressedDashboardFilterRuleSchema,
    DashboardFilterRule,
    DashboardFilterRuleSchema,
    FilterRule,
    FilterRuleSchema,
)
from .target import FieldTargetSchema, FilterTarget, FilterTargetSchema
from .tile_target import (
    DisabledTileTarget,
    LegacyTileTarget,
    OverrideTileTarget,
    TileTarget,
    TileTargetValue,
)

__all__ = [
    "CompressedDashboardFilters",
    "CompressedDashboardFiltersSchema",
    "DashboardFilters",
    "DashboardFiltersSchema",
    "Combinator",
    "FilterGroup",
    "FilterGroupItem",
    "FilterGroupSchema",
    "Filters",
    "FiltersSchema",
    "get_filter_rules_from_group",
    "is_filter_group",
    "is_filter_rule",
    "iter_filter_group_items",
    "ConditionalOperator",
    "CompressedDashboardFilterRule",
    "CompressedDashboardFilterRuleSchema",
    "DashboardFilterRule",
    "DashboardFilterRuleSchema",
    "FilterRule",
    "FilterRuleSchema",
    "FieldTargetSchema",
    "FilterTarget",
    "FilterTargetSchema",
    "DisabledTileTarget",
    "LegacyTileTarget",
    "OverrideTileTarget",
    "TileTarget",
    "TileTargetValue",
]
