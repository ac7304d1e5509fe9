# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from dataclasses import fields
from typing import Any

from .logging import logger
from .model.dashboard import CompressedDashboardFilters, DashboardFilters
from .model.rule import CompressedDashboardFilterRule, DashboardFilterRule, FilterRule
from .model.target import FilterTarget
from .model.tile_target import DisabledTileTarget, OverrideTileTarget, TileTarget


def get_rule_attributes(rule: FilterRule) -> dict[str, Any]:
    """
    Collect the attributes that all filter rule forms have in common
    """
    return {f.name: getattr(rule, f.name) for f in fields(FilterRule)}


def compress_tile_targets(rule: DashboardFilterRule) -> list[TileTarget]:
    tile_targets: list[TileTarget] = list()

    for tile_id, value in rule.tile_targets.items():
        if value is False:
            tile_targets.append(DisabledTileTarget(tile_id))

        elif isinstance(value, FilterTarget):
            if value == rule.target:
                logger.debug(f'Omitting tile target "{tile_id}" of filter rule "{rule.id}" because it is the default')
                continue
            tile_targets.append(OverrideTileTarget(tile_id, value))

        else:
            raise ValueError(f'Invalid tile target "{value!r}" for tile "{tile_id}" in filter rule "{rule.id}"')

    return tile_targets


def compress_filter_rule(rule: DashboardFilterRule) -> CompressedDashboardFilterRule:
    return CompressedDashboardFilterRule(
        **get_rule_attributes(rule),
        tile_targets=compress_tile_targets(rule),
    )


def compress_dashboard_filters_to_param(dashboard_filters: DashboardFilters) -> CompressedDashboardFilters:
    return CompressedDashboardFilters(
        dimensions=[compress_filter_rule(rule) for rule in dashboard_filters.dimensions],
        metrics=[compress_filter_rule(rule) for rule in dashboard_filters.metrics],
        table_calculations=[compress_filter_rule(rule) for rule in dashboard_filters.table_calculations],
    )
