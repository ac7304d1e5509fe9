# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from typing import Iterable

from .compress import get_rule_attributes
from .logging import logger
from .model.dashboard import CompressedDashboardFilters, DashboardFilters
from .model.rule import CompressedDashboardFilterRule, DashboardFilterRule
from .model.tile_target import (
    DisabledTileTarget,
    LegacyTileTarget,
    OverrideTileTarget,
    TileTarget,
    TileTargetValue,
)


def decompress_tile_targets(tile_targets: Iterable[TileTarget]) -> dict[str, TileTargetValue]:
    """
    Merge the wire form list into a mapping by tile id.

    Later entries overwrite earlier ones for the same tile. Bare tile ids from
    older configs do not say anything about the tile, so they are skipped.
    """
    tile_target_dict: dict[str, TileTargetValue] = dict()

    for tile_target in tile_targets:
        match tile_target:
            case LegacyTileTarget(tile_id=tile_id):
                logger.debug(f'Skipping legacy tile target "{tile_id}"')
            case DisabledTileTarget(tile_id=tile_id):
                tile_target_dict[tile_id] = False
            case OverrideTileTarget(tile_id=tile_id, target=target):
                tile_target_dict[tile_id] = target
            case _:
                raise ValueError(f'Unknown tile target "{tile_target!r}"')

    return tile_target_dict


def decompress_filter_rule(rule: CompressedDashboardFilterRule) -> DashboardFilterRule:
    return DashboardFilterRule(
        **get_rule_attributes(rule),
        tile_targets=decompress_tile_targets(rule.tile_targets),
    )


def convert_dashboard_filters_param_to_dashboard_filters(
    compressed_dashboard_filters: CompressedDashboardFilters,
) -> DashboardFilters:
    return DashboardFilters(
        dimensions=[decompress_filter_rule(rule) for rule in compressed_dashboard_filters.dimensions],
        metrics=[decompress_filter_rule(rule) for rule in compressed_dashboard_filters.metrics],
        table_calculations=[decompress_filter_rule(rule) for rule in compressed_dashboard_filters.table_calculations],
    )
