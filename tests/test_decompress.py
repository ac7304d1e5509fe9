# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from dataclasses import replace

import pytest
from marshmallow import ValidationError

from dashfilters.compress import compress_dashboard_filters_to_param
from dashfilters.decompress import (
    convert_dashboard_filters_param_to_dashboard_filters,
    decompress_filter_rule,
    decompress_tile_targets,
)
from dashfilters.model.dashboard import (
    CompressedDashboardFilters,
    CompressedDashboardFiltersSchema,
    DashboardFilters,
    DashboardFiltersSchema,
)
from dashfilters.model.target import FilterTarget
from dashfilters.model.tile_target import DisabledTileTarget, LegacyTileTarget, OverrideTileTarget

other_target = FilterTarget(field_id="other-field", table_name="other-table", field_name="other-field")

other_target_dict = {
    "fieldId": "other-field",
    "tableName": "other-table",
    "fieldName": "other-field",
}

dummy_url_filter_dict = {
    "id": "url-dimension",
    "label": "a label",
    "operator": "equals",
    "target": {
        "fieldId": "payments_payment_method",
        "tableName": "payments",
        "fieldName": "payment_method",
    },
    "tileTargets": [],
    "disabled": False,
    "values": ["credit_card"],
}


def load_tile_targets(tile_targets: list) -> dict:
    compressed_dashboard_filters = CompressedDashboardFiltersSchema().load(
        dict(
            dimensions=[{**dummy_url_filter_dict, "tileTargets": tile_targets}],
            metrics=[],
            tableCalculations=[],
        )
    )
    assert isinstance(compressed_dashboard_filters, CompressedDashboardFilters)
    dashboard_filters = convert_dashboard_filters_param_to_dashboard_filters(compressed_dashboard_filters)
    return dashboard_filters.dimensions[0].tile_targets


def test_no_tile_targets():
    compressed_dashboard_filters = CompressedDashboardFiltersSchema().load(
        dict(dimensions=[dummy_url_filter_dict], metrics=[], tableCalculations=[])
    )
    dashboard_filters = convert_dashboard_filters_param_to_dashboard_filters(compressed_dashboard_filters)

    assert DashboardFiltersSchema().dump(dashboard_filters) == {
        "dimensions": [{**dummy_url_filter_dict, "tileTargets": {}}],
        "metrics": [],
        "tableCalculations": [],
    }


def test_override_tile():
    tile_targets = load_tile_targets([{"chart-id-modified-filter": other_target_dict}])

    assert tile_targets == {"chart-id-modified-filter": other_target}


def test_disabled_tile():
    tile_targets = load_tile_targets([{"chart-id-no-filter": False}])

    assert tile_targets == {"chart-id-no-filter": False}


def test_legacy_tile_id_is_omitted():
    tile_targets = load_tile_targets(["an-id"])

    assert tile_targets == {}


def test_legacy_disabled_and_override():
    tile_targets = load_tile_targets(
        [
            "an-id",
            {"chart-id-no-filter": False},
            "another-id",
            {"chart-id-modified-filter": other_target_dict},
        ]
    )

    assert tile_targets == {
        "chart-id-no-filter": False,
        "chart-id-modified-filter": other_target,
    }


def test_last_entry_wins():
    tile_targets = decompress_tile_targets(
        [
            DisabledTileTarget("chart-id"),
            OverrideTileTarget("other-chart-id", other_target),
            OverrideTileTarget("chart-id", other_target),
            DisabledTileTarget("other-chart-id"),
        ]
    )

    assert tile_targets == {"chart-id": other_target, "other-chart-id": False}


def test_legacy_entry_is_logged(caplog):
    caplog.set_level("DEBUG", logger="dashfilters")

    assert decompress_tile_targets([LegacyTileTarget("an-id")]) == {}
    assert "an-id" in caplog.text


def test_unknown_tile_target():
    with pytest.raises(ValueError):
        decompress_tile_targets(["an-id"])  # type: ignore[list-item]


@pytest.mark.parametrize(
    "tile_target",
    [
        1,
        True,
        None,
        ["an-id"],
        {},
        {"chart-id": False, "other-chart-id": False},
        {"chart-id": True},
        {"chart-id": "other-field"},
        {"chart-id": {"fieldId": "other-field"}},
        {"chart-id": {**other_target_dict, "unknown": "value"}},
    ],
)
def test_invalid_tile_target(tile_target):
    with pytest.raises(ValidationError):
        load_tile_targets([tile_target])


def test_round_trip(dummy_dimension, different_target):
    dashboard_filters = DashboardFilters(
        dimensions=[
            replace(dummy_dimension, tile_targets={"chart-id": False, "other-chart-id": different_target}),
            replace(dummy_dimension, id="filter-id-2"),
        ],
        metrics=[replace(dummy_dimension, id="metric-filter-id", tile_targets={"chart-id": False})],
        table_calculations=[replace(dummy_dimension, id="table-calculation-filter-id")],
    )

    compressed_dashboard_filters = compress_dashboard_filters_to_param(dashboard_filters)
    assert convert_dashboard_filters_param_to_dashboard_filters(compressed_dashboard_filters) == dashboard_filters


def test_round_trip_drops_default(dummy_dimension, payment_method_target, different_target):
    dashboard_filters = DashboardFilters(
        dimensions=[
            replace(
                dummy_dimension,
                tile_targets={
                    "chart-id": payment_method_target,
                    "chart-id-no-filter": False,
                    "chart-id-modified-filter": different_target,
                },
            )
        ]
    )

    compressed_dashboard_filters = compress_dashboard_filters_to_param(dashboard_filters)
    (rule,) = convert_dashboard_filters_param_to_dashboard_filters(compressed_dashboard_filters).dimensions

    assert rule.tile_targets == {
        "chart-id-no-filter": False,
        "chart-id-modified-filter": different_target,
    }
    assert rule.get_tile_target("chart-id") == payment_method_target


def test_rule_attributes_are_kept(dummy_url_filter):
    rule = decompress_filter_rule(replace(dummy_url_filter, disabled=True))

    assert rule.id == "url-dimension"
    assert rule.label == "a label"
    assert rule.operator == "equals"
    assert rule.disabled is True
    assert list(rule.values) == ["credit_card"]
    assert rule.tile_targets == {}
