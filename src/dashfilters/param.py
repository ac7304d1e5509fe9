# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

"""
Encode dashboard filters as a single string, for use in shareable urls and
persisted dashboard configs. Only the compressed form is ever written.
"""

import json
from typing import Any, Mapping
from urllib.parse import quote, unquote

from .compress import compress_dashboard_filters_to_param
from .decompress import convert_dashboard_filters_param_to_dashboard_filters
from .logging import logger
from .model.dashboard import CompressedDashboardFilters, CompressedDashboardFiltersSchema, DashboardFilters
from .model.settings import load_settings


def dump_dashboard_filters_param(
    dashboard_filters: DashboardFilters,
    settings: Mapping[str, Any] | None = None,
) -> str:
    if settings is None:
        settings = load_settings()

    compressed_dashboard_filters = compress_dashboard_filters_to_param(dashboard_filters)
    data = CompressedDashboardFiltersSchema().dump(compressed_dashboard_filters)

    separators = (",", ":") if settings["compact_json"] else None
    param = json.dumps(data, separators=separators)

    if settings["quote_param"]:
        param = quote(param, safe="")

    logger.debug(f"Encoded dashboard filters to {len(param):d} characters")
    return param


def load_dashboard_filters_param(
    param: str,
    settings: Mapping[str, Any] | None = None,
) -> DashboardFilters:
    if settings is None:
        settings = load_settings()

    if settings["quote_param"]:
        param = unquote(param)

    data = json.loads(param)

    compressed_dashboard_filters = CompressedDashboardFiltersSchema().load(data)
    assert isinstance(compressed_dashboard_filters, CompressedDashboardFilters)

    return convert_dashboard_filters_param_to_dashboard_filters(compressed_dashboard_filters)
