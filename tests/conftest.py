# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

import pytest

from dashfilters.logging import logger
from dashfilters.model.operator import ConditionalOperator
from dashfilters.model.rule import CompressedDashboardFilterRule, DashboardFilterRule
from dashfilters.model.target import FilterTarget


@pytest.fixture(scope="session", autouse=True)
def logging(request: pytest.FixtureRequest) -> None:
    logging_plugin = request.config.pluginmanager.get_plugin("logging-plugin")
    if logging_plugin is None:
        raise ValueError("Logging plugin not found")
    logger.setLevel("DEBUG")
    logger.addHandler(logging_plugin.log_cli_handler)


@pytest.fixture
def payment_method_target() -> FilterTarget:
    return FilterTarget(
        field_id="payments_payment_method",
        table_name="payments",
        field_name="payment_method",
    )


@pytest.fixture
def different_target() -> FilterTarget:
    return FilterTarget(
        field_id="a_different_field",
        table_name="a_different_table",
        field_name="a_different_field",
    )


@pytest.fixture
def dummy_dimension(payment_method_target: FilterTarget) -> DashboardFilterRule:
    return DashboardFilterRule(
        id="filter-id",
        label="A label",
        operator=ConditionalOperator.EQUALS,
        target=payment_method_target,
        tile_targets={},
        disabled=False,
        values=["credit_card"],
    )


@pytest.fixture
def dummy_url_filter(payment_method_target: FilterTarget) -> CompressedDashboardFilterRule:
    return CompressedDashboardFilterRule(
        id="url-dimension",
        label="a label",
        operator=ConditionalOperator.EQUALS,
        target=payment_method_target,
        tile_targets=[],
        disabled=False,
        values=["credit_card"],
    )
