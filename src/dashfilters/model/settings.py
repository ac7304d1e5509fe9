# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from os import getenv
from typing import Any

from marshmallow import RAISE, Schema, fields, pre_load, validate

env_prefix = "DASHFILTERS_"

log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class SettingsSchema(Schema):
    class Meta:
        unknown = RAISE

    log_level = fields.Str(dump_default="WARNING", validate=validate.OneOf(log_levels))

    compact_json = fields.Boolean(dump_default=True)  # no whitespace in the json payload
    quote_param = fields.Boolean(dump_default=True)  # percent-encode for use in a query string

    @pre_load
    def fill_default_values(self, in_data, **_):  # make load_default equal to dump_default
        in_data = dict(in_data)
        for k, v in self.fields.items():
            if k not in in_data:
                in_data[k] = v.dump_default
        if isinstance(in_data["log_level"], str):
            in_data["log_level"] = in_data["log_level"].upper()
        return in_data


def load_settings(**overrides: Any) -> dict[str, Any]:
    """
    Read settings from `DASHFILTERS_*` environment variables, then apply
    keyword overrides on top
    """
    schema = SettingsSchema()

    in_data: dict[str, Any] = dict()
    for name in schema.fields.keys():
        value = getenv(f"{env_prefix}{name.upper()}")
        if value is not None:
            in_data[name] = value
    in_data.update(overrides)

    settings = schema.load(in_data)
    assert isinstance(settings, dict)
    return settings
