# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from dataclasses import dataclass

from marshmallow import RAISE, Schema, fields, post_dump, post_load


@dataclass(frozen=True)
class FilterTarget:
    field_id: str
    table_name: str | None = None
    field_name: str | None = None


class FieldTargetSchema(Schema):
    """
    Target of a saved-query filter rule, where only the field id is mandatory
    """

    class Meta:
        unknown = RAISE

    field_id = fields.Str(data_key="fieldId", required=True)
    table_name = fields.Str(data_key="tableName")
    field_name = fields.Str(data_key="fieldName")

    @post_load
    def make_object(self, data, **_):
        return FilterTarget(**data)

    @post_dump
    def remove_none(self, data, **_):
        return {key: value for key, value in data.items() if value is not None}


class FilterTargetSchema(FieldTargetSchema):
    table_name = fields.Str(data_key="tableName", required=True)
    field_name = fields.Str(data_key="fieldName", required=True)
