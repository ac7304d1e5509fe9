# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from dataclasses import dataclass
from enum import StrEnum
from typing import Any, Iterator, Mapping, Sequence, TypeGuard

from marshmallow import (
    RAISE,
    Schema,
    ValidationError,
    fields,
    post_dump,
    post_load,
    pre_load,
    validate,
    validates_schema,
)
from marshmallow_oneofschema import OneOfSchema
from pyrsistent import pvector

from .rule import FilterRule, FilterRuleSchema


class Combinator(StrEnum):
    AND = "and"
    OR = "or"


@dataclass(frozen=True)
class FilterGroup:
    id: str
    combinator: Combinator
    children: Sequence["FilterGroupItem"]

    def __post_init__(self) -> None:
        if len(self.children) == 0:
            raise ValueError(f'Filter group "{self.id}" needs at least one item')
        object.__setattr__(self, "combinator", Combinator(self.combinator))
        object.__setattr__(self, "children", pvector(self.children))


FilterGroupItem = FilterRule | FilterGroup


@dataclass(frozen=True)
class Filters:
    dimensions: FilterGroup | None = None
    metrics: FilterGroup | None = None
    table_calculations: FilterGroup | None = None


def is_filter_group(item: Any) -> TypeGuard[FilterGroup]:
    return isinstance(item, FilterGroup)


def is_filter_rule(item: Any) -> TypeGuard[FilterRule]:
    return isinstance(item, FilterRule)


def iter_filter_group_items(filter_group: FilterGroup) -> Iterator[FilterGroupItem]:
    """
    Walk a filter group in pre-order, starting with the group itself
    """
    yield filter_group
    for item in filter_group.children:
        if is_filter_group(item):
            yield from iter_filter_group_items(item)
        else:
            yield item


def get_filter_rules_from_group(filter_group: FilterGroup) -> list[FilterRule]:
    return [item for item in iter_filter_group_items(filter_group) if is_filter_rule(item)]


def strip_item(item: Mapping[str, Any]) -> dict[str, Any]:
    """
    Remove the type field that the item schema adds, and the disabled flag of
    rules when it is not set, as saved groups do not store it
    """
    return {key: value for key, value in item.items() if key != "type" and not (key == "disabled" and value is False)}


class FilterGroupSchema(Schema):
    """
    Persisted filter groups do not carry an explicit combinator. Instead the
    children are stored under a key named after it, e.g. ``{"id": "a", "or": [...]}``.
    We convert to and from that layout in the load and dump hooks.
    """

    class Meta:
        unknown = RAISE

    id = fields.Str(required=True)
    combinator = fields.Enum(Combinator, by_value=True, required=True)
    children = fields.List(
        fields.Nested(lambda: FilterGroupItemSchema()),
        validate=validate.Length(min=1),
        required=True,
    )

    @pre_load
    def split_combinator(self, in_data, **_):
        if not isinstance(in_data, Mapping):
            return in_data  # validation error will be raised independently

        keys = [combinator for combinator in Combinator if combinator.value in in_data]
        if len(keys) != 1:
            raise ValidationError('Filter group needs exactly one of "and" or "or"')
        (combinator,) = keys

        data = {key: value for key, value in in_data.items() if key != combinator.value}
        data["combinator"] = combinator.value
        data["children"] = in_data[combinator.value]
        return data

    @validates_schema
    def validate_ids(self, data, **_):
        if "children" not in data:
            return  # validation error will be raised independently
        ids = [data.get("id")]
        for child in data["children"]:
            if is_filter_group(child):
                ids.extend(item.id for item in iter_filter_group_items(child))
            else:
                ids.append(child.id)
        if len(ids) > len(set(ids)):
            raise ValidationError("Duplicate filter id")

    @post_load
    def make_object(self, data, **_):
        return FilterGroup(**data)

    @post_dump
    def join_combinator(self, data, **_):
        combinator = data.pop("combinator")
        children = data.pop("children")
        data[combinator] = [strip_item(child) for child in children]
        return data


class FilterGroupItemSchema(OneOfSchema):
    type_field = "type"
    type_field_remove = True
    type_schemas = {
        "rule": FilterRuleSchema,
        "group": FilterGroupSchema,
    }

    def get_data_type(self, data):
        if any(combinator.value in data for combinator in Combinator):
            return "group"
        return "rule"

    def get_obj_type(self, obj):
        if isinstance(obj, FilterGroup):
            return "group"
        if isinstance(obj, FilterRule):
            return "rule"
        raise ValueError(f"Cannot get type for {obj}")


class FiltersSchema(Schema):
    class Meta:
        unknown = RAISE

    dimensions = fields.Nested(FilterGroupSchema, allow_none=True)
    metrics = fields.Nested(FilterGroupSchema, allow_none=True)
    table_calculations = fields.Nested(FilterGroupSchema, data_key="tableCalculations", allow_none=True)

    @post_load
    def make_object(self, data, **_):
        return Filters(**data)

    @post_dump
    def remove_none(self, data, **_):
        return {key: value for key, value in data.items() if value is not None}
