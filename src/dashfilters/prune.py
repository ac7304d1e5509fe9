# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from dataclasses import replace

from .logging import logger
from .model.group import FilterGroup, FilterGroupItem, Filters
from .model.rule import FilterRule


def remove_field_from_filter_group(filter_group: FilterGroup, field_id: str) -> FilterGroup | None:
    """
    Remove all filter rules that target a field from a filter group.

    Subgroups that end up without any items are removed as well. Returns
    ``None`` if nothing is left of the group. The input is not modified,
    and the result is built from new objects.

    Args:
        filter_group (FilterGroup): The filter group to prune.
        field_id (str): The id of the field to remove.

    Returns:
        FilterGroup | None: The pruned filter group, or ``None`` if it is empty.
    """
    children: list[FilterGroupItem] = list()

    for item in filter_group.children:
        match item:
            case FilterGroup():
                subgroup = remove_field_from_filter_group(item, field_id)
                if subgroup is not None:
                    children.append(subgroup)
            case FilterRule():
                if item.target.field_id == field_id:
                    logger.debug(f'Removing filter rule "{item.id}" because it targets field "{field_id}"')
                    continue
                children.append(replace(item))
            case _:
                raise ValueError(f'Unknown item "{item!r}" in filter group "{filter_group.id}"')

    if len(children) == 0:
        logger.debug(f'Removing filter group "{filter_group.id}" because it has no items left')
        return None

    return FilterGroup(id=filter_group.id, combinator=filter_group.combinator, children=children)


def remove_field_from_filters(filters: Filters, field_id: str) -> Filters:
    def prune(filter_group: FilterGroup | None) -> FilterGroup | None:
        if filter_group is None:
            return None
        return remove_field_from_filter_group(filter_group, field_id)

    return Filters(
        dimensions=prune(filters.dimensions),
        metrics=prune(filters.metrics),
        table_calculations=prune(filters.table_calculations),
    )
