# -*- coding: utf-8 -*-
# emacs: -*- mode: python; py-indent-offset: 4; indent-tabs-mode: nil -*-
# vi: set ft=python sts=4 ts=4 sw=4 et:

from enum import StrEnum


class ConditionalOperator(StrEnum):
    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    NULL = "isNull"
    NOT_NULL = "notNull"
    STARTS_WITH = "startsWith"
    ENDS_WITH = "endsWith"
    INCLUDE = "include"
    NOT_INCLUDE = "doesNotInclude"
    LESS_THAN = "lessThan"
    LESS_THAN_OR_EQUAL = "lessThanOrEqual"
    GREATER_THAN = "greaterThan"
    GREATER_THAN_OR_EQUAL = "greaterThanOrEqual"
    IN_THE_PAST = "inThePast"
    NOT_IN_THE_PAST = "notInThePast"
    IN_THE_NEXT = "inTheNext"
    IN_THE_CURRENT = "inTheCurrent"
    NOT_IN_THE_CURRENT = "notInTheCurrent"
    IN_BETWEEN = "inBetween"


conditional_operators: list[str] = [operator.value for operator in ConditionalOperator]
