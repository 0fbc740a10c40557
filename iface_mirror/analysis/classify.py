"""
Distinguishes property getters from property setters by their signatures.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from enum import Enum

from ..model.symbols import FunctionAttribute, FunctionSignature


class MemberKind(Enum):
    """Role of a member function in a generated proxy."""
    METHOD = "method"
    GETTER = "getter"
    SETTER = "setter"


def is_property_getter(function: FunctionSignature) -> bool:
    """A property getter is marked @property and returns something."""
    return (function.has_attribute(FunctionAttribute.PROPERTY)
            and not function.return_type.is_void())


def is_property_setter(function: FunctionSignature) -> bool:
    """Close relative of is_property_getter: marked @property, returns void."""
    return (function.has_attribute(FunctionAttribute.PROPERTY)
            and function.return_type.is_void())


def classify_member(function: FunctionSignature) -> MemberKind:
    if is_property_getter(function):
        return MemberKind.GETTER
    if is_property_setter(function):
        return MemberKind.SETTER
    return MemberKind.METHOD
