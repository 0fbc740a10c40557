"""
Type dependency collection.

Walks type expressions down to the aggregates and enums they are built
from, and turns those into the list of modules generated code must import.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
from typing import Iterator, List, Optional

from ..errors import UnsupportedSymbolKindError
from ..model.symbols import AggregateType
from ..model.types import (
    TypeRef, ArrayType, AssociativeArrayType, PointerType, QualifiedType
)

logger = logging.getLogger(__name__)


def _walk(type_ref: TypeRef) -> Iterator[TypeRef]:
    if type_ref.is_nameable():
        yield type_ref
    elif isinstance(type_ref, ArrayType):
        yield from _walk(type_ref.element)
    elif isinstance(type_ref, AssociativeArrayType):
        # Value before key
        yield from _walk(type_ref.value)
        yield from _walk(type_ref.key)
    elif isinstance(type_ref, PointerType):
        yield from _walk(type_ref.target)
    elif isinstance(type_ref, QualifiedType):
        yield from _walk(type_ref.inner)


def collect_nameable_types(type_ref: TypeRef) -> List[TypeRef]:
    """
    Get all aggregates and enums a type is built from.

    Arrays, associative arrays, pointers and qualifiers are unwrapped;
    basic types contribute nothing. Duplicates are kept.

    Args:
        type_ref: Type to decompose

    Returns:
        Nameable types in the order they were reached
    """
    return list(_walk(type_ref))


def module_of(type_ref: TypeRef) -> Optional[str]:
    """Get the module a nameable type originates from, if any."""
    return type_ref.get_module()


def collect_required_imports(interface: AggregateType) -> List[str]:
    """
    For a given interface, find all user-defined types used in its method
    signatures and list the modules they originate from.

    Returns:
        Module names without duplicates, in first-seen order
    """
    if not interface.is_interface():
        raise UnsupportedSymbolKindError(
            f"Required imports can only be collected for interfaces, got "
            f"{interface.kind.value} '{interface}'",
            interface
        )

    modules: List[str] = []
    visited = set()

    def add_module(type_ref: TypeRef) -> None:
        name = module_of(type_ref)
        if name is None:
            logger.debug(f"No module for {type_ref}, skipping")
            return
        if name not in visited:
            visited.add(name)
            modules.append(name)

    for method in interface.member_functions():
        for symbol in collect_nameable_types(method.return_type):
            add_module(symbol)
        for param_type in method.parameter_types():
            for symbol in collect_nameable_types(param_type):
                add_module(symbol)

    logger.debug(f"Required imports for {interface}: {modules}")
    return modules
