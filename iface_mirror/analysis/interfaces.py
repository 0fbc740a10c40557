"""
Reduces a class or interface to the single interface it stands for.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
from typing import List

from ..errors import MultipleInterfacesError, UnsupportedSymbolKindError
from ..model.symbols import AggregateType
from ..model.types import TypeRef

logger = logging.getLogger(__name__)


def implemented_interfaces(cls: AggregateType) -> List[AggregateType]:
    """
    Get all interfaces a class implements, directly or transitively.

    Interfaces of base classes and base interfaces of implemented interfaces
    are included. The result is deduplicated, in first-seen order.
    """
    result: List[AggregateType] = []

    def visit(aggregate: AggregateType) -> None:
        if aggregate.base_class is not None:
            visit(aggregate.base_class)
        for iface in aggregate.interfaces:
            if not any(iface is known for known in result):
                result.append(iface)
            visit(iface)

    visit(cls)
    return result


def reduce_to_interface(type_ref: TypeRef) -> AggregateType:
    """
    Given some class or interface, reduce it to a single interface.

    Args:
        type_ref: An interface, or a class implementing exactly one interface

    Returns:
        The interface itself, or the only interface the class implements

    Raises:
        MultipleInterfacesError: If the class implements zero or several interfaces
        UnsupportedSymbolKindError: If the type is neither a class nor an interface
    """
    if type_ref.is_interface():
        return type_ref

    if not type_ref.is_class():
        raise UnsupportedSymbolKindError(
            f"Type must be a class or an interface, got {type_ref.kind.value} '{type_ref}'",
            type_ref
        )

    ifaces = implemented_interfaces(type_ref)
    if len(ifaces) != 1:
        names = ", ".join(i.qualified_name() for i in ifaces) or "none"
        raise MultipleInterfacesError(
            f"Type must be either provided as an interface or implement only one "
            f"interface; '{type_ref}' implements {len(ifaces)} ({names})",
            type_ref
        )

    logger.debug(f"Reduced {type_ref} to interface {ifaces[0]}")
    return ifaces[0]
