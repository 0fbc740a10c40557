"""
Declaration cloning

Clones a method signature including its name so that the resulting string
can be mixed into a descendant type to override it. All types in the result
are fully qualified.

Cloning goes through a structured intermediate representation,
DeclarationSignature, which format_signature turns into text.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import logging
from typing import List, Optional
from dataclasses import dataclass, field

from ..errors import UnsupportedSymbolKindError
from ..model.symbols import (
    AggregateType, Method, MethodQualifier, Parameter, Variadic,
    EXCLUSIVE_QUALIFIERS, NATIVE_LINKAGE
)

logger = logging.getLogger(__name__)

DEFAULT_OVERRIDE_BODY = "{ static typeof(return) ret; return ret; }"


@dataclass(frozen=True)
class ParameterDeclaration:
    """One parameter of a cloned declaration."""
    storage_classes: List[str]
    type_name: str
    name: Optional[str] = None

    def __str__(self) -> str:
        parts = list(self.storage_classes)
        parts.append(self.type_name)
        if self.name:
            parts.append(self.name)
        return " ".join(parts)


@dataclass(frozen=True)
class DeclarationSignature:
    """Everything a redeclaration consists of, before formatting."""
    name: str
    return_type: str
    parameters: List[ParameterDeclaration] = field(default_factory=list)
    variadic: Variadic = Variadic.NO
    linkage: Optional[str] = None
    attributes: List[str] = field(default_factory=list)
    shared: bool = False
    qualifier: Optional[str] = None


def _parameter_declaration(parameter: Parameter) -> ParameterDeclaration:
    return ParameterDeclaration(
        storage_classes=parameter.storage.tokens(),
        type_name=parameter.type.qualified_name(),
        name=parameter.name
    )


def build_signature(method: Method, native_linkage: str = NATIVE_LINKAGE) -> DeclarationSignature:
    """
    Build the intermediate representation of a method redeclaration.

    Args:
        method: Named method to clone
        native_linkage: Linkage that does not need an extern prefix

    Raises:
        UnsupportedSymbolKindError: If ``method`` is not a named method
    """
    if not isinstance(method, Method):
        raise UnsupportedSymbolKindError(
            f"Plain function or method symbol are expected, got {type(method).__name__}",
            method
        )

    qualifier = None
    for flag, keyword in EXCLUSIVE_QUALIFIERS:
        if method.has_qualifier(flag):
            qualifier = keyword
            break

    return DeclarationSignature(
        name=method.name,
        return_type=method.return_type.qualified_name(),
        parameters=[_parameter_declaration(p) for p in method.parameters],
        variadic=method.variadic,
        linkage=method.linkage if method.linkage != native_linkage else None,
        attributes=method.attributes.tokens(),
        shared=method.has_qualifier(MethodQualifier.SHARED),
        qualifier=qualifier
    )


def format_signature(signature: DeclarationSignature) -> str:
    """Format a declaration signature as source text."""
    linkage = f"extern({signature.linkage}) " if signature.linkage else ""
    attributes = "".join(f"{attr} " for attr in signature.attributes)
    params = ", ".join(str(p) for p in signature.parameters)
    params += signature.variadic.marker(bool(signature.parameters))

    result = f"{linkage}{attributes}{signature.return_type} {signature.name}({params})"
    if signature.shared:
        result = f"shared({result})"
    if signature.qualifier:
        result = f"{result} {signature.qualifier}"
    return result


def clone_function_declaration(method: Method, native_linkage: str = NATIVE_LINKAGE) -> str:
    """
    Clone a method declaration so it can be injected as an override.

    Returns:
        Fully qualified declaration without a body or terminating semicolon
    """
    declaration = format_signature(build_signature(method, native_linkage))
    logger.debug(f"Cloned {method.name}: {declaration}")
    return declaration


def clone_all_declarations(
    interface: AggregateType,
    body: str = DEFAULT_OVERRIDE_BODY,
    native_linkage: str = NATIVE_LINKAGE
) -> str:
    """
    Clone every member function of an interface, each followed by ``body``.

    Overloads are grouped by name, names in declaration order. Each
    declaration is terminated by a newline.
    """
    lines = []
    for method in interface.member_functions():
        lines.append(clone_function_declaration(method, native_linkage) + body + "\n")
    logger.debug(f"Cloned {len(lines)} declarations of {interface}")
    return "".join(lines)
