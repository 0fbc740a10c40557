"""
Loads a reflection model from a JSON description.

The description lists modules, their types and the methods of those types.
Type expressions are structured JSON rather than source text:

    "int"                                    basic type or declared type name
    {"array": T}, {"array": T, "length": 4}  dynamic / static array
    {"key": K, "value": V}                   associative array V[K]
    {"pointer": T}                           pointer
    {"qualifier": "const", "type": T}        qualified type
    {"function": {...}}, {"delegate": {...}} function pointer / delegate

Type names are looked up in the enclosing scopes first, then as fully
qualified names.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .errors import ModelError
from .model.types import (
    TypeKind, TypeQualifier, TypeRef, NamedType, ArrayType,
    AssociativeArrayType, PointerType, QualifiedType, EnumType, BASIC_TYPES
)
from .model.symbols import (
    NATIVE_LINKAGE, StorageClass, FunctionAttribute, MethodQualifier, Variadic,
    Annotation, Parameter, FunctionPointerType, DelegateType, Method,
    AggregateType, ReflectionModel
)

logger = logging.getLogger(__name__)

AGGREGATE_KIND_NAMES = {
    "struct": TypeKind.STRUCT,
    "union": TypeKind.UNION,
    "class": TypeKind.CLASS,
    "interface": TypeKind.INTERFACE,
}


def _flags(flag_type, names: List[str], what: str):
    result = flag_type.NONE
    for name in names:
        try:
            result |= flag_type[name.lstrip('@').upper()]
        except KeyError:
            raise ModelError(f"Unknown {what} '{name}'") from None
    return result


class ModelLoader:
    """Builds a ReflectionModel from parsed JSON data."""

    def __init__(self):
        self.model = ReflectionModel()
        # Declarations waiting for their second pass
        self._pending: List[Tuple[Dict[str, Any], NamedType]] = []

    def load_dict(self, data: Dict[str, Any]) -> ReflectionModel:
        """Load all modules of a model description."""
        if not isinstance(data, dict) or not isinstance(data.get('modules'), list):
            raise ModelError("Model description must be an object with a 'modules' list")

        for module_data in data['modules']:
            module_name = module_data.get('name')
            if not module_name:
                raise ModelError("Module without a name")
            for type_data in module_data.get('types', []):
                declared = self._declare(type_data, module_name, None)
                self.model.add_type(declared)

        for type_data, declared in self._pending:
            self._define(type_data, declared)
        self._pending.clear()
        self._check_inheritance()

        logger.info(f"Loaded {len(self.model)} types from {len(data['modules'])} modules")
        return self.model

    def _declare(self, data: Dict[str, Any], module: str, parent: Optional[AggregateType]) -> NamedType:
        """First pass: create the type so that it can be referenced."""
        name = data.get('name')
        kind_name = data.get('kind', 'struct')
        if not name:
            raise ModelError(f"Type declaration without a name in module '{module}'")

        if kind_name == 'enum':
            declared = EnumType(name=name, module=module, members=list(data.get('members', [])))
        elif kind_name in AGGREGATE_KIND_NAMES:
            declared = AggregateType(name=name, kind=AGGREGATE_KIND_NAMES[kind_name], module=module)
            for nested_data in data.get('types', []):
                declared.add_nested(self._declare(nested_data, module, declared))
        else:
            raise ModelError(f"Unknown type kind '{kind_name}' for '{name}'")

        if parent is not None:
            declared.parent = parent
        self._pending.append((data, declared))
        return declared

    def _define(self, data: Dict[str, Any], declared: NamedType) -> None:
        """Second pass: resolve bases, members and annotations."""
        scopes = self._scopes(declared)
        declared.annotations = [
            self._annotation(a, scopes) for a in data.get('annotations', [])
        ]

        if isinstance(declared, EnumType):
            if 'base' in data:
                declared.base_type = self.resolve_type(data['base'], scopes)
            return

        # Bases are looked up from the enclosing scope, not from inside the type
        outer = scopes[1:]
        if data.get('base_class'):
            base = self.resolve_type(data['base_class'], outer)
            if not base.is_class():
                raise ModelError(f"Base class of '{declared.name}' is not a class: '{base}'")
            declared.base_class = base
        for iface_name in data.get('interfaces', []):
            iface = self.resolve_type(iface_name, outer)
            if not iface.is_interface():
                raise ModelError(f"'{iface}' implemented by '{declared.name}' is not an interface")
            declared.interfaces.append(iface)

        for method_data in data.get('methods', []):
            declared.add_method(self._method(method_data, scopes))

    def _check_inheritance(self) -> None:
        """Reject aggregates that inherit from themselves, directly or not."""
        finished = set()

        def visit(aggregate: AggregateType, path: List[AggregateType]) -> None:
            if id(aggregate) in finished:
                return
            if any(aggregate is seen for seen in path):
                cycle = " -> ".join(a.qualified_name() for a in path + [aggregate])
                raise ModelError(f"Cyclic inheritance: {cycle}", aggregate)
            for base in aggregate.bases():
                visit(base, path + [aggregate])
            finished.add(id(aggregate))

        for declared in self.model.types():
            if isinstance(declared, AggregateType):
                visit(declared, [])

    def _scopes(self, declared: NamedType) -> List[str]:
        """Get the lookup prefixes for names used inside a type, innermost first."""
        scopes = []
        current = declared
        while current is not None:
            scopes.append(current.qualified_name())
            current = current.parent
        module = declared.get_module()
        if module:
            scopes.append(module)
        return scopes

    def resolve_type(self, expr: Any, scopes: List[str]) -> TypeRef:
        """Resolve a type expression to a type reference."""
        if isinstance(expr, str):
            return self._resolve_name(expr, scopes)

        if not isinstance(expr, dict):
            raise ModelError(f"Invalid type expression: {expr!r}")

        if 'array' in expr:
            return ArrayType(self.resolve_type(expr['array'], scopes), expr.get('length'))
        if 'key' in expr and 'value' in expr:
            return AssociativeArrayType(
                key=self.resolve_type(expr['key'], scopes),
                value=self.resolve_type(expr['value'], scopes)
            )
        if 'pointer' in expr:
            return PointerType(self.resolve_type(expr['pointer'], scopes))
        if 'qualifier' in expr:
            try:
                qualifier = TypeQualifier(expr['qualifier'])
            except ValueError:
                raise ModelError(f"Unknown type qualifier '{expr['qualifier']}'") from None
            return QualifiedType(qualifier, self.resolve_type(expr['type'], scopes))
        if 'function' in expr:
            return self._function_type(FunctionPointerType, expr['function'], scopes)
        if 'delegate' in expr:
            return self._function_type(DelegateType, expr['delegate'], scopes)

        raise ModelError(f"Invalid type expression: {expr!r}")

    def _resolve_name(self, name: str, scopes: List[str]) -> TypeRef:
        if name in BASIC_TYPES:
            return BASIC_TYPES[name]
        for scope in scopes:
            found = self.model.find_type(f"{scope}.{name}")
            if found is not None:
                return found
        found = self.model.find_type(name)
        if found is None:
            raise ModelError(f"Unknown type '{name}' (searched {', '.join(scopes) or 'global scope'})")
        return found

    def _parameters(self, items: List[Dict[str, Any]], scopes: List[str]) -> List[Parameter]:
        params = []
        for item in items:
            if 'type' not in item:
                raise ModelError(f"Parameter without a type: {item!r}")
            params.append(Parameter(
                type=self.resolve_type(item['type'], scopes),
                name=item.get('name'),
                storage=_flags(StorageClass, item.get('storage', []), "storage class")
            ))
        return params

    def _variadic(self, data: Dict[str, Any]) -> Variadic:
        try:
            return Variadic(data.get('variadic', 'no'))
        except ValueError:
            raise ModelError(f"Unknown variadic style '{data['variadic']}'") from None

    def _function_type(self, cls, data: Dict[str, Any], scopes: List[str]) -> FunctionPointerType:
        return cls(
            return_type=self.resolve_type(data.get('return', 'void'), scopes),
            parameters=tuple(self._parameters(data.get('parameters', []), scopes)),
            variadic=self._variadic(data),
            attributes=_flags(FunctionAttribute, data.get('attributes', []), "function attribute"),
            linkage=data.get('linkage', NATIVE_LINKAGE)
        )

    def _method(self, data: Dict[str, Any], scopes: List[str]) -> Method:
        if not data.get('name'):
            raise ModelError(f"Method without a name: {data!r}")
        return Method(
            name=data['name'],
            return_type=self.resolve_type(data.get('return', 'void'), scopes),
            parameters=self._parameters(data.get('parameters', []), scopes),
            variadic=self._variadic(data),
            attributes=_flags(FunctionAttribute, data.get('attributes', []), "function attribute"),
            linkage=data.get('linkage', NATIVE_LINKAGE),
            qualifiers=_flags(MethodQualifier, data.get('qualifiers', []), "method qualifier"),
            annotations=[self._annotation(a, scopes) for a in data.get('annotations', [])]
        )

    def _annotation(self, data: Any, scopes: List[str]) -> Annotation:
        # Bare literals carry their type implicitly
        if isinstance(data, bool):
            return Annotation.of_value(BASIC_TYPES['bool'], data)
        if isinstance(data, str):
            return Annotation.of_value(BASIC_TYPES['string'], data)
        if isinstance(data, int):
            return Annotation.of_value(BASIC_TYPES['int'], data)
        if isinstance(data, float):
            return Annotation.of_value(BASIC_TYPES['double'], data)
        if isinstance(data, dict) and 'type' in data:
            shape = self.resolve_type(data['type'], scopes)
            if 'value' in data:
                return Annotation.of_value(shape, data['value'])
            return Annotation.of_type(shape)
        raise ModelError(f"Invalid annotation: {data!r}")


def load_model_dict(data: Dict[str, Any]) -> ReflectionModel:
    """Build a reflection model from already parsed JSON data."""
    return ModelLoader().load_dict(data)


def load_model(path: Path) -> ReflectionModel:
    """
    Load a reflection model from a JSON file.

    Args:
        path: Path to the model description

    Returns:
        The loaded model
    """
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except Exception as e:
        logger.error(f"Failed to load model from {path}: {e}")
        raise

    logger.debug(f"Loading model from {path}")
    return load_model_dict(data)
