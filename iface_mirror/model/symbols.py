"""
Symbols of the reflection model: aggregates, methods, parameters, function
types and annotations.

A method carries everything needed to redeclare it: parameter storage
classes, function attributes, linkage, variadic style and the qualifiers of
the implicit this reference.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple
from dataclasses import dataclass, field
from enum import Enum, Flag

from ..errors import ModelError
from .types import NamedType, TypeKind, TypeRef, AGGREGATE_KINDS

NATIVE_LINKAGE = "D"


class StorageClass(Flag):
    """Parameter storage classes."""
    NONE = 0
    SCOPE = 1
    OUT = 2
    REF = 4
    LAZY = 8

    def tokens(self) -> List[str]:
        """Get the storage class keywords in declaration order."""
        order = [
            (StorageClass.SCOPE, "scope"),
            (StorageClass.OUT, "out"),
            (StorageClass.REF, "ref"),
            (StorageClass.LAZY, "lazy"),
        ]
        return [token for flag, token in order if flag in self]


class FunctionAttribute(Flag):
    """Function attributes."""
    NONE = 0
    PURE = 1
    NOTHROW = 2
    REF = 4
    PROPERTY = 8
    TRUSTED = 16
    SAFE = 32
    SYSTEM = 64

    def tokens(self) -> List[str]:
        """Get the attribute keywords in declaration order."""
        order = [
            (FunctionAttribute.PURE, "pure"),
            (FunctionAttribute.NOTHROW, "nothrow"),
            (FunctionAttribute.REF, "ref"),
            (FunctionAttribute.PROPERTY, "@property"),
            (FunctionAttribute.TRUSTED, "@trusted"),
            (FunctionAttribute.SAFE, "@safe"),
            (FunctionAttribute.SYSTEM, "@system"),
        ]
        return [token for flag, token in order if flag in self]


class MethodQualifier(Flag):
    """Qualifiers of the implicit this reference of a method."""
    NONE = 0
    CONST = 1
    IMMUTABLE = 2
    SHARED = 4
    INOUT = 8


EXCLUSIVE_QUALIFIERS = (
    (MethodQualifier.CONST, "const"),
    (MethodQualifier.IMMUTABLE, "immutable"),
    (MethodQualifier.INOUT, "inout"),
)


class Variadic(Enum):
    """Variadic styles of a function."""
    NO = "no"
    C = "c"
    D = "d"
    TYPESAFE = "typesafe"

    def marker(self, has_parameters: bool) -> str:
        """Get the text appended to the parameter list."""
        if self is Variadic.NO:
            return ""
        if self is Variadic.TYPESAFE:
            return " ..."
        return ", ..." if has_parameters else "..."


class AnnotationKind(Enum):
    """Whether an annotation is a value or a type literal."""
    VALUE = "value"
    TYPE = "type"


@dataclass(frozen=True)
class Annotation:
    """Metadata attached to a declaration.

    ``shape`` is the type of the value, or the type itself for type literals.
    """
    kind: AnnotationKind
    shape: TypeRef
    value: Any = None

    @classmethod
    def of_value(cls, shape: TypeRef, value: Any) -> 'Annotation':
        return cls(AnnotationKind.VALUE, shape, value)

    @classmethod
    def of_type(cls, shape: TypeRef) -> 'Annotation':
        return cls(AnnotationKind.TYPE, shape)

    def matches(self, shape: TypeRef) -> bool:
        """Check if this annotation is an instance of, or is, the given shape."""
        return self.shape == shape

    def __str__(self) -> str:
        if self.kind == AnnotationKind.TYPE:
            return self.shape.qualified_name()
        return f"{self.shape.qualified_name()}({self.value!r})"


@dataclass(frozen=True)
class Parameter:
    """A function parameter."""
    type: TypeRef
    name: Optional[str] = None
    storage: StorageClass = StorageClass.NONE

    def declaration(self) -> str:
        """Get the parameter as it appears in a declaration."""
        parts = self.storage.tokens()
        parts.append(self.type.qualified_name())
        if self.name:
            parts.append(self.name)
        return " ".join(parts)


def parameter_list(parameters, variadic: Variadic) -> str:
    """Format a parameter list including the variadic marker, without parens."""
    joined = ", ".join(p.declaration() for p in parameters)
    return joined + variadic.marker(bool(parameters))


class FunctionSignature:
    """Mixin for anything with a return type, parameters and attributes."""
    return_type: TypeRef
    parameters: Any
    attributes: FunctionAttribute
    variadic: Variadic
    linkage: str

    def has_attribute(self, attribute: FunctionAttribute) -> bool:
        return attribute in self.attributes

    def parameter_types(self) -> Tuple[TypeRef, ...]:
        return tuple(p.type for p in self.parameters)


@dataclass(frozen=True)
class FunctionPointerType(FunctionSignature, TypeRef):
    """Unnamed function pointer type."""
    return_type: TypeRef
    parameters: Tuple[Parameter, ...] = ()
    variadic: Variadic = Variadic.NO
    attributes: FunctionAttribute = FunctionAttribute.NONE
    linkage: str = NATIVE_LINKAGE
    kind: TypeKind = field(default=TypeKind.FUNCTION_POINTER, init=False)

    def qualified_name(self) -> str:
        keyword = "delegate" if self.kind == TypeKind.DELEGATE else "function"
        prefix = "ref " if FunctionAttribute.REF in self.attributes else ""
        if self.linkage != NATIVE_LINKAGE:
            prefix = f"extern({self.linkage}) {prefix}"
        name = (
            f"{prefix}{self.return_type.qualified_name()} {keyword}"
            f"({parameter_list(self.parameters, self.variadic)})"
        )
        trailing = (self.attributes & ~FunctionAttribute.REF).tokens()
        if trailing:
            name += " " + " ".join(trailing)
        return name


@dataclass(frozen=True)
class DelegateType(FunctionPointerType):
    """Unnamed delegate type, a function pointer bound to a context."""
    kind: TypeKind = field(default=TypeKind.DELEGATE, init=False)


@dataclass(eq=False)
class Method(FunctionSignature):
    """A named member function of an aggregate."""
    name: str
    return_type: TypeRef
    parameters: List[Parameter] = field(default_factory=list)
    variadic: Variadic = Variadic.NO
    attributes: FunctionAttribute = FunctionAttribute.NONE
    linkage: str = NATIVE_LINKAGE
    qualifiers: MethodQualifier = MethodQualifier.NONE
    annotations: List[Annotation] = field(default_factory=list)
    declaring_type: Optional['AggregateType'] = field(default=None, repr=False)

    def __post_init__(self):
        exclusive = [q for q, _ in EXCLUSIVE_QUALIFIERS if q in self.qualifiers]
        if len(exclusive) > 1:
            raise ModelError(
                f"Method '{self.name}' combines mutually exclusive qualifiers "
                f"{', '.join(str(q.name).lower() for q in exclusive)}",
                self
            )

    def has_qualifier(self, qualifier: MethodQualifier) -> bool:
        return qualifier in self.qualifiers

    def overrides(self, other: 'Method') -> bool:
        """Check if this method hides ``other`` in a derived type."""
        return self.name == other.name and self.parameter_types() == other.parameter_types()

    def __repr__(self) -> str:
        return f"Method({self.name!r}, {len(self.parameters)} parameters)"


@dataclass(eq=False)
class AggregateType(NamedType):
    """Struct, union, class or interface declaration."""
    name: str
    kind: TypeKind = TypeKind.STRUCT
    module: Optional[str] = None
    parent: Optional[NamedType] = field(default=None, repr=False)
    base_class: Optional['AggregateType'] = field(default=None, repr=False)
    interfaces: List['AggregateType'] = field(default_factory=list, repr=False)
    methods: List[Method] = field(default_factory=list, repr=False)
    annotations: List[Annotation] = field(default_factory=list, repr=False)
    nested: List[NamedType] = field(default_factory=list, repr=False)

    def __post_init__(self):
        if self.kind not in AGGREGATE_KINDS:
            raise ModelError(f"'{self.name}' cannot be an aggregate of kind {self.kind.value}", self)

    def add_method(self, method: Method) -> Method:
        """Add a method declared in this aggregate."""
        method.declaring_type = self
        self.methods.append(method)
        return method

    def add_nested(self, nested: NamedType) -> NamedType:
        """Add a type declared inside this aggregate."""
        nested.parent = self
        self.nested.append(nested)
        return nested

    def find_nested(self, name: str) -> Optional[NamedType]:
        for nested in self.nested:
            if nested.name == name:
                return nested
        return None

    def bases(self) -> List['AggregateType']:
        """Get the direct base class and interfaces."""
        bases = []
        if self.base_class is not None:
            bases.append(self.base_class)
        bases.extend(self.interfaces)
        return bases

    def member_names(self) -> List[str]:
        """Get the names of all member functions, own names first."""
        names: List[str] = []
        seen = set()
        for method in self.methods:
            if method.name not in seen:
                seen.add(method.name)
                names.append(method.name)
        for base in self.bases():
            for name in base.member_names():
                if name not in seen:
                    seen.add(name)
                    names.append(name)
        return names

    def overloads(self, name: str) -> List[Method]:
        """Get the overload set of a member function, including inherited ones."""
        result = [m for m in self.methods if m.name == name]
        for base in self.bases():
            for inherited in base.overloads(name):
                if not any(m.overrides(inherited) for m in result):
                    result.append(inherited)
        return result

    def member_functions(self) -> Iterator[Method]:
        """Iterate all member functions, overloads grouped by name."""
        for name in self.member_names():
            yield from self.overloads(name)

    def __repr__(self) -> str:
        return f"AggregateType({self.qualified_name()!r}, kind={self.kind.value})"


class ReflectionModel:
    """Container for all modules and types of a reflection model."""

    def __init__(self):
        self._modules: Dict[str, List[NamedType]] = {}
        self._types: Dict[str, NamedType] = {}

    def add_type(self, named: NamedType) -> NamedType:
        """Register a type and everything nested in it."""
        qualified = named.qualified_name()
        if qualified in self._types:
            raise ModelError(f"Duplicate type '{qualified}'", named)
        self._types[qualified] = named
        module = named.get_module() or ""
        self._modules.setdefault(module, []).append(named)
        for nested in getattr(named, "nested", []):
            self.add_type(nested)
        return named

    def find_type(self, qualified_name: str) -> Optional[NamedType]:
        return self._types.get(qualified_name)

    def get_type(self, qualified_name: str) -> NamedType:
        found = self.find_type(qualified_name)
        if found is None:
            raise ModelError(f"Unknown type '{qualified_name}'")
        return found

    def module_names(self) -> List[str]:
        return list(self._modules.keys())

    def module_types(self, module: str) -> List[NamedType]:
        return list(self._modules.get(module, []))

    def types(self) -> List[NamedType]:
        return list(self._types.values())

    def interfaces(self) -> List[AggregateType]:
        return [t for t in self._types.values() if t.kind == TypeKind.INTERFACE]

    def __contains__(self, qualified_name: str) -> bool:
        return qualified_name in self._types

    def __len__(self) -> int:
        return len(self._types)
