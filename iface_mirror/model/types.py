"""
Type references of the reflection model.

Provides the structural types (basic types, arrays, associative arrays,
pointers and qualified types) and enums. Aggregates and function types live
in the symbols module since they carry methods and parameters.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import ClassVar, List, Optional
from dataclasses import dataclass, field
from enum import Enum
from abc import ABC, abstractmethod


class TypeKind(Enum):
    """Kinds of types in the reflection model."""
    BASIC = "basic"
    STRUCT = "struct"
    UNION = "union"
    CLASS = "class"
    INTERFACE = "interface"
    ENUM = "enum"
    ARRAY = "array"
    ASSOCIATIVE_ARRAY = "associative_array"
    POINTER = "pointer"
    QUALIFIED = "qualified"
    FUNCTION_POINTER = "function_pointer"
    DELEGATE = "delegate"


AGGREGATE_KINDS = frozenset({
    TypeKind.STRUCT, TypeKind.UNION, TypeKind.CLASS, TypeKind.INTERFACE
})


class TypeQualifier(Enum):
    """Type constructors that qualify an inner type."""
    CONST = "const"
    IMMUTABLE = "immutable"
    SHARED = "shared"
    INOUT = "inout"


class TypeRef(ABC):
    """Base class for all type references."""
    kind: TypeKind

    @abstractmethod
    def qualified_name(self) -> str:
        """Get the fully qualified name of the type."""

    def get_module(self) -> Optional[str]:
        """Get the module the type is declared in, if it has one."""
        return None

    def is_void(self) -> bool:
        return False

    def is_aggregate(self) -> bool:
        return self.kind in AGGREGATE_KINDS

    def is_interface(self) -> bool:
        return self.kind == TypeKind.INTERFACE

    def is_class(self) -> bool:
        return self.kind == TypeKind.CLASS

    def is_nameable(self) -> bool:
        """Check if the type can be referred to by an import."""
        return self.is_aggregate() or self.kind == TypeKind.ENUM

    def __str__(self) -> str:
        return self.qualified_name()


@dataclass(frozen=True)
class BasicType(TypeRef):
    """Primitive or built-in type such as int, void or string."""
    name: str
    kind: ClassVar[TypeKind] = TypeKind.BASIC

    def qualified_name(self) -> str:
        return self.name

    def is_void(self) -> bool:
        return self.name == "void"


VOID = BasicType("void")

BASIC_TYPE_NAMES = (
    "void", "bool", "byte", "ubyte", "short", "ushort", "int", "uint",
    "long", "ulong", "cent", "ucent", "float", "double", "real",
    "ifloat", "idouble", "ireal", "cfloat", "cdouble", "creal",
    "char", "wchar", "dchar", "string", "wstring", "dstring",
    "size_t", "ptrdiff_t", "typeof(null)",
)

BASIC_TYPES = {name: BasicType(name) for name in BASIC_TYPE_NAMES}


@dataclass(frozen=True)
class ArrayType(TypeRef):
    """Static array when length is set, dynamic array otherwise."""
    element: TypeRef
    length: Optional[int] = None
    kind: ClassVar[TypeKind] = TypeKind.ARRAY

    @property
    def is_static(self) -> bool:
        return self.length is not None

    def qualified_name(self) -> str:
        if self.length is None:
            return f"{self.element.qualified_name()}[]"
        return f"{self.element.qualified_name()}[{self.length}]"


@dataclass(frozen=True)
class AssociativeArrayType(TypeRef):
    """Associative array mapping key to value, written V[K]."""
    key: TypeRef
    value: TypeRef
    kind: ClassVar[TypeKind] = TypeKind.ASSOCIATIVE_ARRAY

    def qualified_name(self) -> str:
        return f"{self.value.qualified_name()}[{self.key.qualified_name()}]"


@dataclass(frozen=True)
class PointerType(TypeRef):
    """Indirection to a target type."""
    target: TypeRef
    kind: ClassVar[TypeKind] = TypeKind.POINTER

    def qualified_name(self) -> str:
        return f"{self.target.qualified_name()}*"


@dataclass(frozen=True)
class QualifiedType(TypeRef):
    """Inner type wrapped in a type qualifier, e.g. const(int[])."""
    qualifier: TypeQualifier
    inner: TypeRef
    kind: ClassVar[TypeKind] = TypeKind.QUALIFIED

    def qualified_name(self) -> str:
        return f"{self.qualifier.value}({self.inner.qualified_name()})"

    def unqualified(self) -> TypeRef:
        """Strip all qualifier layers."""
        inner = self.inner
        while isinstance(inner, QualifiedType):
            inner = inner.inner
        return inner

    def is_void(self) -> bool:
        return self.unqualified().is_void()


class NamedType(TypeRef):
    """Mixin for types declared with a name inside a module or aggregate."""
    name: str
    module: Optional[str]
    parent: Optional['NamedType']

    def get_module(self) -> Optional[str]:
        if self.module is not None:
            return self.module
        if self.parent is not None:
            return self.parent.get_module()
        return None

    def scope_names(self) -> List[str]:
        """Get the names of this type and its enclosing types, outermost first."""
        names = [self.name]
        parent = self.parent
        while parent is not None:
            names.append(parent.name)
            parent = parent.parent
        return list(reversed(names))

    def qualified_name(self) -> str:
        parts = self.scope_names()
        module = self.get_module()
        if module:
            parts.insert(0, module)
        return ".".join(parts)


@dataclass(eq=False)
class EnumType(NamedType):
    """Enum declaration."""
    name: str
    module: Optional[str] = None
    parent: Optional[NamedType] = field(default=None, repr=False)
    base_type: Optional[TypeRef] = None
    members: List[str] = field(default_factory=list)
    annotations: List['Annotation'] = field(default_factory=list, repr=False)
    kind: ClassVar[TypeKind] = TypeKind.ENUM

    def __repr__(self) -> str:
        return f"EnumType({self.qualified_name()!r})"
