"""
Reflection model

In-memory description of modules, types, methods and annotations that the
analysis and code generation functions operate on. The model is supplied by
the caller, either built directly or loaded from a JSON description.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from .types import (
    TypeKind, TypeQualifier, TypeRef, NamedType, BasicType, ArrayType,
    AssociativeArrayType, PointerType, QualifiedType, EnumType,
    VOID, BASIC_TYPES, AGGREGATE_KINDS
)
from .symbols import (
    NATIVE_LINKAGE, StorageClass, FunctionAttribute, MethodQualifier, Variadic,
    AnnotationKind, Annotation, Parameter, FunctionSignature,
    FunctionPointerType, DelegateType, Method, AggregateType, ReflectionModel
)

__all__ = [
    "TypeKind", "TypeQualifier", "TypeRef", "NamedType", "BasicType",
    "ArrayType", "AssociativeArrayType", "PointerType", "QualifiedType",
    "EnumType", "VOID", "BASIC_TYPES", "AGGREGATE_KINDS",
    "NATIVE_LINKAGE", "StorageClass", "FunctionAttribute", "MethodQualifier",
    "Variadic", "AnnotationKind", "Annotation", "Parameter",
    "FunctionSignature", "FunctionPointerType", "DelegateType", "Method",
    "AggregateType", "ReflectionModel",
]
