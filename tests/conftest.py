"""
Shared fixtures for the iface-mirror tests.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import pytest
from pathlib import Path

from iface_mirror.model import (
    AggregateType, ArrayType, AssociativeArrayType, BASIC_TYPES, FunctionAttribute,
    Method, MethodQualifier, Parameter, QualifiedType, StorageClass, TypeKind,
    TypeQualifier, Variadic
)

DATA_DIR = Path(__file__).parent / "data"
RESTUTIL = "vibe.http.restutil"


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def qualified_name_tests() -> AggregateType:
    """The interface used by most tests, built by hand."""
    iface = AggregateType("QualifiedNameTests", kind=TypeKind.INTERFACE, module=RESTUTIL)
    inner = iface.add_nested(AggregateType("Inner", module=RESTUTIL))
    string = BASIC_TYPES["string"]
    int_ = BASIC_TYPES["int"]

    iface.add_method(Method(
        "func1",
        QualifiedType(TypeQualifier.CONST, ArrayType(inner)),
        [Parameter(string, "name", StorageClass.REF)]
    ))
    iface.add_method(Method("func1", int_, attributes=FunctionAttribute.REF))
    iface.add_method(Method(
        "func2",
        QualifiedType(TypeQualifier.SHARED, ArrayType(inner, 4)),
        variadic=Variadic.D,
        qualifiers=MethodQualifier.CONST
    ))
    iface.add_method(Method(
        "func3",
        QualifiedType(TypeQualifier.IMMUTABLE, AssociativeArrayType(string, int_)),
        [Parameter(QualifiedType(TypeQualifier.CONST, inner), "anotherName", StorageClass.SCOPE)],
        attributes=FunctionAttribute.SAFE
    ))
    return iface


@pytest.fixture
def inner(qualified_name_tests) -> AggregateType:
    return qualified_name_tests.find_nested("Inner")
