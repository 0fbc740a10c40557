"""
Tests for declaration cloning.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import pytest

from iface_mirror.codegen.cloning import (
    DEFAULT_OVERRIDE_BODY, DeclarationSignature, ParameterDeclaration,
    build_signature, clone_all_declarations, clone_function_declaration,
    format_signature
)
from iface_mirror.errors import ModelError, UnsupportedSymbolKindError
from iface_mirror.model import (
    AggregateType, ArrayType, BASIC_TYPES, DelegateType, FunctionAttribute,
    FunctionPointerType, Method, MethodQualifier, Parameter, PointerType,
    StorageClass, TypeKind, Variadic, VOID
)

INT = BASIC_TYPES["int"]
INNER = "vibe.http.restutil.QualifiedNameTests.Inner"

EXPECTED = [
    f"const({INNER}[]) func1(ref string name)",
    "ref int func1()",
    f"shared({INNER}[4]) func2(...) const",
    f"@safe immutable(int[string]) func3(scope const({INNER}) anotherName)",
]


class TestCloneFunctionDeclaration:
    """Test cloning of single declarations."""

    def test_qualified_name_tests(self, qualified_name_tests):
        cloned = [clone_function_declaration(m) for m in qualified_name_tests.member_functions()]
        assert cloned == EXPECTED

    def test_attribute_order(self):
        method = Method("f", INT, attributes=(
            FunctionAttribute.SAFE | FunctionAttribute.PURE | FunctionAttribute.PROPERTY
            | FunctionAttribute.NOTHROW | FunctionAttribute.REF
        ))
        assert clone_function_declaration(method) == "pure nothrow ref @property @safe int f()"

    def test_trusted_and_system(self):
        assert clone_function_declaration(
            Method("f", VOID, attributes=FunctionAttribute.TRUSTED)) == "@trusted void f()"
        assert clone_function_declaration(
            Method("f", VOID, attributes=FunctionAttribute.SYSTEM)) == "@system void f()"

    def test_storage_class_order(self):
        method = Method("f", VOID, [
            Parameter(INT, "a", StorageClass.LAZY | StorageClass.SCOPE),
            Parameter(INT, "b", StorageClass.OUT),
            Parameter(INT, "c", StorageClass.REF | StorageClass.SCOPE),
        ])
        assert clone_function_declaration(method) == (
            "void f(scope lazy int a, out int b, scope ref int c)"
        )

    def test_unnamed_parameter(self):
        method = Method("f", VOID, [Parameter(INT), Parameter(INT, "named")])
        assert clone_function_declaration(method) == "void f(int, int named)"

    @pytest.mark.parametrize("variadic, linkage, parameters, expected", [
        (Variadic.NO, "D", [Parameter(INT, "a")], "void f(int a)"),
        (Variadic.C, "C", [Parameter(INT, "a")], "extern(C) void f(int a, ...)"),
        (Variadic.C, "C", [], "extern(C) void f(...)"),
        (Variadic.D, "D", [Parameter(INT, "a")], "void f(int a, ...)"),
        (Variadic.D, "D", [], "void f(...)"),
        (Variadic.TYPESAFE, "D", [Parameter(ArrayType(INT), "a")], "void f(int[] a ...)"),
    ])
    def test_variadic_styles(self, variadic, linkage, parameters, expected):
        method = Method("f", VOID, parameters, variadic=variadic, linkage=linkage)
        assert clone_function_declaration(method) == expected

    def test_linkage(self):
        method = Method("f", VOID, linkage="Windows")
        assert clone_function_declaration(method) == "extern(Windows) void f()"
        assert clone_function_declaration(method, native_linkage="Windows") == "void f()"

    @pytest.mark.parametrize("qualifiers, expected", [
        (MethodQualifier.CONST, "void f() const"),
        (MethodQualifier.IMMUTABLE, "void f() immutable"),
        (MethodQualifier.INOUT, "void f() inout"),
        (MethodQualifier.SHARED, "shared(void f())"),
        (MethodQualifier.SHARED | MethodQualifier.CONST, "shared(void f()) const"),
        (MethodQualifier.SHARED | MethodQualifier.INOUT, "shared(void f()) inout"),
    ])
    def test_qualifiers(self, qualifiers, expected):
        assert clone_function_declaration(Method("f", VOID, qualifiers=qualifiers)) == expected

    def test_shared_wraps_linkage_and_attributes(self):
        method = Method("f", INT, attributes=FunctionAttribute.NOTHROW, linkage="C",
                        qualifiers=MethodQualifier.SHARED | MethodQualifier.IMMUTABLE)
        assert clone_function_declaration(method) == "shared(extern(C) nothrow int f()) immutable"

    def test_conflicting_qualifiers_rejected(self):
        with pytest.raises(ModelError):
            Method("f", VOID, qualifiers=MethodQualifier.CONST | MethodQualifier.IMMUTABLE)

    def test_function_types_in_signature(self):
        callback = DelegateType(VOID, (Parameter(INT, "code"),), attributes=FunctionAttribute.NOTHROW)
        handler = FunctionPointerType(INT, attributes=FunctionAttribute.REF | FunctionAttribute.PURE)
        method = Method("on", VOID, [Parameter(callback, "cb"), Parameter(handler, "h")])
        assert clone_function_declaration(method) == (
            "void on(void delegate(int code) nothrow cb, ref int function() pure h)"
        )

    def test_function_type_linkage(self):
        callback = FunctionPointerType(VOID, (Parameter(INT),), linkage="C")
        handler = DelegateType(INT, attributes=FunctionAttribute.REF, linkage="Windows")
        method = Method("on", VOID, [Parameter(callback, "cb"), Parameter(handler, "h")])
        assert clone_function_declaration(method) == (
            "void on(extern(C) void function(int) cb, extern(Windows) ref int delegate() h)"
        )

    def test_native_function_type_has_no_linkage(self):
        callback = FunctionPointerType(VOID, (Parameter(INT),))
        assert callback.qualified_name() == "void function(int)"

    def test_pointer_parameter(self):
        method = Method("fill", VOID, [Parameter(PointerType(INT), "buffer", StorageClass.SCOPE)])
        assert clone_function_declaration(method) == "void fill(scope int* buffer)"

    @pytest.mark.parametrize("symbol", [
        DelegateType(VOID),
        FunctionPointerType(INT),
        AggregateType("NotAFunction"),
    ])
    def test_unsupported_symbols(self, symbol):
        with pytest.raises(UnsupportedSymbolKindError):
            clone_function_declaration(symbol)


class TestDeclarationSignature:
    """Test the intermediate representation and its formatter."""

    def test_build_signature(self, qualified_name_tests):
        func3 = qualified_name_tests.overloads("func3")[0]
        signature = build_signature(func3)
        assert signature.name == "func3"
        assert signature.return_type == "immutable(int[string])"
        assert signature.attributes == ["@safe"]
        assert signature.linkage is None
        assert signature.shared is False
        assert signature.qualifier is None
        assert signature.parameters == [
            ParameterDeclaration(["scope"], f"const({INNER})", "anotherName")
        ]

    def test_format_signature(self):
        signature = DeclarationSignature(
            name="send",
            return_type="bool",
            parameters=[ParameterDeclaration([], "int", "fd"), ParameterDeclaration(["ref"], "string")],
            variadic=Variadic.C,
            linkage="C",
            attributes=["nothrow"],
            shared=True,
            qualifier="const"
        )
        assert format_signature(signature) == (
            "shared(extern(C) nothrow bool send(int fd, ref string, ...)) const"
        )

    def test_formatting_is_independent_of_model(self, qualified_name_tests):
        for method in qualified_name_tests.member_functions():
            assert format_signature(build_signature(method)) == clone_function_declaration(method)


class TestCloneAllDeclarations:
    """Test bulk override generation."""

    def test_default_body(self, qualified_name_tests):
        generated = clone_all_declarations(qualified_name_tests)
        lines = generated.splitlines()
        assert len(lines) == 4
        assert generated.endswith("\n")
        assert all(line.endswith(DEFAULT_OVERRIDE_BODY) for line in lines)
        assert lines[1] == "ref int func1()" + DEFAULT_OVERRIDE_BODY

    def test_custom_body(self, qualified_name_tests):
        generated = clone_all_declarations(qualified_name_tests, body=";")
        assert generated.splitlines()[0] == f"const({INNER}[]) func1(ref string name);"

    def test_overloads_are_grouped(self):
        iface = AggregateType("I", kind=TypeKind.INTERFACE, module="m")
        iface.add_method(Method("a", VOID))
        iface.add_method(Method("b", VOID))
        iface.add_method(Method("a", VOID, [Parameter(INT, "x")]))
        assert clone_all_declarations(iface, body="").splitlines() == [
            "void a()", "void a(int x)", "void b()"
        ]

    def test_empty_interface(self):
        assert clone_all_declarations(AggregateType("E", kind=TypeKind.INTERFACE)) == ""
