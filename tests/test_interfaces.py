"""
Tests for reducing classes to interfaces.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

import pytest

from iface_mirror.analysis.interfaces import implemented_interfaces, reduce_to_interface
from iface_mirror.errors import MultipleInterfacesError, UnsupportedSymbolKindError
from iface_mirror.model import AggregateType, BASIC_TYPES, TypeKind


def interface(name, *bases):
    return AggregateType(name, kind=TypeKind.INTERFACE, module="test", interfaces=list(bases))


def cls(name, *interfaces, base_class=None):
    return AggregateType(name, kind=TypeKind.CLASS, module="test",
                         base_class=base_class, interfaces=list(interfaces))


class TestInterfaceReducer:
    """Test reduce_to_interface."""

    def test_interface_is_returned_unchanged(self):
        a = interface("A")
        assert reduce_to_interface(a) is a

    def test_derived_interface_is_returned_unchanged(self):
        derived = interface("Derived", interface("Base"), interface("Other"))
        assert reduce_to_interface(derived) is derived

    def test_class_with_single_interface(self):
        a = interface("A")
        assert reduce_to_interface(cls("B", a)) is a

    def test_interface_inherited_from_base_class(self):
        a = interface("A")
        base = cls("Base", a)
        assert reduce_to_interface(cls("Derived", base_class=base)) is a

    def test_same_interface_counted_once(self):
        a = interface("A")
        base = cls("Base", a)
        assert reduce_to_interface(cls("Derived", a, base_class=base)) is a

    def test_class_with_two_interfaces(self):
        with pytest.raises(MultipleInterfacesError) as info:
            reduce_to_interface(cls("C", interface("A"), interface("B")))
        assert "implements 2" in str(info.value)

    def test_interface_inheritance_is_transitive(self):
        base = interface("Base")
        a = interface("A", base)
        assert implemented_interfaces(cls("C", a)) == [a, base]
        with pytest.raises(MultipleInterfacesError):
            reduce_to_interface(cls("C", a))

    def test_class_without_interfaces(self):
        with pytest.raises(MultipleInterfacesError) as info:
            reduce_to_interface(cls("Lonely"))
        assert "implements 0 (none)" in str(info.value)

    @pytest.mark.parametrize("type_ref", [
        AggregateType("S", kind=TypeKind.STRUCT),
        BASIC_TYPES["int"],
    ])
    def test_other_kinds_rejected(self, type_ref):
        with pytest.raises(UnsupportedSymbolKindError):
            reduce_to_interface(type_ref)
