"""
Interface analysis: member classification, interface reduction, annotation
extraction and type dependency collection.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from .classify import is_property_getter, is_property_setter, MemberKind, classify_member
from .interfaces import reduce_to_interface, implemented_interfaces
from .annotations import extract_annotation, extract_annotation_value
from .dependencies import collect_nameable_types, collect_required_imports, module_of

__all__ = [
    "is_property_getter",
    "is_property_setter",
    "MemberKind",
    "classify_member",
    "reduce_to_interface",
    "implemented_interfaces",
    "extract_annotation",
    "extract_annotation_value",
    "collect_nameable_types",
    "collect_required_imports",
    "module_of",
]
