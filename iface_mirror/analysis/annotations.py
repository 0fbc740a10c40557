"""
Finds and extracts annotations attached to declarations.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import Any, Optional

from ..errors import UnsupportedSymbolKindError
from ..model.symbols import Annotation
from ..model.types import TypeRef


def extract_annotation(shape: TypeRef, declaration: Any) -> Optional[Annotation]:
    """
    Find the first annotation of a declaration matching the given shape.

    An annotation matches when it is a value of type ``shape`` or the type
    literal ``shape`` itself. Annotations are scanned in declaration order.

    Returns:
        The matching annotation, or None if there is none
    """
    try:
        annotations = declaration.annotations
    except AttributeError:
        raise UnsupportedSymbolKindError(
            f"{type(declaration).__name__} cannot carry annotations", declaration
        ) from None

    for annotation in annotations:
        if annotation.matches(shape):
            return annotation
    return None


def extract_annotation_value(shape: TypeRef, declaration: Any, default: Any = None) -> Any:
    """Like extract_annotation, but return the annotation payload."""
    annotation = extract_annotation(shape, declaration)
    if annotation is None:
        return default
    return annotation.value
