"""
Interface Mirror

Static reflection and declaration generation for mirrored interfaces. Given
a reflection model of an interface, iface-mirror classifies its members,
extracts attached annotations, clones method declarations so that a generated
proxy type can override them, and computes the list of modules the generated
code has to import.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

__version__ = "0.1.0"
__author__ = "Intel Corporation"
__license__ = "Apache-2.0 OR MIT"

import logging

# Set up default logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def version() -> str:
    """Return the version string."""
    return __version__

def internal_error(message: str, *args) -> None:
    """Log an internal error message."""
    logger = logging.getLogger(__name__)
    if args:
        logger.error(f"Internal Error: {message.format(*args)}")
    else:
        logger.error(f"Internal Error: {message}")


from .errors import (
    ReflectionError, ReflectionErrorKind, MultipleInterfacesError,
    UnsupportedSymbolKindError, ModelError
)
from .analysis.classify import is_property_getter, is_property_setter
from .analysis.interfaces import reduce_to_interface
from .analysis.annotations import extract_annotation, extract_annotation_value
from .analysis.dependencies import collect_nameable_types, collect_required_imports
from .codegen.cloning import clone_function_declaration, clone_all_declarations

# Export commonly used types and functions
__all__ = [
    "version",
    "internal_error",
    "__version__",
    "__author__",
    "__license__",
    "ReflectionError",
    "ReflectionErrorKind",
    "MultipleInterfacesError",
    "UnsupportedSymbolKindError",
    "ModelError",
    "is_property_getter",
    "is_property_setter",
    "reduce_to_interface",
    "extract_annotation",
    "extract_annotation_value",
    "collect_nameable_types",
    "collect_required_imports",
    "clone_function_declaration",
    "clone_all_declarations",
]
