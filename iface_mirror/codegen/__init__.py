"""
Code generation for mirrored interfaces.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from .cloning import (
    DeclarationSignature, ParameterDeclaration, build_signature,
    format_signature, clone_function_declaration, clone_all_declarations,
    DEFAULT_OVERRIDE_BODY
)

__all__ = [
    "DeclarationSignature",
    "ParameterDeclaration",
    "build_signature",
    "format_signature",
    "clone_function_declaration",
    "clone_all_declarations",
    "DEFAULT_OVERRIDE_BODY",
]
