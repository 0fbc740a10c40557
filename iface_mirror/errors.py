"""
Error types raised by the reflection engine.

All of them are definition-time errors: they describe a problem with the
model handed to the engine and are fixed by changing that input.

© 2024 Intel Corporation
SPDX-License-Identifier: Apache-2.0 and MIT
"""

from typing import Any, Optional
from enum import Enum


class ReflectionErrorKind(Enum):
    """Kinds of reflection errors."""
    MULTIPLE_INTERFACES = "multiple_interfaces"
    UNSUPPORTED_SYMBOL_KIND = "unsupported_symbol_kind"
    MODEL_ERROR = "model_error"


class ReflectionError(Exception):
    """Base class for all errors raised by iface-mirror."""
    kind: ReflectionErrorKind = ReflectionErrorKind.MODEL_ERROR

    def __init__(self, message: str, symbol: Optional[Any] = None):
        super().__init__(message)
        self.message = message
        self.symbol = symbol

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class MultipleInterfacesError(ReflectionError):
    """A class cannot be reduced because it implements zero or several interfaces."""
    kind = ReflectionErrorKind.MULTIPLE_INTERFACES


class UnsupportedSymbolKindError(ReflectionError):
    """An operation was given a symbol of the wrong kind."""
    kind = ReflectionErrorKind.UNSUPPORTED_SYMBOL_KIND


class ModelError(ReflectionError):
    """The reflection model is malformed."""
    kind = ReflectionErrorKind.MODEL_ERROR
