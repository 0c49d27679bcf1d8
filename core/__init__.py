# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Core algebraic kernel.

Provides the scalar fields, the Value capability, the real leaf algebra,
the Cayley-Dickson doubling construction and the named algebras.
"""

from .field import FIELDS, FieldConfig, as_field_tensor, resolve_field, resolve_device
from .value import Value
from .algebra import Real, Construction, pair
from .validation import check_halves, check_elems

from .hypercomplex import (
    C,
    H,
    O,
    S,
    cayley_dickson,
    complex_number,
    quaternion,
    octonion,
    sedenion,
)

__all__ = [
    # field
    "FIELDS",
    "FieldConfig",
    "as_field_tensor",
    "resolve_field",
    "resolve_device",
    # algebra
    "Value",
    "Real",
    "Construction",
    "pair",
    # validation
    "check_halves",
    "check_elems",
    # named algebras
    "C",
    "H",
    "O",
    "S",
    "cayley_dickson",
    "complex_number",
    "quaternion",
    "octonion",
    "sedenion",
]
