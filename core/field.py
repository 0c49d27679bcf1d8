# Cayley: Cayley-Dickson Hypercomplex Algebras for PyTorch
# Copyright (C) 2026 Eunkyum Kim <nemonanconcode@gmail.com>
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.

"""Scalar fields and device configuration.

Only the two IEEE-754 binary precisions may serve as the base field of an
algebra. Centralises dtype resolution, coercion of Python numbers into field
tensors, and device selection into a single :class:`FieldConfig` dataclass.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

import torch

from log import get_logger

logger = get_logger(__name__)

FIELDS = (torch.float32, torch.float64)

_FIELD_NAMES = {
    "float32": torch.float32,
    "float64": torch.float64,
}


def is_field(dtype) -> bool:
    """True when *dtype* may serve as the scalar base of an algebra."""
    return dtype in FIELDS


def default_field() -> torch.dtype:
    """Field used when neither the caller nor the input names one.

    Read from ``CAYLEY_DEFAULT_FIELD`` (``float32`` / ``float64``),
    defaulting to ``float64``.
    """
    name = os.environ.get("CAYLEY_DEFAULT_FIELD", "float64").lower()
    if name not in _FIELD_NAMES:
        raise TypeError(
            f"CAYLEY_DEFAULT_FIELD must be one of {sorted(_FIELD_NAMES)}, got {name!r}"
        )
    return _FIELD_NAMES[name]


def resolve_field(dtype=None) -> torch.dtype:
    """Resolve a dtype (``None``, name or :class:`torch.dtype`) to a field.

    Raises:
        TypeError: If *dtype* is not one of :data:`FIELDS`.
    """
    if dtype is None:
        return default_field()
    if isinstance(dtype, str):
        if dtype == "auto":
            return default_field()
        if dtype not in _FIELD_NAMES:
            raise TypeError(f"Unknown field {dtype!r}. Available: {sorted(_FIELD_NAMES)}")
        return _FIELD_NAMES[dtype]
    if not is_field(dtype):
        raise TypeError(f"{dtype} is not a field; expected one of {FIELDS}")
    return dtype


def as_field_tensor(value, dtype=None, device=None) -> torch.Tensor:
    """Coerce *value* into a field tensor.

    A tensor that already holds a field dtype keeps it unless *dtype* is
    given; anything else is converted to ``resolve_field(dtype)``.

    Args:
        value: Python number, sequence or tensor.
        dtype: Target field. Defaults to the tensor's own field or
            :func:`default_field`.
        device: Target device. Defaults to the tensor's own device.

    Returns:
        torch.Tensor: Field tensor of the same shape as *value*.
    """
    if isinstance(value, torch.Tensor):
        if dtype is None and is_field(value.dtype):
            target = value.dtype
        else:
            target = resolve_field(dtype)
        return value.to(dtype=target, device=device if device is not None else value.device)
    return torch.as_tensor(value, dtype=resolve_field(dtype), device=device)


def resolve_device(device: str = "auto") -> str:
    """Resolve ``'auto'`` to the best available accelerator.

    Priority: cuda > mps > cpu.
    """
    if device != "auto":
        return device
    if torch.cuda.is_available():
        return "cuda"
    if hasattr(torch.backends, "mps") and torch.backends.mps.is_available():
        return "mps"
    return "cpu"


@dataclass
class FieldConfig:
    """Field and device settings for building algebra values.

    Attributes:
        dtype: Field name (``float32``, ``float64``) or ``auto`` for
            :func:`default_field`. Resolved to a :class:`torch.dtype`.
        device: Device string or ``auto``. Resolved by :func:`resolve_device`.
    """

    dtype: str | torch.dtype = "auto"
    device: str = "auto"

    def __post_init__(self) -> None:
        self.dtype = resolve_field(self.dtype)
        self.device = resolve_device(self.device)

        # float64 is not supported on MPS
        if self.device == "mps" and self.dtype == torch.float64:
            logger.warning("float64 is unavailable on mps, falling back to cpu")
            self.device = "cpu"

        logger.debug("Field config: dtype=%s device=%s", self.dtype, self.device)

    def tensor(self, value) -> torch.Tensor:
        """Coerce *value* into a field tensor on the configured device."""
        return as_field_tensor(value, dtype=self.dtype, device=self.device)
