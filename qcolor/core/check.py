# LICENSE HEADER MANAGED BY add-license-header
#
# Copyright 2018 Kornia Team
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#

"""Guards on what reaches the color conversions from the outside."""

from __future__ import annotations

import os
from typing import Optional

import torch
from typing_extensions import TypeGuard

from qcolor.core.exceptions import ShapeError, TypeCheckError

__all__ = [
    "QCOLOR_CHECK_SAMPLES",
    "QCOLOR_CHECK_TYPE",
    "are_checks_enabled",
    "disable_checks",
    "enable_checks",
]


def _should_enable_checks() -> bool:
    env_var = os.getenv("QCOLOR_CHECKS", None)
    if env_var is not None:
        return env_var.lower() in ("1", "true", "yes", "on")
    return __debug__


# evaluated once at import time, can be changed at runtime
_QCOLOR_CHECKS_ENABLED: bool = _should_enable_checks()


def are_checks_enabled() -> bool:
    """Check if validation is currently enabled.

    Checks are on unless Python runs with ``-O`` or ``QCOLOR_CHECKS`` is set to a false value.
    """
    return _QCOLOR_CHECKS_ENABLED


def disable_checks() -> None:
    global _QCOLOR_CHECKS_ENABLED  # noqa: PLW0603
    _QCOLOR_CHECKS_ENABLED = False


def enable_checks() -> None:
    global _QCOLOR_CHECKS_ENABLED  # noqa: PLW0603
    _QCOLOR_CHECKS_ENABLED = True


def QCOLOR_CHECK_TYPE(x: object, typ: type, msg: Optional[str] = None) -> bool:
    """Check that a color argument is an instance of ``typ``.

    Raises:
        TypeCheckError: if ``x`` is of another type.

    Example:
        >>> QCOLOR_CHECK_TYPE(0.5, float)
        True
    """
    if _QCOLOR_CHECKS_ENABLED and not isinstance(x, typ):
        error_msg = f"Expected a {typ.__name__}, got {type(x).__name__}."
        if msg is not None:
            error_msg += f"\n  {msg}"
        raise TypeCheckError(error_msg, actual=type(x), expected=typ)
    return True


def QCOLOR_CHECK_SAMPLES(x: object) -> TypeGuard[torch.Tensor]:
    """Check that ``x`` holds one RGB sample per channel.

    The samples must be a tensor of shape :math:`(3,)` with a real dtype, integer or floating point.

    Raises:
        TypeCheckError: if ``x`` is not a tensor, or its dtype is boolean or complex.
        ShapeError: if ``x`` is not a vector of three samples.

    Example:
        >>> QCOLOR_CHECK_SAMPLES(torch.tensor([255, 0, 0], dtype=torch.uint8))
        True
    """
    if not _QCOLOR_CHECKS_ENABLED:
        return True

    if not isinstance(x, torch.Tensor):
        raise TypeCheckError(
            f"RGB samples must be given as a tensor, got {type(x).__name__}.", actual=type(x), expected=torch.Tensor
        )
    if tuple(x.shape) != (3,):
        shape = tuple(x.shape)
        raise ShapeError(f"Expected 3 RGB samples of shape (3,), got shape {shape}.", actual_shape=shape)
    if x.dtype == torch.bool or x.dtype.is_complex:
        raise TypeCheckError(f"RGB samples must be real numbers, got dtype {x.dtype}.", actual=x.dtype)
    return True
