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

"""Errors raised when a color collaborator hands over unusable input."""

from __future__ import annotations

from typing import Optional

import torch

__all__ = ["BaseError", "ShapeError", "TypeCheckError"]


class BaseError(Exception):
    pass


class TypeCheckError(BaseError):
    """Raised when an argument, or the dtype of a sample tensor, is not one qcolor can convert.

    Attributes:
        actual: the type or dtype that was given.
        expected: the type that was expected, if there is a single one.
    """

    def __init__(
        self, message: str, *, actual: type | torch.dtype, expected: Optional[type | tuple[type, ...]] = None
    ) -> None:
        super().__init__(message)
        self.actual = actual
        self.expected = expected


class ShapeError(BaseError):
    """Raised when RGB samples are not a vector of three values.

    Attributes:
        actual_shape: the shape of the tensor that was given.
    """

    def __init__(self, message: str, *, actual_shape: tuple[int, ...]) -> None:
        super().__init__(message)
        self.actual_shape = actual_shape
