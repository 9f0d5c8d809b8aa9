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

from enum import Enum, EnumMeta
from typing import Iterator, Type, TypeVar, Union

__all__ = ["QuantumDepth"]

T = TypeVar("T", bound=Enum)
TQEnum = Union[str, int, T]


class _QCOLOR_EnumMeta(EnumMeta):
    def __iter__(self) -> Iterator[Enum]:  # type: ignore[override]
        return super().__iter__()

    def __contains__(self, other: TQEnum[Enum]) -> bool:  # type: ignore[override]
        if isinstance(other, str):
            return any(val.name.upper() == other.upper() for val in self)

        elif isinstance(other, int):
            return any(val.value == other for val in self)

        return any(val == other for val in self)

    def __repr__(self) -> str:
        return " | ".join(f"{self.__name__}.{val.name}" for val in self)


def _get(cls: Type[T], value: TQEnum[T]) -> T:
    if isinstance(value, cls):
        return value

    elif isinstance(value, str):
        return cls[value.upper()]

    elif isinstance(value, int):
        return cls(value)

    raise TypeError(
        f"The `.get` method from `{cls}` expects a value with type `str`, `int` or `{cls}`. Gotcha {type(value)}"
    )


class QuantumDepth(Enum, metaclass=_QCOLOR_EnumMeta):
    r"""Per-channel sample depth of the pixel data.

    ``Q8`` and ``Q16`` store unsigned integers of 8 and 16 bits. ``Q16HDRI`` stores
    floating point samples normalized to ``1.0``.
    """

    Q8 = 8
    Q16 = 16
    Q16HDRI = 32

    @classmethod
    def get(cls, value: TQEnum["QuantumDepth"]) -> "QuantumDepth":
        return _get(cls, value)
