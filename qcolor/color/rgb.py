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

from __future__ import annotations

from typing import Optional, Union

import torch
from torch import Tensor

from qcolor.color.quantum import Quantum, as_quantum
from qcolor.constants import QuantumDepth
from qcolor.core.check import QCOLOR_CHECK_SAMPLES

__all__ = ["RGBColor"]

QuantumLike = Union[Quantum, QuantumDepth, str, int]


class RGBColor:
    r"""An RGB color with channel samples in the range of a quantum.

    The samples are held in a tensor of shape :math:`(3,)` with the dtype of the quantum.
    Values given to the constructor or the setters are stored as they come, cast to
    that dtype. Use :meth:`from_normalized` to rescale values in ``[0, 1]``.

    Args:
        red: red sample.
        green: green sample.
        blue: blue sample.
        quantum: the sample depth. Defaults to the configured one.

    Example:
        >>> color = RGBColor(255, 128, 0, quantum="Q8")
        >>> color.to_tuple()
        (255, 128, 0)
        >>> color.data
        tensor([255, 128,   0], dtype=torch.uint8)
    """

    def __init__(
        self, red: float = 0, green: float = 0, blue: float = 0, quantum: Optional[QuantumLike] = None
    ) -> None:
        self._quantum = as_quantum(quantum)
        self._data = torch.tensor([red, green, blue], dtype=self._quantum.dtype)

    @classmethod
    def from_normalized(
        cls, red: float, green: float, blue: float, quantum: Optional[QuantumLike] = None
    ) -> RGBColor:
        """Create a color from values in ``[0, 1]`` rescaled with :meth:`Quantum.encode`.

        Example:
            >>> RGBColor.from_normalized(1.0, 0.5, 0.0, quantum="Q8").to_tuple()
            (255, 128, 0)
        """
        q = as_quantum(quantum)
        return cls.from_tensor(q.encode(torch.tensor([red, green, blue], dtype=torch.float64)), q)

    @classmethod
    def from_tensor(cls, data: Tensor, quantum: Optional[QuantumLike] = None) -> RGBColor:
        """Create a color from a tensor of shape :math:`(3,)` holding samples in the quantum range."""
        QCOLOR_CHECK_SAMPLES(data)
        color = cls(quantum=quantum)
        color._data = data.detach().to(device="cpu", dtype=color._quantum.dtype).clone()
        return color

    @property
    def quantum(self) -> Quantum:
        return self._quantum

    @property
    def data(self) -> Tensor:
        """The samples as a tensor of shape :math:`(3,)`."""
        return self._data

    @property
    def red(self) -> Union[int, float]:
        return self._data[0].item()

    @red.setter
    def red(self, value: float) -> None:
        self._data[0] = value

    @property
    def green(self) -> Union[int, float]:
        return self._data[1].item()

    @green.setter
    def green(self, value: float) -> None:
        self._data[1] = value

    @property
    def blue(self) -> Union[int, float]:
        return self._data[2].item()

    @blue.setter
    def blue(self, value: float) -> None:
        self._data[2] = value

    def to_tuple(self) -> tuple[Union[int, float], Union[int, float], Union[int, float]]:
        return self.red, self.green, self.blue

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RGBColor):
            return NotImplemented
        return self._quantum == other._quantum and bool(torch.equal(self._data, other._data))

    def __hash__(self) -> int:
        return hash((self._quantum.depth, self.to_tuple()))

    def __repr__(self) -> str:
        return f"RGBColor(red={self.red}, green={self.green}, blue={self.blue}, quantum={self._quantum.depth.name})"
