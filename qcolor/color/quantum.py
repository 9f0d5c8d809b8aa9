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

from dataclasses import dataclass
from typing import Optional, Union

import torch
from torch import Tensor

from qcolor.config import qcolor_config
from qcolor.constants import QuantumDepth

__all__ = ["Quantum", "as_quantum"]

_QUANTUM_MAX: dict[QuantumDepth, float] = {
    QuantumDepth.Q8: 255.0,
    QuantumDepth.Q16: 65535.0,
    QuantumDepth.Q16HDRI: 1.0,
}

# torch has no arithmetic on uint16, Q16 samples are held in int32
_QUANTUM_DTYPE: dict[QuantumDepth, torch.dtype] = {
    QuantumDepth.Q8: torch.uint8,
    QuantumDepth.Q16: torch.int32,
    QuantumDepth.Q16HDRI: torch.float32,
}


@dataclass(frozen=True)
class Quantum:
    r"""Sample depth of the pixel data and the rule to rescale normalized values to it.

    Args:
        depth: the per-channel sample depth.

    Example:
        >>> q8 = Quantum(QuantumDepth.Q8)
        >>> q8.max
        255.0
        >>> q8.scale_to_quantum(0.5)
        128
        >>> q8.scale_to_quantum(1.7)
        255
    """

    depth: QuantumDepth

    @classmethod
    def default(cls) -> Quantum:
        """Return the quantum of the configured depth."""
        return cls(qcolor_config.quantum.quantum_depth)

    @property
    def max(self) -> float:
        return _QUANTUM_MAX[self.depth]

    @property
    def scale(self) -> float:
        """Factor mapping a sample in ``[0, max]`` to ``[0, 1]``."""
        return 1.0 / self.max

    @property
    def dtype(self) -> torch.dtype:
        return _QUANTUM_DTYPE[self.depth]

    @property
    def is_hdri(self) -> bool:
        return self.dtype.is_floating_point

    def encode(self, values: Tensor) -> Tensor:
        r"""Rescale normalized values to samples of this depth.

        Values are multiplied by :attr:`max` and saturate at ``0`` and :attr:`max`.
        Integer depths round half up. NaN maps to ``0``.

        Args:
            values: normalized values of any shape.

        Returns:
            samples with the same shape and the dtype of this quantum.
        """
        out = torch.nan_to_num(values.to(torch.float64) * self.max, nan=0.0, posinf=self.max, neginf=0.0)
        out = out.clamp(0.0, self.max)
        if not self.is_hdri:
            out = torch.floor(out + 0.5)
        return out.to(self.dtype)

    def scale_to_quantum(self, value: float) -> Union[int, float]:
        """Rescale a single normalized value, see :meth:`encode`."""
        return self.encode(torch.tensor(value, dtype=torch.float64)).item()


def as_quantum(quantum: Optional[Union[Quantum, QuantumDepth, str, int]] = None) -> Quantum:
    """Resolve a quantum given as an instance, a depth, a depth name or value, or ``None`` for the default.

    Example:
        >>> as_quantum("q8").max
        255.0
    """
    if quantum is None:
        return Quantum.default()
    if isinstance(quantum, Quantum):
        return quantum
    return Quantum(QuantumDepth.get(quantum))
