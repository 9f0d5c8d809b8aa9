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

import logging
import math
from typing import Optional, Union

import torch

from qcolor.color.quantum import Quantum, as_quantum
from qcolor.color.rgb import QuantumLike, RGBColor
from qcolor.core.check import QCOLOR_CHECK_TYPE

__all__ = ["HSLColor", "hsl_to_rgb", "rgb_to_hsl"]

logger = logging.getLogger(__name__)


def rgb_to_hsl(
    red: float, green: float, blue: float, quantum_max: Optional[float] = None
) -> tuple[float, float, float]:
    r"""Convert RGB samples to normalized HSL components.

    Args:
        red: red sample in the range :math:`[0, quantum\_max]`.
        green: green sample in the range :math:`[0, quantum\_max]`.
        blue: blue sample in the range :math:`[0, quantum\_max]`.
        quantum_max: the largest sample value. Defaults to the one of the configured quantum.

    Returns:
        hue, saturation and lightness. The hue is a fraction of a full turn in :math:`[0, 1)`.

    Example:
        >>> rgb_to_hsl(255, 0, 0, 255)
        (0.0, 1.0, 0.5)
        >>> rgb_to_hsl(0.5, 0.5, 0.5, 1.0)
        (0.0, 0.0, 0.5)
    """
    if quantum_max is None:
        quantum_max = Quantum.default().max

    scale = 1.0 / quantum_max
    r, g, b = red * scale, green * scale, blue * scale
    maxc = max(r, g, b)
    minc = min(r, g, b)
    chroma = maxc - minc

    lightness = (maxc + minc) / 2.0
    if chroma <= 0.0:
        return 0.0, 0.0, lightness

    if r == maxc:
        hue = (g - b) / chroma
        if g < b:
            hue += 6.0
    elif g == maxc:
        hue = 2.0 + (b - r) / chroma
    else:
        hue = 4.0 + (r - g) / chroma
    hue *= 60.0 / 360.0

    if lightness <= 0.5:
        saturation = chroma / (2.0 * lightness)
    else:
        saturation = chroma / (2.0 - 2.0 * lightness)
    return hue, saturation, lightness


def _floor(value: float) -> float:
    # math.floor rejects nan and infinities
    return math.floor(value) if math.isfinite(value) else value


def _hsl_to_normalized_rgb(hue: float, saturation: float, lightness: float) -> tuple[float, float, float]:
    h = hue * 360.0
    if lightness <= 0.5:
        chroma = 2.0 * lightness * saturation
    else:
        chroma = (2.0 - 2.0 * lightness) * saturation
    minc = lightness - 0.5 * chroma

    h -= 360.0 * _floor(h / 360.0)
    h /= 60.0
    x = chroma * (1.0 - abs(h - 2.0 * _floor(h / 2.0) - 1.0))

    sector = math.floor(h) if math.isfinite(h) else 0
    if sector == 1:
        return minc + x, minc + chroma, minc
    if sector == 2:
        return minc, minc + chroma, minc + x
    if sector == 3:
        return minc, minc + x, minc + chroma
    if sector == 4:
        return minc + x, minc, minc + chroma
    if sector == 5:
        return minc + chroma, minc, minc + x
    return minc + chroma, minc + x, minc


def hsl_to_rgb(
    hue: float, saturation: float, lightness: float, quantum: Optional[QuantumLike] = None
) -> tuple[Union[int, float], Union[int, float], Union[int, float]]:
    r"""Convert normalized HSL components to RGB samples.

    The hue wraps around, so any value is accepted. The resulting samples are
    rescaled with :meth:`Quantum.encode` and saturate at the bounds of the quantum.

    Args:
        hue: fraction of a full turn, :math:`[0, 1)` covers the whole color wheel.
        saturation: saturation in :math:`[0, 1]`.
        lightness: lightness in :math:`[0, 1]`.
        quantum: the sample depth of the result. Defaults to the configured one.

    Returns:
        red, green and blue samples.

    Example:
        >>> hsl_to_rgb(1 / 3, 1.0, 0.5, quantum="Q8")
        (0, 255, 0)
        >>> hsl_to_rgb(0.5, 1.0, 0.5, quantum="Q16")
        (0, 65535, 65535)
    """
    q = as_quantum(quantum)
    samples = q.encode(torch.tensor(_hsl_to_normalized_rgb(hue, saturation, lightness), dtype=torch.float64))
    red, green, blue = samples.tolist()
    return red, green, blue


class HSLColor:
    r"""A color given by hue, saturation and lightness.

    The three components are stored as given, without clamping. A color created with
    :meth:`from_rgb` keeps the source RGB color as its materialized :attr:`color` until
    one of the components is changed. Otherwise the RGB color is regenerated on each read.

    Args:
        hue: fraction of a full turn, :math:`[0, 1)` covers the whole color wheel.
        saturation: saturation in :math:`[0, 1]`.
        lightness: lightness in :math:`[0, 1]`.
        quantum: the sample depth used to regenerate RGB colors. Defaults to the configured one.

    Example:
        >>> hsl = HSLColor.from_rgb(RGBColor(255, 0, 0, quantum="Q8"))
        >>> hsl.hue, hsl.saturation, hsl.lightness
        (0.0, 1.0, 0.5)
        >>> hsl.hue = 1 / 3
        >>> hsl.color.to_tuple()
        (0, 255, 0)
    """

    def __init__(
        self, hue: float, saturation: float, lightness: float, quantum: Optional[QuantumLike] = None
    ) -> None:
        self._hue = hue
        self._saturation = saturation
        self._lightness = lightness
        self._quantum = as_quantum(quantum)
        self._source: Optional[RGBColor] = None

    @classmethod
    def from_rgb(cls, color: Optional[RGBColor]) -> Optional[HSLColor]:
        """Create an HSL color from an RGB color.

        Args:
            color: the source color, its quantum is kept for regeneration.

        Returns:
            the HSL color, or ``None`` if ``color`` is ``None``.
        """
        if color is None:
            logger.debug("No source color given, no HSL color created")
            return None
        QCOLOR_CHECK_TYPE(color, RGBColor, "An HSLColor can only be created from an RGBColor.")

        hue, saturation, lightness = rgb_to_hsl(color.red, color.green, color.blue, color.quantum.max)
        hsl = cls(hue, saturation, lightness, color.quantum)
        hsl._source = RGBColor.from_tensor(color.data, color.quantum)
        return hsl

    @property
    def hue(self) -> float:
        return self._hue

    @hue.setter
    def hue(self, value: float) -> None:
        self._hue = value
        self._source = None

    @property
    def saturation(self) -> float:
        return self._saturation

    @saturation.setter
    def saturation(self, value: float) -> None:
        self._saturation = value
        self._source = None

    @property
    def lightness(self) -> float:
        return self._lightness

    @lightness.setter
    def lightness(self, value: float) -> None:
        self._lightness = value
        self._source = None

    @property
    def quantum(self) -> Quantum:
        return self._quantum

    @property
    def color(self) -> RGBColor:
        """The materialized RGB color, a new instance on every read."""
        if self._source is not None:
            return RGBColor.from_tensor(self._source.data, self._source.quantum)
        return self.to_rgb()

    def to_rgb(self, quantum: Optional[QuantumLike] = None) -> RGBColor:
        """Regenerate the RGB color from the current components.

        Args:
            quantum: the sample depth of the result. Defaults to the quantum of this color.
        """
        q = self._quantum if quantum is None else as_quantum(quantum)
        return RGBColor.from_normalized(*_hsl_to_normalized_rgb(self._hue, self._saturation, self._lightness), q)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HSLColor):
            return NotImplemented
        return (self._hue, self._saturation, self._lightness) == (other._hue, other._saturation, other._lightness)

    def __hash__(self) -> int:
        return hash((self._hue, self._saturation, self._lightness))

    def __repr__(self) -> str:
        return f"HSLColor(hue={self._hue}, saturation={self._saturation}, lightness={self._lightness})"
