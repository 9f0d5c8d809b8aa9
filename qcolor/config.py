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

import logging
import os
from dataclasses import dataclass, field
from typing import Union

from qcolor.constants import QuantumDepth

__all__ = ["QCOLOR_QUANTUM_DEPTH_ENV", "QColorConfig", "QuantumConfig", "qcolor_config"]

logger = logging.getLogger(__name__)

QCOLOR_QUANTUM_DEPTH_ENV = "QCOLOR_QUANTUM_DEPTH"


def _depth_from_env() -> QuantumDepth:
    value = os.getenv(QCOLOR_QUANTUM_DEPTH_ENV)
    if value is None:
        return QuantumDepth.Q16
    logger.debug(f"Quantum depth `{value}` read from {QCOLOR_QUANTUM_DEPTH_ENV}")
    try:
        return QuantumDepth.get(value)
    except KeyError:
        raise ValueError(
            f"{QCOLOR_QUANTUM_DEPTH_ENV}={value} is not a valid QuantumDepth. Choose from: {list(QuantumDepth)}"
        ) from None


class QuantumConfig:
    _quantum_depth: QuantumDepth = QuantumDepth.Q16

    def __init__(self, quantum_depth: Union[str, QuantumDepth, None] = None) -> None:
        self.quantum_depth = _depth_from_env() if quantum_depth is None else quantum_depth

    @property
    def quantum_depth(self) -> QuantumDepth:
        return self._quantum_depth

    @quantum_depth.setter
    def quantum_depth(self, value: Union[str, QuantumDepth]) -> None:
        # Allow setting via string by converting to the Enum
        if isinstance(value, str):
            try:
                self._quantum_depth = QuantumDepth.get(value)
            except KeyError:
                raise ValueError(f"{value} is not a valid QuantumDepth. Choose from: {list(QuantumDepth)}") from None
        elif isinstance(value, QuantumDepth):
            self._quantum_depth = value
        else:
            raise TypeError("quantum_depth must be a string or QuantumDepth Enum.")


@dataclass
class QColorConfig:
    quantum: QuantumConfig = field(default_factory=QuantumConfig)


qcolor_config = QColorConfig()
