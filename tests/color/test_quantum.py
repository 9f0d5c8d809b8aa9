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

import math

import pytest
import torch

from qcolor.color import Quantum, as_quantum
from qcolor.config import qcolor_config
from qcolor.constants import QuantumDepth

from testing.base import BaseTester


class TestQuantum(BaseTester):
    @pytest.mark.parametrize(
        "depth,expected_max,expected_dtype",
        [
            (QuantumDepth.Q8, 255.0, torch.uint8),
            (QuantumDepth.Q16, 65535.0, torch.int32),
            (QuantumDepth.Q16HDRI, 1.0, torch.float32),
        ],
    )
    def test_smoke(self, depth, expected_max, expected_dtype):
        q = Quantum(depth)
        assert q.max == expected_max
        assert q.dtype == expected_dtype
        assert q.scale == 1.0 / expected_max
        assert q.is_hdri == (depth is QuantumDepth.Q16HDRI)

    def test_bounds(self, quantum):
        assert quantum.scale_to_quantum(0.0) == 0
        assert quantum.scale_to_quantum(1.0) == quantum.max

    def test_saturation(self, quantum):
        assert quantum.scale_to_quantum(-0.25) == 0
        assert quantum.scale_to_quantum(1.5) == quantum.max
        assert quantum.scale_to_quantum(math.inf) == quantum.max
        assert quantum.scale_to_quantum(-math.inf) == 0
        assert quantum.scale_to_quantum(math.nan) == 0

    def test_round_half_up(self):
        q8 = Quantum(QuantumDepth.Q8)
        assert q8.scale_to_quantum(0.5) == 128
        assert q8.scale_to_quantum(127.4 / 255) == 127
        assert q8.scale_to_quantum(127.6 / 255) == 128

    def test_integer_samples(self):
        assert isinstance(Quantum(QuantumDepth.Q16).scale_to_quantum(0.5), int)
        assert isinstance(Quantum(QuantumDepth.Q16HDRI).scale_to_quantum(0.5), float)

    def test_hdri_keeps_fraction(self):
        self.assert_close(Quantum(QuantumDepth.Q16HDRI).scale_to_quantum(0.3), 0.3, rtol=1e-6, atol=1e-6)

    def test_encode(self, quantum):
        values = torch.tensor([[0.0, 0.5], [1.0, 2.0]], dtype=torch.float64)
        out = quantum.encode(values)
        assert out.shape == values.shape
        assert out.dtype == quantum.dtype
        assert out[1, 0].item() == quantum.max
        assert out[1, 1].item() == quantum.max

    def test_default(self, monkeypatch):
        monkeypatch.setattr(qcolor_config.quantum, "quantum_depth", QuantumDepth.Q8)
        assert Quantum.default() == Quantum(QuantumDepth.Q8)
        assert as_quantum() == Quantum(QuantumDepth.Q8)

    @pytest.mark.parametrize("value", ["Q16", "q16", 16, QuantumDepth.Q16, Quantum(QuantumDepth.Q16)])
    def test_as_quantum(self, value):
        assert as_quantum(value) == Quantum(QuantumDepth.Q16)
