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

import pytest
import torch

import qcolor
from qcolor.core import check


def get_test_quantums() -> dict[str, qcolor.QuantumDepth]:
    """Create a dictionary with the quantum depths to test the source code.

    Return:
        dict(str, QuantumDepth): list with quantum depth names.

    """
    return {depth.name: depth for depth in qcolor.QuantumDepth}


TEST_QUANTUMS: dict[str, qcolor.QuantumDepth] = get_test_quantums()


@pytest.fixture()
def quantum(quantum_name) -> qcolor.color.Quantum:
    """Return quantum for testing."""
    return qcolor.color.Quantum(TEST_QUANTUMS[quantum_name])


@pytest.fixture(autouse=True)
def reset_checks():
    """Leave validation checks enabled after every test."""
    yield
    check.enable_checks()


def pytest_generate_tests(metafunc):
    """Generate tests."""
    quantum_names = None

    if "quantum_name" in metafunc.fixturenames:
        raw_value = metafunc.config.getoption("--quantum")
        if raw_value == "all":
            quantum_names = list(TEST_QUANTUMS.keys())
        else:
            quantum_names = raw_value.split(",")

    if quantum_names is not None:
        metafunc.parametrize("quantum_name", quantum_names)


def pytest_addoption(parser):
    """Add options."""
    parser.addoption("--quantum", action="store", default="all")


def pytest_report_header(config):
    """Return report header."""
    return f"""
main deps:
    - qcolor-{qcolor.__version__}
    - torch-{torch.__version__}
configured quantum: {qcolor.config.qcolor_config.quantum.quantum_depth.name}
"""


@pytest.fixture(autouse=True)
def add_doctest_deps(doctest_namespace):
    """Add dependencies for doctests."""
    doctest_namespace["torch"] = torch
    doctest_namespace["qcolor"] = qcolor
