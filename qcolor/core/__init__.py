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

"""qcolor core: validation checks and the exceptions they raise."""

from .check import QCOLOR_CHECK_SAMPLES, QCOLOR_CHECK_TYPE, are_checks_enabled, disable_checks, enable_checks
from .exceptions import BaseError, ShapeError, TypeCheckError

__all__ = [
    "QCOLOR_CHECK_SAMPLES",
    "QCOLOR_CHECK_TYPE",
    "BaseError",
    "ShapeError",
    "TypeCheckError",
    "are_checks_enabled",
    "disable_checks",
    "enable_checks",
]
