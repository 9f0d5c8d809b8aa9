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

# NOTE: config and constants must go first since the color modules read them at import time
from . import config
from . import constants

# import the other modules for convenience
from . import color, core

# NOTE: we are going to expose to top level very few things
from qcolor.color import HSLColor, RGBColor
from qcolor.constants import QuantumDepth

# Version variable
__version__ = "0.1.0"
