#
# Copyright (C) 2020 The Android Open Source Project
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
"""Constants and helper functions for hosts."""
import enum
import sys

import constants

@enum.unique
class Host(enum.Enum):
    """Enumeration of hosts that can run an NDK toolchain."""
    Darwin = 'darwin'
    Linux = 'linux'
    Windows = 'windows'

    @property
    def ndk_tag(self) -> str:
        """Returns the prebuilt directory name of the NDK toolchain for this Host."""
        return f'{self.value}-{constants.NDK_HOST_ARCH}'


def _get_default_host() -> Host:
    """Returns the Host matching the current machine."""
    if sys.platform.startswith('linux'):
        return Host.Linux
    if sys.platform.startswith('darwin'):
        return Host.Darwin
    if sys.platform.startswith('win'):
        return Host.Windows
    raise RuntimeError('Unsupported host: {}'.format(sys.platform))


def build_host() -> Host:
    """Returns the Host matching the current machine."""
    return _get_default_host()
