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
"""Helpers for paths."""

from pathlib import Path
from typing import Optional

import constants
import hosts


def default_sdk_dir(host: hosts.Host) -> Path:
    """Returns where Android Studio installs the SDK on a host."""
    home = Path.home()
    return {
        hosts.Host.Darwin: home / 'Library' / 'Android' / 'sdk',
        hosts.Host.Linux: home / 'Android' / 'Sdk',
        hosts.Host.Windows: home / 'AppData' / 'Local' / 'Android' / 'Sdk',
    }[host]


def get_ndk_parent_dir(host: hosts.Host, sdk_dir: Optional[Path] = None) -> Path:
    """Returns the folder holding side-by-side NDK installs."""
    if sdk_dir is None:
        sdk_dir = default_sdk_dir(host)
    return sdk_dir / constants.NDK_DIR_NAME


def get_toolchain_dir(ndk_dir: Path, host: hosts.Host) -> Path:
    """Returns the LLVM toolchain of an NDK install for a host."""
    return ndk_dir / 'toolchains' / 'llvm' / 'prebuilt' / host.ndk_tag
