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
"""APIs for accessing NDK toolchains."""

from pathlib import Path

import hosts
import paths

class NdkToolchain:
    """LLVM toolchain shipped in an NDK install."""

    ndk_dir: Path
    path: Path

    def __init__(self, ndk_dir: Path, host: hosts.Host) -> None:
        self.ndk_dir = ndk_dir
        self.path = paths.get_toolchain_dir(ndk_dir, host)

    @property
    def cc(self) -> Path:  # pylint: disable=invalid-name
        """Returns the path to c compiler."""
        return self.path / 'bin' / 'clang'

    @property
    def sysroot(self) -> Path:
        """Returns the path to the Android sysroot."""
        return self.path / 'sysroot'

    def arch_include_dir(self, triple: str) -> Path:
        """Returns the sysroot include dir holding headers for one triple."""
        return self.sysroot / 'usr' / 'include' / triple
