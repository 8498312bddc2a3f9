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
"""Build configuration for cgo cross compiles targeting Android."""

import os
from typing import Dict, List, Mapping, Optional

import abis
import constants
import toolchains


class AndroidConfig:
    """Environment for building cgo code for one ABI and API level."""

    abi: abis.AbiConfig
    min_sdk_version: int
    toolchain: toolchains.NdkToolchain

    def __init__(self, abi: abis.AbiConfig, min_sdk_version: int,
                 toolchain: toolchains.NdkToolchain) -> None:
        self.abi = abi
        self.min_sdk_version = min_sdk_version
        self.toolchain = toolchain

    @property
    def llvm_triple(self) -> str:
        return self.abi.clang_target(self.min_sdk_version)

    @property
    def cc(self) -> str:  # pylint: disable=invalid-name
        """Returns the compiler invocation, with target and sysroot."""
        return (f'{self.toolchain.cc} -target {self.llvm_triple} '
                f'--sysroot={self.toolchain.sysroot}')

    def cflags(self, extra_cflags: Optional[str] = None) -> str:
        """Returns CGO_CFLAGS, followed by extra_cflags if given."""
        include_dir = self.toolchain.arch_include_dir(self.abi.triple)
        cflags: List[str] = ['-isystem', f'{include_dir}/']
        if extra_cflags:
            cflags.append(extra_cflags)
        return ' '.join(cflags)

    def env(self, orig_env: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
        """Returns the variables to set, in constants.ENV_KEYS order.

        CGO_CFLAGS from orig_env is appended to the generated flags.
        """
        if orig_env is None:
            orig_env = os.environ
        return {
            constants.CGO_ENABLED_KEY: '1',
            constants.GOOS_KEY: constants.GOOS,
            constants.GOARCH_KEY: self.abi.goarch,
            constants.GOARM_KEY: self.abi.goarm,
            constants.CC_KEY: self.cc,
            constants.CGO_CFLAGS_KEY: self.cflags(orig_env.get(constants.CGO_CFLAGS_KEY)),
        }

    def __str__(self) -> str:
        return self.llvm_triple
