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
"""Android ABIs and the compiler settings used to target them."""

import types
from typing import List, Mapping, NamedTuple


class UnknownAbiError(ValueError):
    """Raised for an ABI name missing from the ABI table."""

    def __init__(self, abi: str) -> None:
        super().__init__(f'unknown abi: {abi}')
        self.abi = abi


class AbiConfig(NamedTuple):
    """Compiler and Go settings for one Android ABI."""

    # clang target without the API level, e.g. aarch64-none-linux-android.
    target: str
    # Subdirectory of sysroot/usr/include holding arch specific headers.
    triple: str
    goarch: str
    # Empty for non-ARM ABIs.
    goarm: str = ''

    def clang_target(self, min_sdk_version: int) -> str:
        """Returns the value of clang's -target flag for an API level."""
        return f'{self.target}{min_sdk_version}'


# http://android-doc.github.io/ndk/guides/standalone_toolchain.html
_ARMEABI_V7A = AbiConfig(
    target='armv7-none-linux-androideabi',
    triple='armv7a-linux-androideabi',
    goarch='arm',
    goarm='7')
_ARM64_V8A = AbiConfig(
    target='aarch64-none-linux-android',
    triple='aarch64-linux-android',
    goarch='arm64')
_X86 = AbiConfig(
    target='i686-none-linux-android',
    triple='i686-linux-android',
    goarch='386')
_X86_64 = AbiConfig(
    target='x86_64-none-linux-android',
    triple='x86_64-linux-android',
    goarch='amd64')

ABIS: Mapping[str, AbiConfig] = types.MappingProxyType({
    'armeabi-v7a': _ARMEABI_V7A,
    'arm64-v8a': _ARM64_V8A,
    'x86': _X86,
    'x86_64': _X86_64,
})

_ALIASES: Mapping[str, str] = types.MappingProxyType({
    'x86-64': 'x86_64',
})


def known_abis() -> List[str]:
    """Returns the canonical ABI names."""
    return list(ABIS)


def resolve_abi(abi: str) -> AbiConfig:
    """Returns the AbiConfig for an ABI name.

    Raises:
        UnknownAbiError: if the name is neither an ABI nor an alias of one.
    """
    try:
        return ABIS[_ALIASES.get(abi, abi)]
    except KeyError:
        raise UnknownAbiError(abi) from None
