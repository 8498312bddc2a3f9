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
"""Fixed names and values for the NDK environment."""

from typing import List

# The NDK only ships x86_64 host prebuilts.
# https://developer.android.com/ndk/guides/other_build_systems
NDK_HOST_ARCH: str = 'x86_64'

# Name of the folder holding side-by-side NDK installs inside an SDK.
NDK_DIR_NAME: str = 'ndk'

GOOS: str = 'android'

CGO_ENABLED_KEY: str = 'CGO_ENABLED'
GOOS_KEY: str = 'GOOS'
GOARCH_KEY: str = 'GOARCH'
GOARM_KEY: str = 'GOARM'
CC_KEY: str = 'CC'
CGO_CFLAGS_KEY: str = 'CGO_CFLAGS'

# Order in which the composed variables are reported.
ENV_KEYS: List[str] = [
    CGO_ENABLED_KEY, GOOS_KEY, GOARCH_KEY, GOARM_KEY, CC_KEY, CGO_CFLAGS_KEY,
]

DEFAULT_CONFIG_FILE: str = '~/.ndkenv.yaml'

# Exit code for argument, config and NDK errors, and for commands that
# cannot be launched.
EXIT_FAILURE: int = 1
