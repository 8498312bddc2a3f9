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
"""Locates an installed NDK."""

import logging
from pathlib import Path
from typing import Optional

import hosts
import paths


def logger():
    """Returns the module level logger."""
    return logging.getLogger(__name__)


class NdkNotFoundError(FileNotFoundError):
    """Raised when no NDK install can be found."""


def find_ndk(min_sdk_version: int, host: hosts.Host,
             sdk_dir: Optional[Path] = None) -> Path:
    """Returns the first NDK install whose version starts with min_sdk_version.

    NDK installs live in <sdk>/ndk/<version>, e.g. ndk/21.4.7075529 is picked
    for 21. Entries are visited in name order so the result does not depend
    on the filesystem's listing order.

    Raises:
        NdkNotFoundError: if the ndk folder can't be listed or nothing matches.
    """
    ndk_parent = paths.get_ndk_parent_dir(host, sdk_dir)
    prefix = str(min_sdk_version)
    try:
        entries = sorted(ndk_parent.iterdir(), key=lambda entry: entry.name)
    except OSError as e:
        raise NdkNotFoundError(f'listing {ndk_parent}: {e.strerror or e}') from e

    for entry in entries:
        if entry.is_dir() and entry.name.startswith(prefix):
            logger().info('Found NDK %s for min sdk version %s', entry, prefix)
            return entry
    raise NdkNotFoundError(f'no NDK matching {prefix}* in {ndk_parent}')
