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
"""Defaults for command line flags, read from a YAML file.

Example ~/.ndkenv.yaml:

    abi: arm64-v8a
    min_sdk_version: 21
    sdk_dir: ~/android-sdk
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml

# Allowed keys and the type of their values.
_KEYS: Dict[str, type] = {
    'abi': str,
    'ndk': str,
    'min_sdk_version': int,
    'verbose': bool,
    'sdk_dir': str,
}
_PATH_KEYS = ('ndk', 'sdk_dir')


class ConfigError(ValueError):
    """Raised for a config file that can't be read or has bad content."""


def _check_value(config_file: Path, key: str, value: Any) -> Any:
    expected = _KEYS[key]
    # bool is a subclass of int, but `min_sdk_version: true` is a mistake.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ConfigError(f'{config_file}: {key} must be {expected.__name__}, '
                          f'got {type(value).__name__}')
    if key in _PATH_KEYS:
        return str(Path(value).expanduser())
    return value


def load(config_file: Path) -> Dict[str, Any]:
    """Returns the settings in config_file, keyed like the CLI flags' dests."""
    try:
        # PyYAML detects the encoding of byte streams.
        with config_file.open('rb') as infile:
            data = yaml.safe_load(infile)
    except OSError as e:
        raise ConfigError(f'reading {config_file}: {e.strerror or e}') from e
    except yaml.YAMLError as e:
        raise ConfigError(f'parsing {config_file}: {e}') from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f'{config_file}: expected a mapping at top level')

    settings: Dict[str, Any] = {}
    for key, value in data.items():
        if key not in _KEYS:
            raise ConfigError(f'{config_file}: unknown key {key!r}')
        settings[key] = _check_value(config_file, key, value)
    return settings


def load_default(default_file: Path) -> Dict[str, Any]:
    """Like load(), but an absent default_file is an empty config."""
    if not default_file.is_file():
        return {}
    return load(default_file)


def resolve(config_file: Optional[str], default_file: str) -> Dict[str, Any]:
    """Loads config_file if given, else default_file when it exists."""
    if config_file is not None:
        return load(Path(config_file).expanduser())
    return load_default(Path(default_file).expanduser())
