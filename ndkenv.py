#!/usr/bin/env python3
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
"""Configures environment variables for cross-compiling cgo projects with the Android NDK:
- CGO_ENABLED: 1
- CC: C compiler and flags for relevant ABI and SDK version
- CGO_CFLAGS: Passes -isystem in order to locate header files
- GOOS: android
- GOARCH: Architecture used by go build, mapped from ABI
- GOARM: ARM version, set when needed based on ABI
"""

import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

import abis
import configs
import constants
import hosts
import ndk
import toolchains
import user_config
import utils

USAGE = ('%(prog)s [-v] -a ABI -s SDK_VERSION [--ndk NDK] -- command\n'
         'Example:\n'
         '  %(prog)s -a arm64-v8a -s 21 -- go build .')


def logger():
    """Returns the module level logger."""
    return logging.getLogger(__name__)


class ArgParser(argparse.ArgumentParser):
    """Command line parser; errors exit with constants.EXIT_FAILURE."""

    def __init__(self):
        super().__init__(
            prog='ndkenv',
            usage=USAGE,
            description=__doc__,
            formatter_class=argparse.RawDescriptionHelpFormatter)

        self.add_argument(
            '-v', '--verbose', action='store_true', default=None,
            help='Print the env to stdout before running command.')

        self.add_argument(
            '-a', '--abi',
            help='Android ABI to target, one of: {}.'.format(', '.join(abis.known_abis())))

        self.add_argument(
            '--ndk',
            help='Path to NDK install. Optional, if unspecified then NDK will '
            'be located automatically.')

        self.add_argument(
            '-s', '--min-sdk-version', type=int,
            help='Minimum android SDK version.')

        self.add_argument(
            '--config', metavar='FILE',
            help='YAML file with defaults for the flags above '
            f'(default: {constants.DEFAULT_CONFIG_FILE} if it exists).')

        self.add_argument(
            'command', nargs=argparse.REMAINDER,
            help='Command to run, usually after --.')

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(constants.EXIT_FAILURE, f'{self.prog}: error: {message}\n')


def _strip_separator(command: List[str]) -> List[str]:
    if command and command[0] == '--':
        return command[1:]
    return command


def _fatal(message: str, *args) -> int:
    logger().error('Fatal: ' + message, *args)
    return constants.EXIT_FAILURE


def run(argv: Optional[List[str]] = None) -> int:
    """Runs ndkenv with argv and returns the exit code."""
    parser = ArgParser()
    args = parser.parse_args(argv)
    try:
        settings = user_config.resolve(args.config, constants.DEFAULT_CONFIG_FILE)
    except user_config.ConfigError as e:
        return _fatal('%s', e)

    verbose = args.verbose if args.verbose is not None else settings.get('verbose', False)
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    abi_name = args.abi if args.abi is not None else settings.get('abi')
    min_sdk_version = (args.min_sdk_version if args.min_sdk_version is not None
                       else settings.get('min_sdk_version'))
    ndk_dir = args.ndk if args.ndk is not None else settings.get('ndk')

    missing = []
    if abi_name is None:
        missing.append('-a/--abi')
    if min_sdk_version is None:
        missing.append('-s/--min-sdk-version')
    if missing:
        parser.error('the following arguments are required: ' + ', '.join(missing))

    command = _strip_separator(args.command)
    if not command:
        parser.print_help(sys.stdout)
        return constants.EXIT_FAILURE

    try:
        host = hosts.build_host()
    except RuntimeError as e:
        return _fatal('%s', e)

    if ndk_dir is None:
        sdk_dir = settings.get('sdk_dir')
        try:
            ndk_path = ndk.find_ndk(min_sdk_version, host,
                                    Path(sdk_dir) if sdk_dir is not None else None)
        except ndk.NdkNotFoundError as e:
            return _fatal('Automatically locating NDK: %s', e)
    else:
        ndk_path = Path(ndk_dir)

    try:
        abi = abis.resolve_abi(abi_name)
    except abis.UnknownAbiError as e:
        return _fatal('%s', e)

    config = configs.AndroidConfig(abi, min_sdk_version,
                                   toolchains.NdkToolchain(ndk_path, host))
    logger().debug('Targeting %s with NDK %s', config, ndk_path)
    new_env = config.env()
    if verbose:
        lines = '\n'.join(f'{key}={value}' for key, value in new_env.items())
        print(f'Using env:\n{lines}', flush=True)

    return utils.run_with_env(command, new_env)


def main():
    logging.basicConfig(level=logging.WARNING)
    sys.exit(run())


if __name__ == '__main__':
    main()
