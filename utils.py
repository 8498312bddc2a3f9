#
# Copyright (C) 2017 The Android Open Source Project
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
# pylint: disable=not-callable

import datetime
import logging
import os
import shlex
import signal
import subprocess
from typing import Dict, List, Mapping

import constants


def logger():
    """Returns the module level logger."""
    return logging.getLogger(__name__)


def subprocess_run(cmd, *args, **kwargs):
    """subprocess.run with logging."""
    logger().debug('subprocess.run:%s %s',
                  datetime.datetime.now().strftime("%H:%M:%S"),
                  list2cmdline(cmd))
    return subprocess.run(cmd, *args, **kwargs)


def merged_env(extra_env: Mapping[str, str]) -> Dict[str, str]:
    """Returns the inherited environment overridden by extra_env."""
    env = dict(os.environ)
    env.update(extra_env)
    return env


def run_with_env(cmd: List[str], extra_env: Mapping[str, str]) -> int:
    """Runs cmd with extra_env on top of the inherited environment.

    The child shares our stdin, stdout and stderr. Returns its exit code,
    128 + N if it was killed by signal N, or constants.EXIT_FAILURE if it
    could not be started. A Ctrl-C while waiting returns 128 + SIGINT.
    """
    try:
        returncode = subprocess_run(cmd, env=merged_env(extra_env)).returncode
    except OSError as e:
        logger().error('Fatal: running %s: %s', cmd[0], e)
        return constants.EXIT_FAILURE
    except KeyboardInterrupt:
        logger().warning('Interrupted: %s', list2cmdline(cmd))
        return 128 + signal.SIGINT
    if returncode < 0:
        return 128 - returncode
    return returncode


def list2cmdline(args: List[str]) -> str:
    """Joins arguments into a Bourne-shell cmdline.

    Each argument can be a str, a bytes, or a path-like object. (subprocess.call
    is similarly flexible.)
    """
    return ' '.join([shlex.quote(os.fsdecode(arg)) for arg in args])
