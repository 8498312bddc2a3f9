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
"""Tests for the ndkenv command line."""

import logging
from pathlib import Path
import sys

import pytest

import constants
import hosts
import ndkenv

PRINT_ENV = ('import os; print(" ".join(os.environ[k] for k in '
             '("CGO_ENABLED", "GOOS", "GOARCH", "GOARM", "CC", "CGO_CFLAGS")))')


@pytest.fixture(autouse=True)
def isolated_home(tmp_path, monkeypatch):
    monkeypatch.setattr(Path, 'home', lambda: tmp_path)
    monkeypatch.setattr(constants, 'DEFAULT_CONFIG_FILE', str(tmp_path / '.ndkenv.yaml'))
    monkeypatch.setattr(hosts, 'build_host', lambda: hosts.Host.Linux)
    monkeypatch.delenv('CGO_CFLAGS', raising=False)
    return tmp_path


@pytest.fixture
def ndk_dir(isolated_home) -> Path:
    ndk_dir = isolated_home / 'Android' / 'Sdk' / 'ndk' / '21.4.7075529'
    ndk_dir.mkdir(parents=True)
    return ndk_dir


def _python(code: str):
    return [sys.executable, '-c', code]


def test_runs_command_with_env(ndk_dir, capfd):
    code = ndkenv.run(['-a', 'arm64-v8a', '-s', '21', '--ndk', str(ndk_dir), '--']
                      + _python(PRINT_ENV))
    assert code == 0
    out = capfd.readouterr().out
    toolchain = ndk_dir / 'toolchains' / 'llvm' / 'prebuilt' / 'linux-x86_64'
    assert out.startswith('1 android arm64  ')
    assert f'{toolchain / "bin" / "clang"} -target aarch64-none-linux-android21 ' in out
    assert f'--sysroot={toolchain / "sysroot"}' in out
    assert 'Using env:' not in out


def test_locates_ndk(ndk_dir, capfd):
    code = ndkenv.run(['-a', 'x86', '-s', '21', '--'] + _python(PRINT_ENV))
    assert code == 0
    assert str(ndk_dir / 'toolchains') in capfd.readouterr().out


def test_passes_child_exit_code(ndk_dir):
    argv = ['-a', 'x86_64', '-s', '21', '--ndk', str(ndk_dir), '--']
    assert ndkenv.run(argv + _python('import sys; sys.exit(7)')) == 7


def test_command_without_separator(ndk_dir):
    argv = ['-a', 'x86_64', '-s', '21', '--ndk', str(ndk_dir)]
    assert ndkenv.run(argv + _python('import sys; sys.exit(len(sys.argv))') + ['-v']) == 2


def test_inherited_cgo_cflags(ndk_dir, capfd, monkeypatch):
    monkeypatch.setenv('CGO_CFLAGS', '-DNDKENV_TEST')
    argv = ['-a', 'armeabi-v7a', '-s', '16', '--ndk', str(ndk_dir), '--']
    assert ndkenv.run(argv + _python(PRINT_ENV)) == 0
    out = capfd.readouterr().out
    assert out.startswith('1 android arm 7 ')
    assert out.rstrip().endswith('armv7a-linux-androideabi/ -DNDKENV_TEST')


def test_verbose_prints_env(ndk_dir, capfd):
    argv = ['-v', '-a', 'arm64-v8a', '-s', '21', '--ndk', str(ndk_dir), '--']
    assert ndkenv.run(argv + _python('pass')) == 0
    lines = capfd.readouterr().out.splitlines()
    assert lines[0] == 'Using env:'
    assert [line.split('=', 1)[0] for line in lines[1:7]] == constants.ENV_KEYS
    assert lines[1:5] == ['CGO_ENABLED=1', 'GOOS=android', 'GOARCH=arm64', 'GOARM=']


def test_unknown_abi(ndk_dir, caplog):
    argv = ['-a', 'mips', '-s', '21', '--ndk', str(ndk_dir), '--']
    with caplog.at_level(logging.ERROR):
        assert ndkenv.run(argv + _python('pass')) == 1
    assert 'Fatal: unknown abi: mips' in caplog.text


def test_ndk_not_found(caplog):
    with caplog.at_level(logging.ERROR):
        assert ndkenv.run(['-a', 'x86', '-s', '21', '--'] + _python('pass')) == 1
    assert 'Fatal: Automatically locating NDK' in caplog.text


def test_ndk_not_found_for_version(ndk_dir, caplog):
    with caplog.at_level(logging.ERROR):
        assert ndkenv.run(['-a', 'x86', '-s', '30', '--'] + _python('pass')) == 1
    assert 'no NDK matching 30*' in caplog.text


def test_launch_failure(ndk_dir, tmp_path):
    argv = ['-a', 'x86', '-s', '21', '--ndk', str(ndk_dir), '--', str(tmp_path / 'missing')]
    assert ndkenv.run(argv) == 1


def test_no_command_prints_help(ndk_dir, capsys):
    assert ndkenv.run(['-a', 'x86', '-s', '21', '--ndk', str(ndk_dir)]) == 1
    out = capsys.readouterr().out
    assert 'ndkenv -a arm64-v8a -s 21 -- go build .' in out
    assert 'GOARM: ARM version' in out


@pytest.mark.parametrize('argv, missing', [
    (['-s', '21', '--', 'true'], '-a/--abi'),
    (['-a', 'x86', '--', 'true'], '-s/--min-sdk-version'),
])
def test_missing_required_flag(argv, missing, capsys):
    with pytest.raises(SystemExit) as excinfo:
        ndkenv.run(argv)
    assert excinfo.value.code == 1
    assert missing in capsys.readouterr().err


def test_bad_sdk_version(capsys):
    with pytest.raises(SystemExit) as excinfo:
        ndkenv.run(['-a', 'x86', '-s', 'lollipop', '--', 'true'])
    assert excinfo.value.code == 1
    assert 'invalid int value' in capsys.readouterr().err


def test_help_exits_zero(capsys):
    with pytest.raises(SystemExit) as excinfo:
        ndkenv.run(['--help'])
    assert excinfo.value.code == 0
    assert 'CGO_CFLAGS: Passes -isystem' in capsys.readouterr().out


def test_defaults_from_config_file(ndk_dir, isolated_home, capfd):
    (isolated_home / '.ndkenv.yaml').write_text(
        'abi: armeabi-v7a\nmin_sdk_version: 21\nverbose: true\n')
    assert ndkenv.run(['--'] + _python('pass')) == 0
    out = capfd.readouterr().out
    assert 'GOARM=7' in out
    assert 'armv7-none-linux-androideabi21' in out


def test_flags_override_config_file(ndk_dir, isolated_home, capfd):
    config_file = isolated_home / 'custom.yaml'
    config_file.write_text('abi: armeabi-v7a\nmin_sdk_version: 16\n')
    argv = ['--config', str(config_file), '-a', 'x86_64', '-s', '21', '--']
    assert ndkenv.run(argv + _python(PRINT_ENV)) == 0
    assert 'x86_64-none-linux-android21' in capfd.readouterr().out


def test_config_sdk_dir(isolated_home, capfd):
    sdk_dir = isolated_home / 'other-sdk'
    (sdk_dir / 'ndk' / '24.0.8215888').mkdir(parents=True)
    (isolated_home / '.ndkenv.yaml').write_text(f'sdk_dir: {sdk_dir.as_posix()}\n')
    assert ndkenv.run(['-a', 'x86', '-s', '24', '--'] + _python(PRINT_ENV)) == 0
    assert '24.0.8215888' in capfd.readouterr().out


def test_bad_config_file(isolated_home, caplog):
    (isolated_home / '.ndkenv.yaml').write_text('abi: [x86\n')
    with caplog.at_level(logging.ERROR):
        assert ndkenv.run(['-a', 'x86', '-s', '21', '--', 'true']) == 1
    assert 'Fatal: parsing ' in caplog.text


def test_unsupported_host(ndk_dir, monkeypatch, caplog):
    def unsupported_host():
        raise RuntimeError('Unsupported host: sunos5')
    monkeypatch.setattr(hosts, 'build_host', unsupported_host)
    argv = ['-a', 'x86', '-s', '21', '--ndk', str(ndk_dir), '--'] + _python('pass')
    with caplog.at_level(logging.ERROR):
        assert ndkenv.run(argv) == 1
    assert 'Fatal: Unsupported host: sunos5' in caplog.text


def test_config_file_not_utf8(ndk_dir, isolated_home, caplog):
    (isolated_home / '.ndkenv.yaml').write_bytes(b'abi: \xff\xfe x86\n')
    argv = ['-a', 'x86', '-s', '21', '--ndk', str(ndk_dir), '--'] + _python('pass')
    with caplog.at_level(logging.ERROR):
        assert ndkenv.run(argv) == 1
    assert 'Fatal: parsing ' in caplog.text


def test_main_exits_with_command_status(ndk_dir, monkeypatch):
    argv = ['-a', 'x86', '-s', '21', '--ndk', str(ndk_dir), '--'] + _python('import sys; sys.exit(5)')
    monkeypatch.setattr(sys, 'argv', ['ndkenv'] + argv)
    with pytest.raises(SystemExit) as excinfo:
        ndkenv.main()
    assert excinfo.value.code == 5
