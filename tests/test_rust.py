import subprocess

import pytest

from promptparts.rust import (
    RustcOutcome,
    env_rustup_toolchain,
    extract_toolchain_from_rustup_override_list,
    extract_toolchain_from_rustup_run_rustc_version,
    find_rust_toolchain_file,
    format_rustc_version,
    get_rust_version,
)

OVERRIDES_INPUT = (
    "/home/user/src/a                                beta-x86_64-unknown-linux-gnu\n"
    "/home/user/src/b                                nightly-x86_64-unknown-linux-gnu\n"
)


def test_no_overrides():
    assert extract_toolchain_from_rustup_override_list("no overrides\n", "") is None


@pytest.mark.parametrize(
    "cwd, expected",
    [
        ("/home/user/src/a/src", "beta-x86_64-unknown-linux-gnu"),
        ("/home/user/src/b/tests", "nightly-x86_64-unknown-linux-gnu"),
        ("/home/user/src/c/examples", None),
    ],
)
def test_override_list(cwd, expected):
    assert extract_toolchain_from_rustup_override_list(OVERRIDES_INPUT, cwd) == expected


def test_run_rustc_version_success():
    assert extract_toolchain_from_rustup_run_rustc_version(
        0, b"rustc 1.34.0\n", b""
    ) == (RustcOutcome.RUSTC_VERSION, "rustc 1.34.0\n")


def test_run_rustc_version_toolchain_name():
    assert extract_toolchain_from_rustup_run_rustc_version(
        1, b"", b"error: toolchain 'channel-triple' is not installed\n"
    ) == (RustcOutcome.TOOLCHAIN_NAME, "channel-triple")


def test_run_rustc_version_invalid_stdout():
    result = extract_toolchain_from_rustup_run_rustc_version(0, b"\xc3\x28", b"")
    assert result[0] is RustcOutcome.ERROR


def test_run_rustc_version_invalid_stderr():
    result = extract_toolchain_from_rustup_run_rustc_version(1, b"", b"\xc3\x28")
    assert result[0] is RustcOutcome.ERROR


def test_run_rustc_version_unexpected_error_format():
    result = extract_toolchain_from_rustup_run_rustc_version(1, b"", b"error:")
    assert result[0] is RustcOutcome.ERROR


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("rustc 1.34.0-nightly (b139669f3 2019-04-10)", "v1.34.0-nightly"),
        ("rustc 1.34.0-beta.1 (2bc1d406d 2019-04-10)", "v1.34.0-beta.1"),
        ("rustc 1.34.0 (91856ed52 2019-04-10)", "v1.34.0"),
        ("rustc 1.34.0", "v1.34.0"),
    ],
)
def test_format_rustc_version(raw, expected):
    assert format_rustc_version(raw) == expected


def test_env_rustup_toolchain(monkeypatch):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "  beta-x86_64-unknown-linux-gnu \n")
    assert env_rustup_toolchain() == "beta-x86_64-unknown-linux-gnu"
    monkeypatch.delenv("RUSTUP_TOOLCHAIN")
    assert env_rustup_toolchain() is None


def test_find_rust_toolchain_file_in_parent(tmp_path):
    (tmp_path / "rust-toolchain").write_text("nightly-x86_64-unknown-linux-gnu\nextra\n")
    nested = tmp_path / "crate" / "src"
    nested.mkdir(parents=True)
    assert find_rust_toolchain_file(nested) == "nightly-x86_64-unknown-linux-gnu"


def test_find_rust_toolchain_file_prefers_nearest(tmp_path):
    (tmp_path / "rust-toolchain").write_text("beta-x86_64-unknown-linux-gnu\n")
    nested = tmp_path / "inner"
    nested.mkdir()
    (nested / "rust-toolchain").write_text("  nightly-x86_64-unknown-linux-gnu  \n")
    assert find_rust_toolchain_file(nested) == "nightly-x86_64-unknown-linux-gnu"


def test_get_rust_version_uninstalled_toolchain(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "channel-triple")

    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(
            args, 1, stdout=b"", stderr=b"error: toolchain 'channel-triple' is not installed\n"
        )

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert get_rust_version(tmp_path) == "channel-triple"


def test_get_rust_version_via_rustup(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "beta")

    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(
            args, 0, stdout=b"rustc 1.34.0-beta.1 (2bc1d406d 2019-04-10)\n", stderr=b""
        )

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert get_rust_version(tmp_path) == "v1.34.0-beta.1"


def test_get_rust_version_falls_back_to_rustc(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "beta")

    def fake_run(args, **kwargs):
        if args[0] == "rustup":
            raise FileNotFoundError(args[0])
        return subprocess.CompletedProcess(
            args, 0, stdout=b"rustc 1.34.0 (91856ed52 2019-04-10)\n", stderr=b""
        )

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert get_rust_version(tmp_path) == "v1.34.0"


def test_get_rust_version_error_outcome(monkeypatch, tmp_path):
    monkeypatch.setenv("RUSTUP_TOOLCHAIN", "beta")

    def fake_run(args, **kwargs):
        return subprocess.CompletedProcess(args, 1, stdout=b"", stderr=b"error:")

    monkeypatch.setattr(subprocess, "run", fake_run)
    assert get_rust_version(tmp_path) is None