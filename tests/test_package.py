import json

from promptparts.package import (
    extract_cargo_version,
    extract_package_version,
    extract_poetry_version,
    format_version,
    get_package_version,
)


def test_format_version():
    assert format_version("0.1.0") == "v0.1.0"


def test_format_version_strips_quotes_and_space():
    assert format_version(' "1.2.3" ') == "v1.2.3"


def test_extract_cargo_version():
    with_version = '[package]\nname = "starship"\nversion = "0.1.0"\n'
    assert extract_cargo_version(with_version) == "v0.1.0"

    without_version = '[package]\nname = "starship"\n'
    assert extract_cargo_version(without_version) is None


def test_extract_cargo_version_invalid_toml():
    assert extract_cargo_version("[package") is None


def test_extract_package_version():
    with_version = json.dumps({"name": "spacefish", "version": "0.1.0"})
    assert extract_package_version(with_version) == "v0.1.0"

    without_version = json.dumps({"name": "spacefish"})
    assert extract_package_version(without_version) is None


def test_extract_package_version_null_string():
    assert extract_package_version('{"version": "null"}') is None


def test_extract_package_version_not_object():
    assert extract_package_version("[1, 2]") is None


def test_extract_poetry_version():
    with_version = '[tool.poetry]\nname = "starship"\nversion = "0.1.0"\n'
    assert extract_poetry_version(with_version) == "v0.1.0"

    without_version = '[tool.poetry]\nname = "starship"\n'
    assert extract_poetry_version(without_version) is None


def test_get_package_version_prefers_cargo(tmp_path):
    (tmp_path / "Cargo.toml").write_text('[package]\nversion = "1.0.0"\n')
    (tmp_path / "package.json").write_text('{"version": "2.0.0"}')
    assert get_package_version(tmp_path) == "v1.0.0"


def test_get_package_version_uses_first_readable_only(tmp_path):
    (tmp_path / "Cargo.toml").write_text('[package]\nname = "x"\n')
    (tmp_path / "package.json").write_text('{"version": "2.0.0"}')
    assert get_package_version(tmp_path) is None


def test_get_package_version_from_pyproject(tmp_path):
    (tmp_path / "pyproject.toml").write_text('[tool.poetry]\nversion = "3.1.4"\n')
    assert get_package_version(tmp_path) == "v3.1.4"


def test_get_package_version_none(tmp_path):
    assert get_package_version(tmp_path) is None