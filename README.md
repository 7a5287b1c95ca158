# promptparts

Small, independent helpers for building an informative shell prompt. Each
module works out one piece of context and returns it as a plain string. It
returns `None` when that piece does not apply.

## Installation

```
pip install promptparts
```

Python 3.11 or later is required. The only runtime dependency is PyYAML,
which is used to read kubeconfig files.

## Modules

| Module | Purpose |
| --- | --- |
| `promptparts.segment` | `Style` and `Segment`, for ANSI-styled pieces of text |
| `promptparts.utils` | `read_file` |
| `promptparts.cmd_duration` | `render_time`, e.g. `90` → `"1m30s"` |
| `promptparts.directory` | `contract_path`, `truncate`, `to_fish_style` |
| `promptparts.clock` | `format_time`, `create_offset_time_string`, `InvalidOffsetError` |
| `promptparts.java_version` | `parse_jre_version`, `format_java_version`, `get_java_version` |
| `promptparts.dotnet` | .NET SDK version from `global.json`, project files or the `dotnet` CLI |
| `promptparts.kubernetes` | `get_kube_context`, `read_kube_context` |
| `promptparts.package` | Package version from `Cargo.toml`, `package.json` or `pyproject.toml` |
| `promptparts.rust` | Rust toolchain resolution, including rustup overrides and `rust-toolchain` files |
| `promptparts.python_lang` | Python version, pyenv version name and active virtualenv |
| `promptparts.ruby` | `format_ruby_version`, `get_ruby_version` |
| `promptparts.aws` | AWS profile and region from the environment or `~/.aws/config` |
| `promptparts.git_state` | Labels for in-progress git operations (rebase, merge, bisect and so on) |
| `promptparts.memory_usage` | `format_kib`, e.g. `8388608` → `"8GiB"` |
| `promptparts.env_var` | `get_env_value` |
| `promptparts.hostname` | `trim_hostname` |
| `promptparts.character` | `ShellEditMode` and `resolve_edit_mode` for vi-style keymaps |

## Examples

```python
from promptparts.cmd_duration import render_time
from promptparts.directory import contract_path, truncate
from promptparts.package import format_version

render_time(10110)                                   # "2h48m30s"
contract_path("/home/me/code/app", "/home/me", "~")  # "~/code/app"
truncate("~/a/b/c/d", 3)                             # "b/c/d"
format_version("0.1.0")                              # "v0.1.0"
```

Time at a fixed UTC offset:

```python
from datetime import datetime, timezone
from promptparts.clock import create_offset_time_string

now = datetime(2014, 7, 8, 15, 36, 47, tzinfo=timezone.utc)
create_offset_time_string(now, "+5.75", "%r")   # "09:21:47 PM"
```

An offset that is not a number, or is not strictly between -24 and +24
hours, raises `InvalidOffsetError`.

The helpers that ask a tool for its version (`get_java_version`,
`get_ruby_version`, `get_python_version`, `get_rust_version`,
`get_latest_sdk_from_cli` and the like) run that tool. When it cannot be
started, they return `None`.

## What it does not do

This is a library of separate helpers. It has no command-line program, no
configuration file, and nothing that puts the pieces together into a finished
prompt; that is left to the caller. It has no Go toolchain detection, and it
does not read git branch or working-tree status itself: `git_state` is given
the repository state by the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```