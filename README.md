# magi

A library that reads a Git working tree and turns it into the lines a
terminal Git client shows: the head and push references, the tag on HEAD,
untracked files, unstaged and staged changes with their hunks, and the most
recent commits. It also holds the client's UI state, colour themes,
configuration and key handling. All Git work is done by running the `git`
program, which must be on the `PATH`.

## Reading a repository

```python
from magi.git.git_info import GitInfo

info = GitInfo(".")
for line in info.get_lines():
    print(line.content, line.section)

print(info.has_staged_changes())
```

`GitInfo(path)` raises `magi.errors.GitError` when `path` is not inside a
Git working tree; both `GitInfo.get_lines()` and `has_staged_changes()`
raise it too when the repository has no commit yet.

`get_lines()` joins the non-empty sections (info, untracked files, unstaged
changes, staged changes, recent commits) with one `EmptyLine` between each.
The sections can also be read on their own through the `get_lines`
function of `magi.git.info`, `magi.git.untracked_files`,
`magi.git.unstaged_changes`, `magi.git.staged_changes` and
`magi.git.recent_commits`, each taking a `magi.git.repository.Repository`.
Recent commits are limited to the ten newest reachable from HEAD.

Every line carries the `SectionType` it belongs to, which drives collapsing:

```python
lines = info.get_lines()
collapsed = {line.section for line in lines
             if line.section is not None and line.section.default_collapsed()}
visible = [line for line in lines if not line.is_hidden(collapsed)]
```

File sections start collapsed; a header line (section header, file line or
HEAD line) stays visible when its own section is collapsed, and
`Line.collapsible_section()` tells which section a header toggles.

Unified diffs can be parsed directly with
`magi.git.diff_utils.collect_file_changes(patch)` and turned into lines with
`build_change_lines(...)`.

## Staging, committing and pushing

```python
from magi.git.stage import stage_files, unstage_files
from magi.git.commit import run_commit_with_editor, run_amend_commit_with_editor
from magi.git.push import get_current_branch, get_remotes, get_upstream_branch, push
from magi.git.repository import Repository

stage_files(".", ["README.md"])
result = run_commit_with_editor(".")   # runs `git commit`, opening the configured editor
print(result.success, result.message)

print(get_remotes(Repository(".")))
branch = get_current_branch(".")       # None when HEAD is detached
print(get_upstream_branch("."))        # None when no upstream is set
print(push(".", ["--set-upstream", "origin", f"HEAD:{branch}"]))
```

`push` returns `PushSuccess()` or `PushFailure(message)` holding git's error
output. Staging and unstaging with an empty list does nothing.

## Configuration and themes

`Config.default_path()` is `magi/config.toml` inside the user's configuration
directory:

```toml
theme = "catppuccin-mocha"

[colors]
section_header = "#ff0000"
diff_addition = "rgb(100, 150, 200)"
commit_hash = "196"
```

Built-in themes are `default`, `catppuccin-frappe` and `catppuccin-mocha`
(case-insensitive, `_` accepted for `-`); an unknown name falls back to
`default`. Colours may be given by name, as `#rrggbb` or `#rgb`, as
`rgb(r, g, b)`, or as a 256-colour index; colours that do not parse are
ignored.

```python
from magi.config.settings import Config, parse_color

config = Config.load()                 # defaults if the file is missing or invalid
theme = config.resolve_theme()
print(parse_color("#f00"))             # Rgb(r=255, g=0, b=0)

config = Config.from_toml('theme = "catppuccin-frappe"')
```

`Config.load_from_path(path)` and `Config.from_toml(text)` raise
`ConfigError` on read or parse failures.

## Keys

`magi.keys.handle_key(key, model)` maps a `KeyEvent` (a `KeyCode` or a
one-character string, with `KeyModifiers`) to a `magi.msg.Message` or a
`PushInputChar`, taking the open popup and visual mode in `magi.model.Model`
into account, and returns `None` when the key does nothing.

## What this package does not do

There is no terminal screen, no rendering and no command to start: nothing
draws the lines, and nothing applies the `Message` values returned by
`handle_key` to a `Model`. The package provides the repository reading, the
state types, the Git operations, configuration and key mapping on which such
a program is built.

## Tests

The test suite uses pytest and needs `git` installed:

```
pip install -e .[test]
pytest
```