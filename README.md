# lefthook

Building blocks for a Git hooks manager, for use from Python code:

- `lefthook.version`: the package version and checks of a required minimum version.
- `lefthook.system`: running external commands with `LEFTHOOK=0` set, command-line length limits and an always-empty reader.
- `lefthook.templates`: the contents of the checksum file kept alongside installed hooks.
- `lefthook.settings`: which parts of a hook run's output to show, from tags and configuration values.
- `lefthook.log`: levelled, coloured console logging with boxes, a spinner and message builders.
- `lefthook.updater`: self-update of an installed executable from the latest release, checked against published SHA-256 sums.

## Checking a required version

```python
from lefthook import version

print(version.version(False))          # "1.11.13"
print(version.version(True))           # version followed by the build commit, if any

version.check("1.2", "1.10.0")         # passes: 1.10.0 covers 1.2
try:
    version.check("2", "1.10.0")
except version.UncoveredVersionError:
    print("too old")

version.check_covered("1.0.0")         # passes with the current version
version.check_covered("")              # an empty requirement always passes
```

Versions are written as `"1"`, `"1.2"` or `"1.2.3"`; missing parts count as zero.
`check` raises `InvalidVersionError` for any other form. `check_covered` raises
`InvalidMinVersionError` for a malformed requirement and `UncoveredVersionError`,
naming both versions and the running executable, when the current version is lower.
All three are subclasses of `ValueError`.

## Running commands

```python
import sys
from lefthook.system import OsCommand, NullReader, max_cmd_len

cmd = OsCommand().without_envs("GIT_")
cmd.run(["git", "status"], ".", NullReader(), sys.stdout, sys.stderr)

print(max_cmd_len())   # 130000 on Linux, 260000 on macOS, 7000 on Windows
```

Every command runs with `LEFTHOOK=0` in its environment so that nested Git
operations do not trigger hooks again. `without_envs` drops environment entries
whose `NAME=value` text starts with any of the given prefixes. Output goes to the
given streams (real files directly, other streams after the command finishes);
`None` discards it. A non-zero exit status raises `subprocess.CalledProcessError`.
`NullReader` is a binary reader that is always at end of file; `CMD` and
`NULL_READER` are ready-made instances.

## Checksum file

```python
from lefthook.templates import checksum

checksum("abc123", 1700000000)   # b"abc123 1700000000\n"
```

## Choosing what to log

```python
from lefthook.settings import LogSettings

settings = LogSettings()               # everything enabled
settings.apply("", "", ["summary", "execution"], ["failure", "execution_out"])

settings.log_summary()                 # True
settings.log_success()                 # True
settings.log_failure()                 # False
settings.log_execution_info()          # True
settings.log_execution_output()        # False
```

The arguments are comma-separated enable and disable tags, followed by the
`enable` and `disable` configuration values. Tags take precedence over the
configuration lists; `enable=True` turns everything on, and `enable=False` or
`disable=True` leaves only failures. The recognised names are `meta`, `success`,
`failure`, `summary`, `skips`, `execution`, `execution_out`, `execution_info`
and `empty_summary`.

## Logging

```python
from lefthook import log

log.set_level(log.parse_level("debug"))   # "error", "info" or "debug"
log.set_colors("off")                     # "on", "off", "auto", a bool or a mapping of colours

log.log_meta("pre-commit")
log.success(1, "lint")
log.failure(1, "test", "exit status 1")
log.debugf("%s removed", ".git/hooks/pre-commit")
log.separate("summary")

log.builder(log.Level.INFO, "│ ").add("run: ", "echo one\necho two").log()
```

`set_colors` with a mapping turns colours on and takes `red`, `green`,
`yellow`, `cyan` and `gray` as `#rrggbb` strings or terminal colour numbers.
In auto mode colour is used only when output goes to a terminal and `NO_COLOR`
is not set. `set_output` redirects output to another text stream. `set_name` and
`unset_name` maintain the list of running jobs shown by the spinner, which runs
only when standard output is a terminal (`start_spinner`, `stop_spinner`).
`Logger` instances can also be created and used directly.

## Self-update

```python
from lefthook.updater import Updater, Options, UpdateError, NoAssetError, InvalidHashsumError

updater = Updater()   # or Updater(release_url=..., timeout=...)
try:
    updater.self_update(Options(yes=True, force=False, exe_path="/usr/local/bin/lefthook"))
except NoAssetError:
    print("no build for this platform")
except InvalidHashsumError:
    print("download did not match its checksum")
except UpdateError as exc:
    print(exc)
```

Nothing is downloaded when the latest release equals the current version,
unless `force` is set. Without `yes`, the user is asked to confirm on standard
input. The new executable is downloaded next to the current one with a progress
bar, its SHA-256 sum is compared with the published checksums, and the old
executable is restored if the replacement fails.

## What this package does not do

There is no command-line program. The package does not install or remove Git
hooks, render hook scripts, read or validate configuration files, or run the
commands that hooks are configured with; it provides the pieces listed above
for code that does.