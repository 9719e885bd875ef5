# ninjacore

Building blocks for a small build system, written in plain Python with no
third-party dependencies.

## What is inside

- `ninjacore.util`
  - `canonicalize_path(path, windows=None)` turns a path such as
    `"./x/foo/../bar.h"` into `"x/bar.h"` and returns `(path, slash_bits)`.
    With `windows=True` backslashes count as separators and are turned into
    `/`; `slash_bits` records, from the lowest bit up, which separators were
    backslashes. By default the running platform decides. An empty path
    raises `ValueError`; more than 60 components raises `FatalError`.
  - `shell_escape(text)` and `win32_escape(text)` quote text for a POSIX
    shell or for `CommandLineToArgvW()`, leaving text that needs no quoting
    unchanged.
  - `strip_ansi_escape_codes(text)`, `elide_middle(text, width)`,
    `is_latin_alpha(c)` and `spellcheck_string(text, words)`, which returns
    the closest word within an edit distance of 3, or `None`.
  - `read_file(path)` (returns bytes), `truncate(path, size)`,
    `set_close_on_exec(fd)`, `processor_count()` and `load_average()`
    (negative when unavailable).
  - `warning(message)` and `error(message)` write `ninja: warning: ...` /
    `ninja: error: ...` to stderr; `fatal(message)` writes
    `ninja: fatal: ...` and raises `FatalError`.
- `ninjacore.strings`: `split_string` and `join_strings` on a single
  separator character (empty fields are kept), `to_lower_ascii` and
  `equals_case_insensitive_ascii`.
- `ninjacore.version`: `NINJA_VERSION`, `parse_version(version)` returning
  `(major, minor)`, and `check_ninja_version(required_version)`, which warns
  when this version's major number is greater than the required one and
  raises `FatalError` when the required version is newer.
- `ninjacore.hashing`: `murmur_hash2(data)`, a 32-bit MurmurHash2 of bytes
  (a `str` is hashed as UTF-8).
- `ninjacore.metrics`: `Metrics` with `new_metric(name)`, `record(name)`
  (a `ScopedMetric` context manager that adds the time of its body to the
  named `Metric`) and `report(stream=None)`; also `Stopwatch` with
  `restart()` / `elapsed()` in seconds, and `get_time_millis()`.
- `ninjacore.msvc_helper`: `CLWrapper` runs a compiler command, feeding it
  no stdin, passing its stderr through and returning a `CLResult`
  (`exit_code`, `output` as bytes). `set_env_block()` takes a NUL-separated
  `NAME=value` block, a mapping, or `None`. `escape_for_depfile(path)`
  escapes spaces; `push_path_into_environment(env_block)` copies the block's
  `PATH` entry (name matched case-insensitively) into `os.environ`.

## Examples

```python
from ninjacore.util import canonicalize_path, elide_middle, spellcheck_string
from ninjacore.util import strip_ansi_escape_codes
from ninjacore.strings import split_string, join_strings

canonicalize_path("./x/foo/../bar.h", windows=False)  # ("x/bar.h", 0)
canonicalize_path("a\\foo.h", windows=True)           # ("a/foo.h", 1)
elide_middle("01234567890123456789", 10)              # "012...789"
strip_ansi_escape_codes("\x1b[1mwarning:\x1b[0m")      # "warning:"
spellcheck_string("explian", ["stats", "explain"])     # "explain"

parts = split_string(":a:b:c:", ":")                  # ["", "a", "b", "c", ""]
join_strings(parts, ":")                              # ":a:b:c:"
```

Timing a code path:

```python
import sys
from ninjacore.metrics import Metrics

metrics = Metrics()
with metrics.record("manifest parse"):
    ...
metrics.report(sys.stdout)
```

Running a compiler and escaping its header paths:

```python
from ninjacore.msvc_helper import CLWrapper, escape_for_depfile

cl = CLWrapper()
cl.set_env_block("INCLUDE=C:\\sdk\\include\0")
result = cl.run("cl.exe /showIncludes /c foo.cc")
print(result.exit_code, result.output)
escape_for_depfile("sub\\some sdk\\foo.h")  # "sub\\some\\ sdk\\foo.h"
```

Checking a required version:

```python
from ninjacore.version import check_ninja_version, parse_version

parse_version("1.9.0")      # (1, 9)
check_ninja_version("1.7")  # compatible: no output
```

## What it does not do

This is a library of helpers, not a build tool. It has no command-line
program, does not read build manifests, keeps no build or dependency logs,
and does not schedule or run build commands in parallel. `CLWrapper.run` is
its only way of starting another program, and it waits for that program to
finish.