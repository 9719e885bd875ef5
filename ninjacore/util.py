"""Path canonicalization, shell escaping, logging and small system helpers."""

from __future__ import annotations

import os
import re
import string
import sys

__all__ = [
    "FatalError",
    "fatal",
    "warning",
    "error",
    "canonicalize_path",
    "shell_escape",
    "win32_escape",
    "read_file",
    "set_close_on_exec",
    "is_latin_alpha",
    "strip_ansi_escape_codes",
    "processor_count",
    "load_average",
    "elide_middle",
    "truncate",
    "spellcheck_string",
]

_MAX_PATH_COMPONENTS = 60
_SLASH_BITS_MASK = (1 << 64) - 1

_SHELL_SAFE = frozenset(string.ascii_letters + string.digits + "_+-./")
_WIN32_UNSAFE = frozenset(' "')

_ANSI_ESCAPE = re.compile(r"\x1b(?:\[[^A-Za-z]*[A-Za-z]?)?")


class FatalError(Exception):
    """An unrecoverable error; the caller is expected to stop."""


def _log(prefix: str, message: str) -> None:
    sys.stderr.write(f"ninja: {prefix}: {message}\n")


def fatal(message: str) -> None:
    """Log a fatal message to stderr and raise FatalError."""
    _log("fatal", message)
    sys.stderr.flush()
    raise FatalError(message)


def warning(message: str) -> None:
    """Log a warning message to stderr."""
    _log("warning", message)


def error(message: str) -> None:
    """Log an error message to stderr."""
    _log("error", message)


def canonicalize_path(path: str, windows: bool | None = None) -> tuple[str, int]:
    """Canonicalize a path like "foo/../bar.h" into "bar.h".

    Returns the canonical path and its slash bits: bits set, starting from
    the lowest, for each separator that was a backslash (Windows only).
    Raises ValueError for an empty path.
    """
    if windows is None:
        windows = os.name == "nt"
    if not path:
        raise ValueError("empty path")

    separators = "/\\" if windows else "/"
    end = len(path)

    def terminator(index: int) -> str:
        return path[index] if index < end else "\0"

    pos = 0
    root = ""
    if path[0] in separators:
        if windows and end > 1 and path[1] in separators:
            root, pos = path[:2], 2
        else:
            root, pos = path[0], 1

    leading_updirs: list[str] = []
    components: list[str] = []

    while pos < end:
        ch = path[pos]
        if ch == ".":
            if pos + 1 == end or path[pos + 1] in separators:
                pos += 2
                continue
            if path[pos + 1] == "." and (pos + 2 == end or path[pos + 2] in separators):
                if components:
                    components.pop()
                else:
                    leading_updirs.append(".." + terminator(pos + 2))
                pos += 3
                continue
        if ch in separators:
            pos += 1
            continue

        if len(components) == _MAX_PATH_COMPONENTS:
            fatal(f"path has too many components : {path}")
        stop = pos
        while stop < end and path[stop] not in separators:
            stop += 1
        components.append(path[pos:stop] + terminator(stop))
        pos = stop + 1

    full = root + "".join(leading_updirs) + "".join(components)
    result = full[:-1] if full else "."

    if not windows:
        return result, 0

    bits = 0
    mask = 1
    for ch in result:
        if ch == "\\":
            bits |= mask
        if ch in "/\\":
            mask <<= 1
    return result.replace("\\", "/"), bits & _SLASH_BITS_MASK


def shell_escape(text: str) -> str:
    """Quote text for a POSIX shell, leaving it alone if it is already safe."""
    if all(ch in _SHELL_SAFE for ch in text):
        return text
    return "'" + text.replace("'", "'\\''") + "'"


def win32_escape(text: str) -> str:
    """Quote text the way CommandLineToArgvW() expects, if it needs quoting."""
    if not any(ch in _WIN32_UNSAFE for ch in text):
        return text
    pieces = ['"']
    backslashes = 0
    for ch in text:
        if ch == "\\":
            backslashes += 1
        elif ch == '"':
            pieces.append("\\" * (backslashes + 1))
            backslashes = 0
        else:
            backslashes = 0
        pieces.append(ch)
    pieces.append("\\" * backslashes)
    pieces.append('"')
    return "".join(pieces)


def read_file(path: str | os.PathLike) -> bytes:
    """Read a whole file; raises OSError on failure."""
    with open(path, "rb") as handle:
        return handle.read()


def set_close_on_exec(fd: int) -> None:
    """Mark a file descriptor as not inherited by child processes."""
    try:
        os.set_inheritable(fd, False)
    except OSError as exc:
        sys.stderr.write(f"set_inheritable: {exc}\n")


def is_latin_alpha(c: str) -> bool:
    """True for ASCII letters only, independent of locale."""
    return len(c) == 1 and ("a" <= c <= "z" or "A" <= c <= "Z")


def strip_ansi_escape_codes(text: str) -> str:
    """Remove ANSI CSI escape sequences (and stray escape characters)."""
    return _ANSI_ESCAPE.sub("", text)


def processor_count() -> int:
    """Number of processors available to this process, or 0 if unknown."""
    affinity = getattr(os, "sched_getaffinity", None)
    if affinity is not None:
        try:
            return len(affinity(0))
        except OSError:
            pass
    return os.cpu_count() or 0


def load_average() -> float:
    """One-minute load average of the machine; negative on error."""
    try:
        return os.getloadavg()[0]
    except (OSError, AttributeError):
        return -0.0


def elide_middle(text: str, width: int) -> str:
    """Replace the middle of text with "..." if it is longer than width."""
    if len(text) <= width:
        return text
    keep = max(0, (width - 3) // 2)
    return text[:keep] + "..." + text[len(text) - keep:]


def truncate(path: str | os.PathLike, size: int) -> None:
    """Truncate a file to the given size; raises OSError on failure."""
    os.truncate(path, size)


def _edit_distance(a: str, b: str) -> int:
    previous = list(range(len(b) + 1))
    for row, ca in enumerate(a, start=1):
        current = [row]
        for col, cb in enumerate(b, start=1):
            current.append(
                min(
                    previous[col] + 1,
                    current[col - 1] + 1,
                    previous[col - 1] + (ca != cb),
                )
            )
        previous = current
    return previous[-1]


def spellcheck_string(text: str, words) -> str | None:
    """Return the word closest to text, or None if none is close enough."""
    max_valid_distance = 3
    best_distance = max_valid_distance + 1
    best: str | None = None
    for word in words:
        distance = _edit_distance(word, text)
        if distance < best_distance:
            best_distance = distance
            best = word
    return best