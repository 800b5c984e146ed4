import re
from typing import List, TextIO

from decho.util.errors import InputError

# SGR color codes, e.g. "\x1b[31m" or "\x1b[1;32m"
# ref https://superuser.com/questions/380772/removing-ansi-color-codes-from-text-stream
ANSI_SGR_RE = re.compile(r"\x1b\[[0-9;]*m")


def strip_ansi(text: str) -> str:
    return ANSI_SGR_RE.sub("", text)


def _is_interactive(stream: TextIO) -> bool:
    try:
        return stream.isatty()
    except (OSError, ValueError) as e:
        # closed or otherwise unusable descriptor
        raise InputError(f"cannot inspect stdin: {e}") from e


def read_stdin(stream: TextIO) -> str:
    """Read piped input to EOF, one line at a time.

    Every line gets a trailing newline, including a final line that had none.
    Nothing is read from an interactive terminal.
    """
    if _is_interactive(stream):
        return ""

    parts: List[str] = []
    try:
        for line in stream:
            if line.endswith("\n"):
                line = line[:-1]
            if line.endswith("\r"):
                line = line[:-1]
            parts.append(line + "\n")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"cannot read stdin: {e}") from e
    return strip_ansi("".join(parts))


def text_from_args(args: List[str] | None) -> str:
    return " ".join(args or [])


def collect_text(stream: TextIO, args: List[str] | None) -> str:
    """Piped text first, then the positional words. Only the piped part is de-colored."""
    return read_stdin(stream) + text_from_args(args)
