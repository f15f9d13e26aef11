from pathlib import Path
from typing import Optional, Union

SEP = "-"
FALLBACK_PREFIX = "rendered"


def _is_kept(ch: str) -> bool:
    return (ch.isascii() and ch.isalnum()) or ch in "-_."


def _collapse_separators(s: str) -> str:
    out = []
    prev_sep = False
    for ch in s:
        if ch == SEP:
            if not prev_sep:
                out.append(SEP)
            prev_sep = True
        else:
            out.append(ch)
            prev_sep = False
    return "".join(out)


def sanitize(s: str) -> str:
    """Keep ASCII alphanumerics, '-', '_' and '.'; collapse anything else into '-'.

    The result never starts or ends with '-' and never contains '--'.
    It may be empty.
    """
    out = []
    last_was_sep = False
    for ch in s:
        if _is_kept(ch):
            out.append(ch)
            last_was_sep = False
        elif not last_was_sep:
            out.append(SEP)
            last_was_sep = True

    # kept '-' characters can still sit next to an inserted separator
    return _collapse_separators("".join(out).strip(SEP))


def resolve_prefix(user_prefix: Optional[str], input_path: Union[str, Path]) -> str:
    """Return the output filename prefix, always ending in exactly one '-'.

    ``user_prefix`` (``--prefix``) wins when given; otherwise the stem of
    ``input_path`` is used. Empty results fall back to ``rendered``.
    """
    if user_prefix is not None:
        base = sanitize(user_prefix)
    else:
        path = Path(input_path)
        # ".." names a parent directory, not a file
        stem = "" if path.name == ".." else path.stem
        base = sanitize(stem or FALLBACK_PREFIX)

    if not base:
        base = FALLBACK_PREFIX
    if not base.endswith(SEP):
        base += SEP
    return base
