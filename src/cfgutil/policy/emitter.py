"""Canonical text serialization of a Cfg."""

from cfgutil.config import Quoting
from cfgutil.exceptions import PolicyEmitError
from cfgutil.policy.model import Cfg, Pair


def emit(cfg: Cfg, quoting: Quoting = Quoting.DOUBLE) -> str:
    """Serialize cfg to text that load() reads back into an equal Cfg.

    Records are separated by a blank line; every tuple after the first is
    indented with a tab. Comments are not preserved.

    Raises PolicyEmitError for an empty key or a string containing a line
    break, neither of which the text format can hold.
    """
    q = quoting.char
    blocks = []
    for record in cfg.records:
        lines = []
        for t in record.tuples:
            if not t.pairs:
                continue
            indent = "\t" if lines else ""
            lines.append(indent + " ".join(_pair(p, q) for p in t.pairs) + "\n")
        if lines:
            blocks.append("".join(lines))
    return "\n".join(blocks)


def _pair(pair: Pair, q: str) -> str:
    key = _literal(pair.key, q, is_key=True)
    if pair.value is None:
        return key
    return f"{key}={_literal(pair.value, q, is_key=False)}"


def _literal(s: str, q: str, is_key: bool) -> str:
    if is_key and not s:
        raise PolicyEmitError("empty key")
    if len(f"x{s}x".splitlines()) > 1:
        raise PolicyEmitError(f"line break in {s!r}")
    escaped = s.replace(q, q + q)
    wrap = (
        any(ch.isspace() for ch in s)
        or s.startswith((q, "#"))
        or (is_key and "=" in s)
    )
    return f"{q}{escaped}{q}" if wrap else escaped
