"""Literal quoting for generated cfg text."""

from cfgutil.config import GenerateOptions

WILDCARD = ".*"


def clean(raw: str, options: GenerateOptions, force: bool = False) -> str:
    """Escape the active delimiter in raw and wrap it in quotes when needed.

    Delimiters inside raw are doubled. The result is wrapped when cautious
    mode or force is set, or when raw contains any whitespace.
    """
    q = options.quoting.char
    out = raw.replace(q, q + q)
    if options.cautious or force or any(ch.isspace() for ch in out):
        return f"{q}{out}{q}"
    return out


def header(title: str) -> str:
    """Comment line introducing the identifiers of one API."""
    return f"# Identifiers for the API {title}:\n\n"


def disallow_all(options: GenerateOptions) -> str:
    """Clause matching every path and title."""
    wildcard = clean(WILDCARD, options, force=True)
    return f"\tdisallow path={wildcard} title={wildcard}\n"
