"""Parser for the cfg text format."""

from cfgutil.config import Quoting
from cfgutil.exceptions import PolicyParseError
from cfgutil.policy.model import Cfg, Pair, Record, Tuple


def load(text: str, quoting: Quoting = Quoting.DOUBLE) -> Cfg:
    """Parse cfg text into a Cfg.

    Lines starting at column 0 open a record; indented lines add a tuple to
    the current record. Blank lines and comments are skipped.
    """
    records: list[list[Tuple]] = []
    for lineno, line in enumerate(text.splitlines(), start=1):
        pairs = _LineScanner(line, quoting.char, lineno).pairs()
        if not pairs:
            continue
        if line[:1].isspace():
            if not records:
                raise PolicyParseError("indented line outside of a record", lineno)
            records[-1].append(Tuple(pairs=pairs))
        else:
            records.append([Tuple(pairs=pairs)])
    return Cfg(records=[Record(tuples=tuples) for tuples in records])


class _LineScanner:
    """Splits one line into key/value pairs."""

    def __init__(self, line: str, quote: str, lineno: int):
        self.line = line
        self.quote = quote
        self.lineno = lineno
        self.pos = 0

    def pairs(self) -> list[Pair]:
        pairs = []
        while True:
            self._skip_space()
            if self._at_end() or self.line[self.pos] == "#":
                return pairs

            key = self._word(in_key=True)
            if not key:
                raise PolicyParseError("empty key", self.lineno)
            value = None
            if self._peek() == "=":
                self.pos += 1
                value = self._word(in_key=False)
            if not (self._at_end() or self.line[self.pos].isspace()):
                raise PolicyParseError(f"unexpected {self.line[self.pos]!r} after {key!r}", self.lineno)
            pairs.append(Pair(key=key, value=value))

    def _word(self, in_key: bool) -> str:
        if self._peek() == self.quote:
            return self._literal(in_key)

        buf = []
        while not self._at_end():
            ch = self.line[self.pos]
            if ch.isspace() or (in_key and ch == "="):
                break
            if ch == self.quote:
                if self._peek(1) != self.quote:
                    raise PolicyParseError(f"stray {self.quote} in bare word", self.lineno)
                self.pos += 1
            buf.append(ch)
            self.pos += 1
        return "".join(buf)

    def _literal(self, in_key: bool) -> str:
        q = self.quote
        self.pos += 1
        buf = []
        while True:
            if self._at_end():
                raise PolicyParseError(f"unterminated {q} literal", self.lineno)
            ch = self.line[self.pos]
            if ch == q:
                if self._peek(1) != q:
                    self.pos += 1
                    break
                self.pos += 1
            buf.append(ch)
            self.pos += 1

        nxt = self._peek()
        if nxt and not nxt.isspace() and not (in_key and nxt == "="):
            raise PolicyParseError(f"unexpected {nxt!r} after closing {q}", self.lineno)
        return "".join(buf)

    def _skip_space(self) -> None:
        while not self._at_end() and self.line[self.pos].isspace():
            self.pos += 1

    def _peek(self, offset: int = 0) -> str:
        i = self.pos + offset
        return self.line[i] if i < len(self.line) else ""

    def _at_end(self) -> bool:
        return self.pos >= len(self.line)
