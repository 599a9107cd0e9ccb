"""Data model of a cfg document.

A document is a list of records. Each record is a list of tuples (one per
line) and each tuple a list of key/value pairs.
"""

from pydantic import BaseModel


class Pair(BaseModel):
    """One attribute. value is None for a bare key and "" for `key=`."""

    key: str
    value: str | None = None


class Tuple(BaseModel):
    """One line of a record."""

    pairs: list[Pair] = []

    def get(self, key: str) -> str | None:
        for pair in self.pairs:
            if pair.key == key:
                return pair.value
        return None


class Record(BaseModel):
    """A record: its first tuple is unindented, the rest are indented lines."""

    tuples: list[Tuple] = []

    @property
    def name(self) -> str:
        """Key of the record's first pair."""
        return self.tuples[0].pairs[0].key

    def get(self, key: str) -> str | None:
        """Value of the first pair named key across all tuples."""
        for t in self.tuples:
            for pair in t.pairs:
                if pair.key == key:
                    return pair.value
        return None


class Cfg(BaseModel):
    records: list[Record] = []

    def find(self, name: str) -> list[Record]:
        """Records whose first key is name."""
        return [r for r in self.records if r.name == name]
