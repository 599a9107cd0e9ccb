"""Generation options shared by the cleaner and both generators."""

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Quoting(str, Enum):
    """Delimiter used for every string literal in cfg text."""

    DOUBLE = '"'
    SINGLE = "'"

    @property
    def char(self) -> str:
        return self.value

    @classmethod
    def from_flag(cls, single: bool) -> "Quoting":
        return cls.SINGLE if single else cls.DOUBLE


class GenerateOptions(BaseModel):
    """Immutable options for one run, built once from the command line."""

    model_config = ConfigDict(frozen=True)

    quoting: Quoting = Quoting.DOUBLE
    strict: bool = False
    everything: bool = False  # include non-required parameters
    minimal: bool = False  # loose mode only: no disallow/permit lines
    cautious: bool = False  # wrap every literal in quotes

    @classmethod
    def from_flags(
        cls,
        strict: bool = False,
        everything: bool = False,
        single: bool = False,
        minimal: bool = False,
        cautious: bool = False,
    ) -> "GenerateOptions":
        return cls(
            quoting=Quoting.from_flag(single),
            strict=strict,
            everything=everything,
            minimal=minimal,
            cautious=cautious,
        )
