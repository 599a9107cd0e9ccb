"""The cfg policy file format."""

from cfgutil.policy.emitter import emit
from cfgutil.policy.loader import load
from cfgutil.policy.model import Cfg, Pair, Record, Tuple

__all__ = ["Cfg", "Pair", "Record", "Tuple", "emit", "load"]
