"""Generators turning ApiSpec models into cfg text."""

from cfgutil.config import GenerateOptions
from cfgutil.generator.loose import LooseGenerator
from cfgutil.generator.strict import StrictGenerator


def select_generator(options: GenerateOptions) -> LooseGenerator | StrictGenerator:
    """Pick the strict generator when options.strict is set, else the loose one."""
    if options.strict:
        return StrictGenerator(options)
    return LooseGenerator(options)


__all__ = ["LooseGenerator", "StrictGenerator", "select_generator"]
