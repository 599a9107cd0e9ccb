"""Loose generator — binds each identifier to its API title only."""

import logging

from cfgutil.config import GenerateOptions
from cfgutil.generator.quoting import clean, disallow_all, header
from cfgutil.parser.base import ApiSpec

logger = logging.getLogger("cfgutil.generator.loose")


class LooseGenerator:
    """Emits one block per distinct parameter name of an API."""

    def __init__(self, options: GenerateOptions):
        self.options = options

    def generate_all(self, apis: list[ApiSpec]) -> str:
        return "".join(self.generate(api) for api in apis)

    def generate(self, api: ApiSpec) -> str:
        """Generate cfg text for one API, identifiers in sorted order."""
        title = clean(api.title, self.options)
        names = self.collect_names(api)
        logger.debug("API %r: %d identifiers (loose)", api.title, len(names))

        parts = [header(title)]
        for name in sorted(names):
            parts.append(f"{name}=\n")
            if not self.options.minimal:
                parts.append(disallow_all(self.options))
                parts.append(f"\tpermit title={title}\n")
            parts.append("\n")
        return "".join(parts)

    def collect_names(self, api: ApiSpec) -> set[str]:
        """Cleaned names of every parameter that passes the required filter."""
        names = set()
        for methods in api.paths.values():
            for params in methods.values():
                for param in params:
                    if not param.required and not self.options.everything:
                        continue
                    names.add(clean(param.name, self.options))
        return names
