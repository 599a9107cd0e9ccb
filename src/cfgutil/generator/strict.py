"""Strict generator — allowlists each identifier for its exact path and title."""

import logging

from cfgutil.config import GenerateOptions
from cfgutil.generator.quoting import clean, disallow_all, header
from cfgutil.parser.base import ApiSpec

logger = logging.getLogger("cfgutil.generator.strict")


class StrictGenerator:
    """Emits one block per (path, parameter) occurrence of an API.

    Occurrences are not deduplicated: a parameter declared by two methods of
    the same path yields two identical blocks. The minimal option is ignored.
    """

    def __init__(self, options: GenerateOptions):
        self.options = options

    def generate_all(self, apis: list[ApiSpec]) -> str:
        return "".join(self.generate(api) for api in apis)

    def generate(self, api: ApiSpec) -> str:
        title = clean(api.title, self.options)
        disallow = disallow_all(self.options)

        parts = [header(title)]
        count = 0
        for raw_path in sorted(api.paths):
            path = clean(raw_path, self.options)
            methods = api.paths[raw_path]
            for method in sorted(methods):
                for param in methods[method]:
                    if not param.required and not self.options.everything:
                        continue
                    name = clean(param.name, self.options)
                    parts.append(f"{name}=\n{disallow}\tpermit path={path} title={title}\n\n")
                    count += 1

        logger.debug("API %r: %d identifier blocks (strict)", api.title, count)
        return "".join(parts)
