"""The two conversion pipelines: OpenAPI to cfg and cfg to JSON."""

import json
import logging
from pathlib import Path

from cfgutil.config import GenerateOptions, Quoting
from cfgutil.exceptions import InputError, PolicyParseError
from cfgutil.generator import select_generator
from cfgutil.parser.openapi import parse_openapi
from cfgutil.policy import emit, load

logger = logging.getLogger("cfgutil.convert")


def apis_to_cfg(paths: list[Path], options: GenerateOptions) -> str:
    """Generate cfg text for every OpenAPI file, in input order.

    Every file is parsed before any text is generated; the first failure
    aborts the whole conversion.
    """
    apis = [parse_openapi(path) for path in paths]
    generator = select_generator(options)
    logger.debug("Generating with %s for %d APIs", type(generator).__name__, len(apis))
    return generator.generate_all(apis)


def cfg_to_json(path: Path, quoting: Quoting = Quoting.DOUBLE) -> str:
    """Load a cfg file and return its canonical text encoded as one JSON string."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"could not open file {path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise PolicyParseError(f"could not parse cfg file {path}: not valid UTF-8 ({e.reason})") from e

    try:
        cfg = load(text, quoting)
    except PolicyParseError as e:
        raise PolicyParseError(f"could not parse cfg file {path}: {e.message}", e.line) from e
    logger.debug("Loaded %d records from %s", len(cfg.records), path)
    return json.dumps(emit(cfg, quoting)) + "\n"
