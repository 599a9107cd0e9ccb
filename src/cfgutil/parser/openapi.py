"""OpenAPI / Swagger document reader.

Reads OpenAPI 3.x and Swagger 2.0 documents (JSON or YAML) into an ApiSpec.
Only titles, paths, methods and parameters are read.
"""

import logging
from pathlib import Path

import yaml

from cfgutil.exceptions import InputError, SpecParseError
from .base import ApiSpec, Param

logger = logging.getLogger("cfgutil.parser.openapi")

HTTP_METHODS = ("get", "put", "post", "delete", "options", "head", "patch", "trace")

REF_PREFIXES = ("#/components/parameters/", "#/parameters/")


def parse_openapi(file_path: Path) -> ApiSpec:
    """Parse an OpenAPI/Swagger file into an ApiSpec."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise InputError(f"could not open API file {file_path}: {e.strerror or e}") from e
    except UnicodeDecodeError as e:
        raise SpecParseError(f"could not parse API {file_path}: not valid UTF-8 ({e.reason})") from e

    try:
        doc = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise SpecParseError(f"could not parse API {file_path}: {e}") from e

    api = parse_document(doc, source=str(file_path))
    logger.debug("Read %s: %r with %d paths", file_path, api.title, len(api.paths))
    return api


def parse_document(doc: object, source: str = "<document>") -> ApiSpec:
    """Build an ApiSpec from an already-loaded OpenAPI document."""
    if not isinstance(doc, dict):
        raise SpecParseError(f"could not parse API {source}: document is not a mapping")

    info = doc.get("info") or {}
    title = _text(info.get("title")) if isinstance(info, dict) else ""

    paths = doc.get("paths") or {}
    if not isinstance(paths, dict):
        raise SpecParseError(f"could not parse API {source}: 'paths' is not a mapping")

    result: dict[str, dict[str, list[Param]]] = {}
    for path, item in paths.items():
        if not isinstance(item, dict):
            continue
        shared = _parse_parameters(doc, item.get("parameters") or [], source)

        methods: dict[str, list[Param]] = {}
        for method, operation in item.items():
            method = str(method).lower()
            if method not in HTTP_METHODS or not isinstance(operation, dict):
                continue
            own = _parse_parameters(doc, operation.get("parameters") or [], source)
            methods[method] = _merge_parameters(shared, own)
        result[str(path)] = methods

    return ApiSpec(title=title, paths=result)


def _merge_parameters(shared: list[Param], own: list[Param]) -> list[Param]:
    """Apply path-level parameters to an operation; the operation wins on (name, in)."""
    overridden = {(p.name, p.location) for p in own}
    return [p for p in shared if (p.name, p.location) not in overridden] + own


def _parse_parameters(doc: dict, params: list, source: str) -> list[Param]:
    if not isinstance(params, list):
        raise SpecParseError(f"could not parse API {source}: 'parameters' is not a list")

    result = []
    for p in params:
        if isinstance(p, dict) and "$ref" in p:
            p = _resolve_ref(doc, p["$ref"], source)
        if not isinstance(p, dict) or "name" not in p:
            raise SpecParseError(f"could not parse API {source}: parameter without a name")

        location = str(p.get("in", "query"))
        result.append(
            Param(
                name=_text(p["name"]),
                location=location,
                # Path parameters are always required.
                required=_flag(p.get("required")) or location == "path",
            )
        )
    return result


def _resolve_ref(doc: dict, ref: str, source: str) -> dict:
    for prefix in REF_PREFIXES:
        if not ref.startswith(prefix):
            continue
        node: object = doc
        for part in prefix.strip("#/").split("/"):
            node = node.get(part, {}) if isinstance(node, dict) else {}
        name = ref[len(prefix):].replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict) and isinstance(node.get(name), dict):
            return node[name]
        break
    raise SpecParseError(f"could not parse API {source}: unresolvable parameter reference {ref!r}")


def _text(value: object) -> str:
    """String form of a scalar; a YAML null reads as the empty string."""
    return "" if value is None else str(value)


def _flag(value: object) -> bool:
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)
