"""CLI entry point for cfgutil."""

import logging
import sys
from pathlib import Path

import click

from cfgutil.config import GenerateOptions, Quoting
from cfgutil.convert import apis_to_cfg, cfg_to_json
from cfgutil.exceptions import CfgUtilError, InputError, UsageError

logger = logging.getLogger("cfgutil.cli")


def _configure_logging(verbose: bool) -> None:
    root = logging.getLogger("cfgutil")
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        root.addHandler(handler)


def _mk_inputs(api_file: Path | None, files: tuple[Path, ...]) -> list[Path]:
    """Exactly one of -api or a list of positional files."""
    if (api_file is None) == (not files):
        raise UsageError("one of -api or a list of argument specification files must be provided")
    return [api_file] if api_file is not None else list(files)


def _json_input(cfg_file: Path | None, files: tuple[Path, ...]) -> Path:
    """Exactly one of -cfg or a single positional file."""
    if (cfg_file is None) == (not files) or len(files) > 1:
        raise UsageError("one of -cfg or an argument file must be provided")
    return cfg_file if cfg_file is not None else files[0]


def _write(text: str, output: Path | None) -> None:
    if output is None:
        click.echo(text, nl=False)
        return
    try:
        with output.open("w", encoding="utf-8") as f:
            f.write(text)
    except OSError as e:
        raise InputError(f"could not open output file {output}: {e.strerror or e}") from e


@click.command()
@click.argument("files", nargs=-1, type=click.Path(path_type=Path))
@click.option("-mk", "--mk", "mk_mode", is_flag=True, help="Generate a new cfg file (default).")
@click.option("-json", "--json", "json_mode", is_flag=True, help="Convert a cfg file to JSON.")
@click.option("-cfg", "--cfg", "cfg_file", type=click.Path(path_type=Path), help="Input .cfg file (json).")
@click.option("-api", "--api", "api_file", type=click.Path(path_type=Path), help="Input OpenAPI specification file (mk).")
@click.option("-o", "--output", type=click.Path(path_type=Path), help="Output file, stdout if omitted.")
@click.option("-strict", "--strict", is_flag=True, help="Allowlist explicit path:title combinations (mk).")
@click.option("-all", "--all", "everything", is_flag=True, help="Include every parameter, not only required ones (mk).")
@click.option("-single", "--single", is_flag=True, help="Quote literals with ' instead of \".")
@click.option("-minimal", "--minimal", is_flag=True, help="Without -strict, omit exclusivity constraints (mk).")
@click.option("-cautious", "--cautious", is_flag=True, help="Quote every literal.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
def main(
    files: tuple[Path, ...],
    mk_mode: bool,
    json_mode: bool,
    cfg_file: Path | None,
    api_file: Path | None,
    output: Path | None,
    strict: bool,
    everything: bool,
    single: bool,
    minimal: bool,
    cautious: bool,
    verbose: bool,
):
    """Generate cfg files from OpenAPI specifications, or convert a cfg file to JSON."""
    _configure_logging(verbose)

    try:
        if json_mode and not mk_mode:
            path = _json_input(cfg_file, files)
            logger.debug("Converting %s to JSON", path)
            text = cfg_to_json(path, Quoting.from_flag(single))
        else:
            paths = _mk_inputs(api_file, files)
            options = GenerateOptions.from_flags(
                strict=strict,
                everything=everything,
                single=single,
                minimal=minimal,
                cautious=cautious,
            )
            logger.debug("Generating cfg from %d files with %s", len(paths), options)
            text = apis_to_cfg(paths, options)

        _write(text, output)
    except CfgUtilError as e:
        raise click.ClickException(str(e)) from e
