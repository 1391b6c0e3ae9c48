"""DiffCheck CLI entry point."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click

from diffcheck import __version__
from diffcheck.config import load_settings
from diffcheck.engine.extractor import extract_functions
from diffcheck.engine.pipeline import run_comparison
from diffcheck.git import get_file_at_ref, split_ref_range
from diffcheck.render import render_functions, render_report
from diffcheck.schema import ComparisonOutput

logger = logging.getLogger(__name__)

# Exit codes
EXIT_SUCCESS = 0  # No missing, new or changed functions
EXIT_DIFFERENCES = 1  # At least one function differs
EXIT_ERROR = 2  # Something went wrong


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )


def _read_source(path: str) -> str:
    """Read a source file as text, replacing undecodable bytes."""
    return Path(path).read_text(encoding="utf-8", errors="replace")


def _load_sources(
    original: str,
    new: str | None,
    ref_range: str | None,
    repo: str,
) -> tuple[str, str, str, str]:
    """Resolve the two buffers and their labels from files or git refs."""
    if ref_range is not None:
        if new is not None:
            raise click.UsageError("--refs takes a single PATH, not two files.")
        old_ref, new_ref = split_ref_range(ref_range)
        return (
            get_file_at_ref(old_ref, original, repo_path=repo),
            get_file_at_ref(new_ref, original, repo_path=repo),
            f"{original}@{old_ref}",
            f"{original}@{new_ref}",
        )
    if new is None:
        raise click.UsageError("NEW is required unless --refs is given.")
    return _read_source(original), _read_source(new), Path(original).name, Path(new).name


def _format_output(output: ComparisonOutput, fmt: str) -> str:
    """Format pipeline output according to --format flag."""
    if fmt == "json":
        return output.model_dump_json(indent=2)
    if fmt == "summary":
        return output.summary_text
    return render_report(output)


@click.group()
@click.version_option(__version__, "--version", "-v")
def main() -> None:
    """DiffCheck — Function-level code comparison that ignores formatting-only differences."""


@main.command()
@click.argument("original")
@click.argument("new", required=False, default=None)
@click.option(
    "--refs",
    "ref_range",
    default=None,
    help="Compare ORIGINAL at two git refs, e.g. HEAD~1..HEAD.",
)
@click.option("--repo", default=".", help="Repository path for --refs (default: current directory).")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json", "summary"]),
    default=None,
    help="Output format (default: text, or the settings file value).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the comparison to a file instead of stdout.",
)
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing --output file.")
@click.option(
    "--show-unchanged",
    is_flag=True,
    default=False,
    help="Also show line diffs for functions whose bodies are unchanged.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Settings file (default: $DIFFCHECK_CONFIG).",
)
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def compare(
    original: str,
    new: str | None,
    ref_range: str | None,
    repo: str,
    fmt: str | None,
    output_path: str | None,
    force: bool,
    show_unchanged: bool,
    config_path: str | None,
    verbose: bool,
) -> None:
    """Compare the functions of two source files.

    ORIGINAL and NEW are C/C++-style source files. With --refs, ORIGINAL is a
    path inside the repository and NEW is omitted.

    \b
    Exit codes:
      0 — No differences
      1 — Missing, new or changed functions found
      2 — Error
    """
    _configure_logging(verbose)
    try:
        settings = load_settings(config_path)
        fmt = fmt or settings.format
        show_unchanged = show_unchanged or settings.show_unchanged
        overwrite = force or settings.overwrite

        original_text, new_text, original_label, new_label = _load_sources(
            original, new, ref_range, repo
        )

        output = run_comparison(
            original_text,
            new_text,
            original_label=original_label,
            new_label=new_label,
            include_unchanged=show_unchanged,
        )
        text = _format_output(output, fmt)

        if output_path is not None:
            target = Path(output_path)
            if target.exists() and not overwrite:
                click.echo(f"Output file already exists: {target}", err=True)
                click.echo("Use --force to overwrite.", err=True)
                sys.exit(EXIT_ERROR)
            target.write_text(text + "\n", encoding="utf-8")
            click.echo(f"Saved comparison: {target}", err=True)
        else:
            click.echo(text)

        sys.exit(EXIT_DIFFERENCES if output.summary.has_differences else EXIT_SUCCESS)

    except SystemExit:
        raise
    except click.UsageError:
        raise
    except Exception as exc:
        logger.debug("CLI error", exc_info=True)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)


@main.command()
@click.argument("path")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)
@click.option("--verbose", is_flag=True, default=False, help="Log debug output to stderr.")
def functions(path: str, fmt: str, verbose: bool) -> None:
    """List the functions found in a source file."""
    _configure_logging(verbose)
    try:
        table = extract_functions(_read_source(path))
        logger.debug("Extracted %d functions from %s", len(table), path)

        if fmt == "json":
            click.echo(
                json.dumps(
                    [
                        {
                            "name": name,
                            "signature": block.signature,
                            "lines": len(block.body_lines),
                            "normalized_body": block.normalized_body,
                        }
                        for name, block in table.items()
                    ],
                    indent=2,
                )
            )
        elif table:
            click.echo(render_functions(table))
        else:
            click.echo("No functions found.", err=True)
        sys.exit(EXIT_SUCCESS)

    except SystemExit:
        raise
    except Exception as exc:
        logger.debug("CLI error", exc_info=True)
        click.echo(f"Error: {exc}", err=True)
        sys.exit(EXIT_ERROR)
