"""CLI entry point for Lancet."""

import sys
import logging

import click
from click.core import ParameterSource
from rich.console import Console
from rich.table import Table

from lancet import Lancet, LancetConfig, __version__
from lancet.exceptions import LancetError
from lancet.models import PolicyKind
from lancet.output import FORMATTERS
from lancet.tokenization import BACKENDS

console = Console(stderr=True)

# Options that map onto LancetConfig fields
CONFIG_OPTIONS = (
    "policy",
    "max_tokens",
    "context_sentences",
    "tokenizer_backend",
    "tokenizer_model",
    "verbose",
)


def setup_logging(verbose: bool) -> None:
    """Set up logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


@click.command()
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "-p",
    "--policy",
    default=PolicyKind.TOKEN.value,
    type=click.Choice([kind.value for kind in PolicyKind]),
    help="Splitting strategy",
)
@click.option(
    "--max-tokens",
    default=512,
    type=int,
    help="Maximum tokens per chunk (token policies)",
)
@click.option(
    "--context-sentences",
    default=1,
    type=int,
    help="Preceding sentences carried into each chunk (token policy)",
)
@click.option(
    "--tokenizer",
    "tokenizer_backend",
    default="tiktoken",
    type=click.Choice(list(BACKENDS)),
    help="Tokenizer backend",
)
@click.option(
    "--tokenizer-model",
    default="gpt-4",
    help="tiktoken model name, or Hugging Face repository id / tokenizer.json path",
)
@click.option(
    "-c",
    "--config",
    type=click.Path(exists=True),
    help="Path to configuration YAML file",
)
@click.option(
    "-f",
    "--format",
    "output_format",
    default="text",
    type=click.Choice(list(FORMATTERS)),
    help="Output format",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False),
    help="Write chunks to this file instead of stdout",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output",
)
@click.version_option(version=__version__)
@click.pass_context
def cli(
    ctx: click.Context,
    input_file: str,
    policy: str,
    max_tokens: int,
    context_sentences: int,
    tokenizer_backend: str,
    tokenizer_model: str,
    config: str,
    output_format: str,
    output: str,
    verbose: bool,
) -> None:
    """Lancet: split a document into ordered text chunks.

    INPUT_FILE: Path to a plain text document

    With -c, options given on the command line override the file.
    """
    setup_logging(verbose)

    # Load config from file or create from options
    try:
        if config:
            lancet_config = LancetConfig.from_yaml(config)
            # Options typed on the command line override the file
            overrides = {
                key: ctx.params[key]
                for key in CONFIG_OPTIONS
                if ctx.get_parameter_source(key) == ParameterSource.COMMANDLINE
            }
            if overrides:
                lancet_config = LancetConfig.from_dict(
                    {**lancet_config.to_dict(), **overrides}
                )
        else:
            lancet_config = LancetConfig(
                policy=policy,
                max_tokens=max_tokens,
                context_sentences=context_sentences,
                tokenizer_backend=tokenizer_backend,
                tokenizer_model=tokenizer_model,
                verbose=verbose,
            )
        lancet = Lancet(config=lancet_config)
    except LancetError as e:
        console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)

    try:
        result = lancet.chunk(input_file)
    except LancetError as e:
        console.print(f"[red]Processing error:[/red] {e}")
        sys.exit(1)

    formatter = FORMATTERS[output_format]()
    if output:
        path = formatter.format(result.chunks, output)
        console.print(f"[green]✓[/green] Wrote {result.chunk_count} chunks to {path}")
    else:
        click.echo(formatter.format_to_string(result.chunks))

    # Show metrics if verbose
    if verbose and result.metrics:
        metrics_table = Table(title="Metrics", show_header=True)
        metrics_table.add_column("Metric", style="cyan")
        metrics_table.add_column("Value", style="green")

        for key, value in result.metrics.items():
            if isinstance(value, float):
                metrics_table.add_row(key, f"{value:.3f}")
            else:
                metrics_table.add_row(key, str(value))

        console.print(metrics_table)

    # Show warnings
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


def main() -> None:
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
