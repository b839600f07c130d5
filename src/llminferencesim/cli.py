"""Command-line interface for llminferencesim."""

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml

from llminferencesim import __version__
from llminferencesim.config import ConfigurationError, SimulatorConfig
from llminferencesim.simulator import CompletionSimulator
from llminferencesim.text import tokenize as tokenize_text

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


@click.group()
@click.version_option(version=__version__, prog_name="llminferencesim")
@click.option(
    "--log-level", "-l",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    help="Logging level"
)
def cli(log_level: str):
    """llminferencesim: simulated completions for mock inference servers."""
    logging.basicConfig(
        level=getattr(logging, log_level),
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@cli.command()
@click.option("--config", "-c", "config_file", type=click.Path(exists=True), help="YAML or JSON config")
@click.option("--seed", "-s", type=int, default=None, help="Override the configured seed")
@click.option("--prompt-tokens", "-p", type=int, default=0, show_default=True)
@click.option("--max-completion-tokens", type=int, default=None)
@click.option("--max-tokens", type=int, default=None)
@click.option("--count", "-n", type=int, default=1, show_default=True, help="Number of completions")
def complete(
    config_file: Optional[str],
    seed: Optional[int],
    prompt_tokens: int,
    max_completion_tokens: Optional[int],
    max_tokens: Optional[int],
    count: int,
):
    """Print simulated completions for the given limits."""
    try:
        config = SimulatorConfig.from_file(config_file) if config_file else SimulatorConfig()
    except ConfigurationError as e:
        click.echo(click.style(f"Error: {e}", fg="red"), err=True)
        sys.exit(1)

    if seed is not None:
        config = config.model_copy(update={"seed": seed})

    simulator = CompletionSimulator(config)

    for _ in range(count):
        result = simulator.complete(prompt_tokens, max_completion_tokens, max_tokens)

        if result.error is not None:
            click.echo(click.style(f"✗ {result.error}", fg="red"), err=True)
            sys.exit(1)

        check = result.context_check
        if not check.is_valid:
            click.echo(
                click.style(
                    f"✗ This model's maximum context length is {config.max_model_len} tokens. "
                    f"However, you requested {check.total_tokens} tokens "
                    f"({prompt_tokens} in the messages, {check.completion_tokens} in the completion).",
                    fg="red",
                ),
                err=True,
            )
            sys.exit(1)

        click.echo(f"[{result.finish_reason.value}] {result.text}")


@cli.command()
@click.argument("text")
def tokenize(text: str):
    """Show how TEXT is split into simulated tokens."""
    tokens = tokenize_text(text)
    for token in tokens:
        click.echo(repr(token))
    click.echo(f"Total tokens: {len(tokens)}")


@cli.command()
@click.option(
    "--output", "-o", default="simulator_config.yaml",
    help="Output file path"
)
@click.option(
    "--format", "-f", type=click.Choice(["yaml", "json"]), default="yaml",
    help="Configuration file format"
)
def generate_config(output: str, format: str):
    """Generate an example configuration file."""
    example_config = SimulatorConfig(
        responses=None,
        latency={
            "time_to_first_token_ms": 150.0,
            "time_to_first_token_std_ms": 20.0,
            "inter_token_latency_ms": 10.0,
            "inter_token_latency_std_ms": 2.0,
        },
    ).model_dump(exclude_none=True)

    output_path = Path(output)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, "w") as f:
        if format == "yaml":
            yaml.dump(example_config, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(example_config, f, indent=2)

    click.echo(f"Generated example configuration at {output_path}")


if __name__ == "__main__":
    cli()
