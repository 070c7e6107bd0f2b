"""mood-journal command-line entry point."""

import click

from cli.commands import analyze, annotate, mood
from cli.config import get_paths, load_config_model
from cli.logging_config import setup_logging


@click.group()
@click.version_option(version="0.1.0")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option("--json-logs", is_flag=True, help="Emit logs as JSON")
def cli(verbose: bool, json_logs: bool):
    """mood-journal - heuristic mood tracking for your journal."""
    try:
        config_model = load_config_model()
    except ValueError as e:
        raise click.ClickException(str(e))

    log_cfg = config_model.logging
    setup_logging(
        json_mode=json_logs or log_cfg.json_mode,
        level="DEBUG" if verbose else log_cfg.level,
        log_file=get_paths(config_model.to_dict())["log_file"],
    )


cli.add_command(analyze)
cli.add_command(annotate)
cli.add_command(mood)


if __name__ == "__main__":
    cli()
