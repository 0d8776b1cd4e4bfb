"""CLI entrypoint for ai-linter."""

import logging
from pathlib import Path

import rich_click as click

from ai_linter import __version__
from ai_linter.lint.controllers import LintCliController, LintRunCommand
from ai_linter.orchestrator.routing import SUPPORTED_AGENTS

EXIT_OPERATIONAL_FAILURE = 2

click.rich_click.USE_MARKDOWN = True
LINT_CONTROLLER = LintCliController()


@click.command()
@click.version_option(version=__version__, prog_name="ai-linter")
@click.argument(
    "project_path",
    type=click.Path(path_type=Path, exists=True, file_okay=False),
    default=Path(),
)
@click.option(
    "-c",
    "--concurrency",
    type=click.IntRange(min=1),
    default=None,
    help="Max parallel agent sessions. Defaults to AI_LINTER_CONCURRENCY or 5.",
)
@click.option(
    "--max-retries",
    type=click.IntRange(min=1),
    default=None,
    help="Attempts per agent call before giving up. Defaults to AI_LINTER_MAX_RETRIES or 3.",
)
@click.option("--model-fast", default=None, help="Model for the first (scan) pass.")
@click.option("--model-review", default=None, help="Model for the second (verification) pass.")
@click.option(
    "--agent",
    type=click.Choice(SUPPORTED_AGENTS, case_sensitive=False),
    default=None,
    help="AI agent CLI to use. Defaults to AI_LINTER_AGENT or claude.",
)
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Report path. Defaults to AI_LINTER_OUTPUT or ai-linter-report.md.",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Log agent command lines and raw output.",
)
@click.pass_context
def ai_linter(  # noqa: PLR0913
    ctx: click.Context,
    project_path: Path,
    concurrency: int | None,
    max_retries: int | None,
    model_fast: str | None,
    model_review: str | None,
    agent: str | None,
    output_path: Path | None,
    verbose: bool,
) -> None:
    """Check a project against its `.ai-linter.md` rule files using an AI agent.

    Exit code is 0 when no error-severity issue is confirmed, 1 when at least
    one is, and 2 on operational failure.
    """

    command = LintRunCommand(
        project_path=project_path,
        concurrency=concurrency,
        max_retries=max_retries,
        model_fast=model_fast,
        model_review=model_review,
        agent=agent,
        output_path=output_path,
        verbose=verbose or None,
    )
    try:
        settings = LINT_CONTROLLER.build_settings(command)
        _configure_logging(verbose=settings.agent.verbose)
        result = LINT_CONTROLLER.run(settings, on_progress=click.echo)
    except Exception as error:  # noqa: BLE001
        click.echo(f"ai-linter error: {error}", err=True)
        ctx.exit(EXIT_OPERATIONAL_FAILURE)
    ctx.exit(result.exit_code)


def _configure_logging(*, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":  # pragma: no cover
    ai_linter()
