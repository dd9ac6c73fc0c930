"""
Command-line interface for stepbar.

Provides a demo command that drives a progress tracker through a simulated loop.
"""
import sys
import time

import click

from . import __version__
from .core.config import get_config
from .core.exceptions import StepbarError
from .logging import setup_logging, get_logger, console
from .progress import ProgressTracker, StepOptions, SimpleRenderer, SubCellRenderer
from .progress.timefmt import format_duration


@click.group()
@click.version_option(version=__version__)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, debug):
    """stepbar - in-place terminal progress bars"""
    ctx.ensure_object(dict)
    ctx.obj["debug"] = debug

    # Initialize logging
    setup_logging(level="DEBUG" if debug else None)


@cli.command()
@click.option("--steps", "-n", default=100, type=click.IntRange(min=1), show_default=True,
              help="Number of simulated steps")
@click.option("--delay", "-d", default=0.05, type=click.FloatRange(min=0), show_default=True,
              help="Seconds of simulated work per step")
@click.option("--prefix", "-p", default="", help="Text shown before the bar")
@click.option("--frequency", "-f", default=None, type=float,
              help="Maximum redraws per second")
@click.option("--show-rate", is_flag=True, help="Show iterations per second")
@click.option("--sub-cell", is_flag=True, help="Draw partial cells with eighth blocks")
@click.option("--scroll", is_flag=True, help="Print a scrolling message on every step")
def demo(steps, delay, prefix, frequency, show_rate, sub_cell, scroll):
    """Run a simulated loop with a progress bar."""
    logger = get_logger("cli")
    config = get_config()

    renderer = SubCellRenderer() if sub_cell else SimpleRenderer(config.display.bar_glyph)

    try:
        tracker = ProgressTracker(
            steps,
            show_throughput=show_rate,
            prefix=prefix,
            max_update_frequency_hz=frequency,
            renderer=renderer,
        )
        logger.debug(f"Running {steps} steps with {delay}s delay")

        for i in range(1, steps + 1):
            time.sleep(delay)
            if scroll:
                options = StepOptions(
                    trailing_message=f"Custom message ({i})",
                    interleaved_message=f"Scrolling message ({i}/{steps})",
                )
            else:
                options = StepOptions()
            tracker.advance(options)

        console.print(f"[green]Completed {steps} steps in {format_duration(tracker.elapsed)}[/green]")

    except StepbarError as e:
        logger.error(str(e))
        if e.suggestions:
            click.echo("\nSuggestions:")
            for i, tip in enumerate(e.suggestions, 1):
                click.echo(f"  {i}. {tip}")
        sys.exit(1)
    except KeyboardInterrupt:
        click.echo()
        logger.info("Interrupted by user")
        sys.exit(130)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
