import logging

import click

from jnynpy.bessel import IntegerOrderBessel
from jnynpy.config import Config


@click.group()
@click.option("--verbose", is_flag=True, help="Log regime selection and timings.")
def cli(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@click.option(
    "--kind",
    type=click.Choice(["j", "y"]),
    default="j",
    show_default=True,
    help="First (j) or second (y) kind.",
)
@click.option("--order", "-n", required=True, type=int, help="Integer order.")
@click.argument("x", type=float)
def evaluate(kind: str, order: int, x: float) -> None:
    """Print J_n(X) or Y_n(X)."""
    click.echo(repr(IntegerOrderBessel().evaluate(kind, order, x)))


@cli.command()
@click.option(
    "--config",
    required=True,
    type=str,
    help="Specify the path to the config file to be used.",
)
@click.option(
    "--output",
    type=str,
    default="",
    help="File path for the table. Overrides the provided path in the config.",
)
def table(config: str, output: str) -> None:
    """Evaluate the order/argument grid described by a config file."""
    try:
        request = Config(config)
    except (OSError, ValueError) as err:
        raise click.ClickException(str(err)) from err

    result = IntegerOrderBessel().table(request.orders, request.arguments, request.kind)
    target = output or request.output_file
    if target:
        try:
            result.save(target)
        except ValueError as err:
            raise click.BadParameter(str(err), param_hint="--output") from err
    else:
        click.echo(result.to_frame().to_csv(index=False), nl=False)
