"""
Module that contains the command line app.

Why does this file exist, and why not put this in __main__?

  You might be tempted to import things from __main__ later, but that will cause
  problems: the code will get executed twice:

  - When you run `python -mgstester` python will execute
    ``__main__.py`` as a script. That means there won't be any
    ``gstester.__main__`` in ``sys.modules``.
  - When you import __main__ it will get executed again (as a module) because
    there's no ``gstester.__main__`` in ``sys.modules``.
"""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from typing_extensions import Annotated

from gstester.config import Config
from gstester.exceptions import ConventionViolation, IncorrectFieldCount
from gstester.naming import NamingStyle
from gstester.utils.importlib import import_from_string
from gstester.verifier import GetterSetterVerifier


# `no_args_is_help=True` will show the help message when no arguments are passed
app = typer.Typer(no_args_is_help=True)

# Messages carry class paths and reprs, keep them on one line
console = Console(soft_wrap=True)


def version_callback(value: bool):
    if value:
        from gstester import __version__

        typer.echo(f"gstester {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool, typer.Option(help="Show version information", callback=version_callback)
    ] = False,
):
    """
    Getter-setter convention verifier
    """


def _load_class(path: str) -> type:
    try:
        return import_from_string(path)
    except ImportError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Abort()


def _build_verifier(
    naming: Optional[NamingStyle], verbose: bool, check_has_default: Optional[bool]
) -> GetterSetterVerifier:
    overrides = {}
    if naming is not None:
        overrides["naming"] = naming.value
    if verbose:
        overrides["verbose"] = True
    if check_has_default is not None:
        overrides["check_has_default"] = check_has_default

    return GetterSetterVerifier(Config.load_from_path("."), **overrides)


@app.command()
def verify(
    unit: Annotated[str, typer.Argument(help="Dotted path to the mixin class")],
    value: Annotated[str, typer.Argument(help="Value to set and obtain")],
    default: Annotated[str, typer.Argument(help="Custom default value to mock")],
    naming: Annotated[Optional[NamingStyle], typer.Option()] = None,
    verbose: Annotated[bool, typer.Option()] = False,
    check_has_default: Annotated[Optional[bool], typer.Option()] = None,
):
    """Verify the accessors of a getter-setter mixin"""
    unit_cls = _load_class(unit)
    verifier = _build_verifier(naming, verbose, check_has_default)

    try:
        verifier.verify(unit_cls, value, default)
    except (IncorrectFieldCount, ConventionViolation) as exc:
        console.print(f"[red]FAILED[/red] {unit}: {escape(str(exc))}")
        raise typer.Exit(code=1)

    console.print(f"[green]OK[/green] {unit}")


@app.command()
def compatible(
    unit: Annotated[str, typer.Argument(help="Dotted path to the mixin class")],
    interface: Annotated[str, typer.Argument(help="Dotted path to the interface")],
    verbose: Annotated[bool, typer.Option()] = False,
):
    """Check that a mixin satisfies an interface"""
    unit_cls = _load_class(unit)
    interface_cls = _load_class(interface)
    verifier = _build_verifier(None, verbose, None)

    try:
        verifier.assert_compatible(unit_cls, interface_cls)
    except ConventionViolation as exc:
        console.print(f"[red]INCOMPATIBLE[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    console.print(f"[green]OK[/green] {unit} implements {interface}")
