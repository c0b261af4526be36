"""Command line interface for configfactory."""

from __future__ import annotations

import importlib
import logging
from typing import Type

import click
from pydantic import ValidationError

from configfactory.core.errors import ConfigFileError
from configfactory.core.module import ConfigModule
from configfactory.presentation import build


def _import_module_type(target: str) -> Type[ConfigModule]:
    module_path, _, attribute = target.partition(":")
    if not module_path or not attribute:
        raise click.ClickException(f"Expected 'package.module:ClassName', got '{target}'.")
    try:
        namespace = importlib.import_module(module_path)
    except ImportError as exc:
        raise click.ClickException(f"Cannot import '{module_path}': {exc}") from exc
    module_type = getattr(namespace, attribute, None)
    if not (isinstance(module_type, type) and issubclass(module_type, ConfigModule)):
        raise click.ClickException(f"'{target}' is not a ConfigModule subclass.")
    return module_type


def _load(target: str) -> ConfigModule:
    module_type = _import_module_type(target)
    try:
        return module_type.load()
    except ConfigFileError as exc:
        raise click.ClickException(str(exc)) from exc


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["warning", "info", "debug"], case_sensitive=False),
    default="warning",
    help="Set logging verbosity (warning/info/debug).",
)
def app(log_level: str) -> None:
    """Inspect and edit configfactory config modules."""
    logging.basicConfig(level=getattr(logging, log_level.upper(), logging.WARNING))


@app.command()
@click.argument("target")
def show(target: str) -> None:
    """Print the settings page of TARGET (package.module:ClassName)."""
    module = _load(target)
    page = build(module)
    click.echo(f"{module.name} ({module.local_path})")
    for category in page.categories:
        click.echo(f"[{category.title}]")
        for group in category.groups:
            marker = " *" if group is page.selected_group else ""
            click.echo(f"  {group.title}{marker}")
            for item in group.items:
                color = f" {item.validation_color}" if item.validation_color else ""
                click.echo(f"    {item.header} = {item.content.value!r} <{item.content.kind}>{color}")


@app.command()
@click.argument("target")
def validate(target: str) -> None:
    """Run every validation rule of TARGET."""
    module = _load(target)
    result = module.validate_all()
    if not result.ok:
        name = result.target.name if result.target is not None else "?"
        raise click.ClickException(f"{name}: {result.message or 'validation failed'}")
    click.echo(result.message)


@app.command("set")
@click.argument("target")
@click.argument("name")
@click.argument("value")
@click.option("--force/--no-force", default=False, help="Save even if validation fails.")
def set_value(target: str, name: str, value: str, force: bool) -> None:
    """Assign VALUE to property NAME of TARGET and save."""
    module = _load(target)
    try:
        prop = module.properties[name]
    except KeyError as exc:
        raise click.ClickException(str(exc.args[0])) from exc
    try:
        prop.set(module, value)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid value for {name}: {exc}") from exc

    result = module.validate_all()
    if not result.ok and not force:
        raise click.ClickException(
            f"Not saved: {result.message or 'validation failed'} (use --force to save anyway)."
        )
    if not module.save():
        raise click.ClickException("Saving was cancelled.")
    click.echo(f"{name} = {prop.get(module)!r}")


@app.command()
@click.argument("target")
def defaults(target: str) -> None:
    """Restore the declared defaults of TARGET and save."""
    module = _load(target)
    module.restore_defaults()
    module.save()
    click.echo(f"Restored defaults in {module.local_path}")


@app.command()
@click.argument("target")
def path(target: str) -> None:
    """Print where TARGET is stored."""
    module_type = _import_module_type(target)
    click.echo(str(module_type().local_path))


@app.command()
def version() -> None:
    """Print configfactory version."""
    from configfactory import __version__

    click.echo(__version__)


if __name__ == "__main__":
    app(prog_name="configfactory")
