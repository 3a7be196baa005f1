#!/usr/bin/env python3
"""MWS Fulfillment request builder - Entry point."""
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import json
import logging

import click
from colorama import Fore, Style, init

from config import app_config
from mwsfba import __version__
from mwsfba.api import fba
from mwsfba.builder.complex_list import ComplexList
from mwsfba.errors import RequestBuildError

# Initialize colorama
init(autoreset=True)

def print_banner():
    """Print application banner."""
    print(f"{Fore.CYAN}{'=' * 44}")
    print(f"{Fore.CYAN}║   {Fore.WHITE}MWS Fulfillment Request Builder{Fore.CYAN}      ║")
    print(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    print()


def parse_assignment(text: str):
    """Split NAME=VALUE."""
    name, sep, value = text.partition("=")
    if not sep or not name:
        raise click.BadParameter(f"expected NAME=VALUE, got '{text}'")
    return name.strip(), value


@click.group()
@click.version_option(version=__version__)
@click.option("--log-level", default=None, help="Logging level (default from MWS_LOG_LEVEL)")
def cli(log_level):
    """Build and inspect MWS Fulfillment request parameters."""
    logging.basicConfig(
        level=(log_level or app_config.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.command()
@click.option("--section", type=click.Choice(sorted(fba.CATALOG)), help="Only list one section")
def actions(section):
    """List catalog actions."""
    print_banner()

    current = None
    for name, action in fba.list_actions(section):
        if name != current:
            click.echo(f"{Fore.CYAN}{name}")
            current = name
        click.echo(f"  {action}")


@cli.command()
@click.argument("section")
@click.argument("action")
def describe(section, action):
    """Show the fields of an action."""
    try:
        schema = fba.get_schema(section, action)
    except RequestBuildError as e:
        click.echo(f"{Fore.RED}❌ {e}")
        sys.exit(1)

    click.echo(f"{Fore.CYAN}{schema.group} / {schema.action} ({schema.version})")
    click.echo(f"{Fore.CYAN}{schema.path}\n")

    for name, definition in schema.fields.items():
        marker = f"{Fore.YELLOW}*" if definition.required else " "
        kind = definition.kind.value + ("[]" if definition.is_list else "")
        click.echo(f"{marker} {name:40s} {kind:12s} {definition.wire_path}")


@cli.command()
@click.argument("section")
@click.argument("action")
@click.option("-p", "--param", "params", multiple=True, help="NAME=VALUE, repeat for list fields")
@click.option(
    "-m",
    "--member",
    "members",
    multiple=True,
    type=(str, str),
    help="FIELD JSON, adds one member to a complex field",
)
def build(section, action, params, members):
    """Dry-run a request and print its wire parameters."""
    try:
        request = fba.new_request(section, action)

        values = {}
        for text in params:
            name, value = parse_assignment(text)
            definition = request.schema.get_field(name)
            if definition is not None and definition.is_list:
                values.setdefault(name, []).append(value)
            else:
                values[name] = value
        request.assign_many(values)

        lists = {}
        for field_name, raw in members:
            if field_name not in lists:
                lists[field_name] = request.new_complex(field_name)
            if not isinstance(lists[field_name], ComplexList):
                raise click.BadParameter(f"'{field_name}' is not a complex list field")
            try:
                member = json.loads(raw)
            except json.JSONDecodeError as e:
                raise click.BadParameter(f"invalid JSON for {field_name}: {e}")
            if not isinstance(member, dict):
                raise click.BadParameter(f"member for {field_name} must be a JSON object")
            lists[field_name].add_member(member)
        request.assign_many(lists)

        wire = request.finalize()
    except RequestBuildError as e:
        click.echo(f"{Fore.RED}❌ {e}")
        sys.exit(1)

    for key in sorted(wire):
        click.echo(f"{Fore.GREEN}{key}{Style.RESET_ALL}={wire[key]}")


if __name__ == "__main__":
    cli()
