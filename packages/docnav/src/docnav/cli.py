"""CLI interface for Docnav.

Command-line tool for serving and inspecting documentation menus.
"""

import asyncio
import json
import logging
import tomllib
from collections.abc import Callable
from functools import wraps
from pathlib import Path
from typing import Any

import click

from docnav.config import Config
from docnav.core.content import FileContentSource
from docnav.core.menus import MenuResolver
from docnav.core.navigation import get_breadcrumbs, get_pagination
from docnav.core.snippets import SnippetLoader
from docnav.core.text import generate_toc, slugify
from docnav.core.types import MenuItem, MenuTree


def config_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Add --config, --content-dir and --verbose options to a command."""

    @click.option(
        "--config",
        "-c",
        "config_path",
        type=click.Path(exists=True, path_type=Path),
        default=None,
        help="Path to configuration file (default: auto-discover docnav.toml)",
    )
    @click.option(
        "--content-dir",
        type=click.Path(path_type=Path, file_okay=False),
        default=None,
        help="Content directory with menus/ and shared/ (overrides config)",
    )
    @click.option(
        "--verbose",
        "-v",
        is_flag=True,
        help="Enable verbose output (debug logging)",
    )
    @wraps(func)
    def wrapper(*args: Any, verbose: bool, **kwargs: Any) -> Any:
        _configure_logging(verbose)
        return func(*args, **kwargs)

    return wrapper


@click.group()
def cli() -> None:
    """Docnav - navigation for documentation sites."""


@cli.command()
@config_options
@click.option(
    "--snippets-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Snippets directory (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
def serve(
    config_path: Path | None,
    content_dir: Path | None,
    snippets_dir: Path | None,
    host: str | None,
    port: int | None,
) -> None:
    """Start the navigation server."""
    from docnav.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        content_dir=content_dir,
        snippets_dir=snippets_dir,
    )

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Content directory: {config.content.content_dir}")
    click.echo(f"Snippets directory: {config.content.snippets_dir}")

    run_server(config)


@cli.command()
@config_options
@click.argument("menu_id")
def menu(config_path: Path | None, content_dir: Path | None, menu_id: str) -> None:
    """Print a resolved menu as JSON."""
    tree = _resolve_menu(config_path, content_dir, menu_id)
    click.echo(json.dumps(tree, indent=2, ensure_ascii=False))


@cli.command()
@config_options
@click.argument("menu_id")
@click.argument("path")
def pagination(
    config_path: Path | None,
    content_dir: Path | None,
    menu_id: str,
    path: str,
) -> None:
    """Print previous and next pages for PATH within a menu."""
    tree = _resolve_menu(config_path, content_dir, menu_id)
    result = get_pagination(tree, path)

    click.echo(f"Previous: {_describe(result.prev)}")
    click.echo(f"Next: {_describe(result.next)}")


@cli.command()
@config_options
@click.argument("menu_id")
@click.argument("path")
def breadcrumbs(
    config_path: Path | None,
    content_dir: Path | None,
    menu_id: str,
    path: str,
) -> None:
    """Print the breadcrumb trail for PATH within a menu."""
    tree = _resolve_menu(config_path, content_dir, menu_id)
    trail = get_breadcrumbs(tree, path)

    if not trail:
        click.echo(f"No menu entry matches {path}")
        return

    click.echo(" > ".join(_label(item) for item in trail))


@cli.command()
@config_options
@click.argument("file_path")
@click.option(
    "--snippets-dir",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Snippets directory (overrides config)",
)
@click.option(
    "--region",
    "-r",
    default=None,
    help="Region name between @snippet:start and @snippet:end markers",
)
def snippet(
    config_path: Path | None,
    content_dir: Path | None,
    file_path: str,
    snippets_dir: Path | None,
    region: str | None,
) -> None:
    """Print a code snippet."""
    config = _load_config(config_path).with_overrides(
        content_dir=content_dir,
        snippets_dir=snippets_dir,
    )
    loader = SnippetLoader(config.content.snippets_dir)
    click.echo(loader.load(file_path, region))


@cli.command()
@click.argument("widgets_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print entries as JSON")
def toc(widgets_file: Path, as_json: bool) -> None:
    """Print the table of contents for a page's widget list.

    WIDGETS_FILE is a JSON list of widgets, or a TOML file with [[widgets]]
    tables.
    """
    widgets = _load_widgets(widgets_file)
    entries = generate_toc(widgets)

    if as_json:
        click.echo(json.dumps([entry.to_dict() for entry in entries], indent=2))
        return

    for entry in entries:
        click.echo(f"#{entry.id}  {entry.label} ({entry.type})")


@cli.command()
@click.argument("text")
def slug(text: str) -> None:
    """Print the URL slug for TEXT."""
    click.echo(slugify(text))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def _resolve_menu(config_path: Path | None, content_dir: Path | None, menu_id: str) -> MenuTree:
    config = _load_config(config_path).with_overrides(content_dir=content_dir)
    resolver = MenuResolver(FileContentSource(config.content.content_dir))
    return asyncio.run(resolver.resolve(menu_id))


def _load_widgets(path: Path) -> Any:
    try:
        if path.suffix == ".toml":
            with path.open("rb") as f:
                return tomllib.load(f).get("widgets", [])
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Failed to load {path}: {e}") from e


def _label(item: MenuItem) -> str:
    return str(item.get("text") or item.get("label") or item.get("href") or "(untitled)")


def _describe(item: MenuItem | None) -> str:
    if item is None:
        return "-"
    return f"{_label(item)} ({item.get('href')})"
