"""Setup command for MoodLog CLI.

Creates the configuration file.
"""

import click
from rich.panel import Panel

from moodlog.cli.common import console, print_error
from moodlog.config import create_template_config, get_config_path, get_db_path, load_config
from moodlog.errors import ConfigError


@click.command()
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file.")
def init(force: bool) -> None:
    """Create the MoodLog configuration file.

    \b
    Examples:
      moodlog init
      moodlog init --force
    """
    config_path = get_config_path()

    if config_path.exists() and not force:
        console.print(f"[yellow]Config already exists at {config_path}[/yellow]")
        console.print("[dim]Use --force to overwrite it.[/dim]")
        return

    try:
        config_path = create_template_config(config_path)
        config = load_config(config_path)
    except (OSError, ConfigError) as e:
        print_error("Failed to create config", e)
        raise SystemExit(1)

    console.print(Panel(
        f"[green]✓ Config file created[/green]\n\n"
        f"Config:   [cyan]{config_path}[/cyan]\n"
        f"Database: [cyan]{get_db_path(config)}[/cyan]",
        title="[bold]MoodLog Setup[/bold]",
        border_style="green",
    ))
