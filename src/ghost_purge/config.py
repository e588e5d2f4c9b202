"""Configuration"""
import rich
import typer

from ghost_purge.models.settings import load_settings

app = typer.Typer(no_args_is_help=True)


@app.command()
def show():
    """Show the current configuration."""
    rich.print_json(load_settings().to_masked_json())
