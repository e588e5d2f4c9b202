from ghost_purge import cf, config, events, server
import typer

app = typer.Typer(no_args_is_help=True)
app.command(name="serve")(server.serve)
app.add_typer(cf.app, name="cf")
app.add_typer(events.app, name="events")
app.add_typer(config.app, name="config")
