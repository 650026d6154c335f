import typer

from labelkit.cli.commands import project, token
from labelkit.cli.context import get_settings
from labelkit.logging_config import setup_logging

app = typer.Typer()


@app.callback()
def callback():
    """
    Labelkit CLI
    """
    settings = get_settings()
    setup_logging(settings)


app.add_typer(project.app, name="project")
app.add_typer(token.app, name="token")
