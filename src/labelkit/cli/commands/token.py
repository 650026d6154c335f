import json

import typer

from labelkit.models import SecurityToken
from labelkit.security.crypto import generate_key

app = typer.Typer(help="Security tokens")


@app.command("generate")
def generate(name: str = typer.Argument(..., help="Token name")):
    """Generate a new security token record for the settings file"""
    token = SecurityToken(name=name, key=generate_key())
    typer.echo(json.dumps(token.model_dump(by_alias=True), indent=2))
