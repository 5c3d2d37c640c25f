"""Allow ``python -m ragbot``."""

from .adapters.inbound.cli.commands import app

app()
