from rich.console import Console
from rich.markup import escape

from labelkit.config import Settings
from labelkit.models import AppSettings, load_app_settings

console = Console()
err_console = Console(stderr=True)


def get_settings() -> Settings:
    return Settings()


def get_app_settings() -> AppSettings:
    return load_app_settings(get_settings().app_settings_path)


class ConsoleNotifier:
    """Notifier printing to the terminal."""

    def __init__(self, target: Console | None = None):
        self.console = target or err_console

    def info(self, message: str) -> None:
        self.console.print(f"[cyan]{escape(message)}[/cyan]")

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]Error:[/bold red] {escape(message)}")
