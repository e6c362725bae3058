"""Global console singleton with consistent color scheme for Rich output."""

from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme


class LintConsole:
    """Singleton console class with consistent color scheme and styling."""

    _instance: Optional["LintConsole"] = None
    _console: Optional[Console] = None

    # Color scheme for consistent styling across the application
    COLOR_SCHEME = {
        # Status colors
        "success": "bold green",
        "error": "bold red",
        "warning": "bold yellow",
        "info": "bold blue",
        "process": "bold cyan",
        "highlight": "bold magenta",

        # Text colors
        "dim": "dim white",

        # Semantic colors
        "package": "cyan",
        "bullet": "green",
    }

    def __new__(cls) -> "LintConsole":
        """Singleton pattern implementation."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize the console only once."""
        if self._console is None:
            theme = Theme(self.COLOR_SCHEME)
            self._console = Console(theme=theme, highlight=False)

    @property
    def console(self) -> Console:
        """Get the rich console instance."""
        return self._console

    def print(self, *args, **kwargs):
        """Print with the global console."""
        return self._console.print(*args, **kwargs)

    def success(self, message: str):
        """Print success message."""
        self._console.print(f"✅ {message}", style="success")

    def error(self, message: str):
        """Print error message."""
        self._console.print(f"❌ {message}", style="error")

    def warning(self, message: str):
        """Print warning message."""
        self._console.print(f"⚠️  {message}", style="warning")

    def info(self, message: str):
        """Print info message."""
        self._console.print(f"ℹ️  {message}", style="info")

    def process(self, message: str):
        """Print process/loading message."""
        self._console.print(f"🔄 {message}", style="process")

    def highlight(self, message: str):
        """Print highlighted message."""
        self._console.print(f"✨ {message}", style="highlight")

    def dim(self, message: str):
        """Print dimmed text."""
        self._console.print(message, style="dim")

    def step(self, *parts: str):
        """Print a pipeline step: a green dash followed by bold text.

        Parts may carry markup, e.g. ``console.step("Installing", packages(names))``.
        """
        text = " ".join(parts)
        self._console.print(f"[bullet]-[/bullet] [bold]{text}[/bold]")


def packages(names) -> str:
    """Render package names highlighted and comma separated for ``step``."""
    return ", ".join(f"[package]{escape(name)}[/package]" for name in names)


# Global singleton instance
console = LintConsole()

# Expose the rich console for advanced usage
rich_console = console.console
