"""User feedback utilities for the command-line interface."""

from typing import Optional, Any, Dict

from rich.console import Console
from rich.panel import Panel
from rich.text import Text
from rich.prompt import Confirm
from rich.align import Align
from rich.syntax import Syntax
import rich.box

from react_test_generator import __version__ as VERSION


class StatusIcon:
    """Status icons for CLI display."""

    SUCCESS = "[bold green]✓[/bold green]"
    ERROR = "[bold red]✗[/bold red]"
    WARNING = "[bold yellow]⚠[/bold yellow]"
    INFO = "[bold blue]●[/bold blue]"
    DEBUG = "[dim]◦[/dim]"
    TEST = "[cyan]⚗[/cyan]"

class UserFeedback:
    """Notifications, prompts and previews shown to the user."""

    def __init__(self, verbose: bool = False, quiet: bool = False, console: Optional[Console] = None,
                 error_console: Optional[Console] = None):
        self.verbose = verbose
        self.quiet = quiet
        self.console = console or Console(stderr=False)
        self.error_console = error_console or Console(stderr=True)

    def success(self, message: str, details: Optional[str] = None):
        """Display success message with checkmark icon."""
        if not self.quiet:
            self.console.print(f"{StatusIcon.SUCCESS} {message}")
            if details and self.verbose:
                self._print_details(details, "green")

    def error(self, message: str, suggestion: Optional[str] = None, details: Optional[str] = None):
        """Display error message with error icon and optional suggestion."""
        # Always show errors, even in quiet mode
        self.error_console.print(f"{StatusIcon.ERROR} [bold red]Error:[/bold red] {message}")

        if suggestion:
            self.error_console.print(f"  [yellow]Suggestion:[/yellow] {suggestion}")

        if details and self.verbose:
            self._print_details(details, "red", console=self.error_console)

    def warning(self, message: str, suggestion: Optional[str] = None):
        """Display warning message with warning icon."""
        if not self.quiet:
            self.console.print(f"{StatusIcon.WARNING} [bold yellow]Warning:[/bold yellow] {message}")

            if suggestion:
                self.console.print(f"  [yellow]{suggestion}[/yellow]")

    def info(self, message: str, details: Optional[str] = None):
        """Display info message with info icon."""
        if not self.quiet:
            self.console.print(f"{StatusIcon.INFO} {message}")

            if details and self.verbose:
                self._print_details(details, "blue")

    def debug(self, message: str, details: Optional[str] = None):
        """Display debug message (only in verbose mode)."""
        if self.verbose and not self.quiet:
            self.console.print(f"{StatusIcon.DEBUG} [dim]{message}[/dim]")
            if details:
                self._print_details(details, "dim")

    def summary_panel(self, title: str, items: Dict[str, Any], style: str = "green"):
        """Display a summary panel with key-value pairs."""
        if not self.quiet:
            content = [f"[bold]{key}:[/bold] {value}" for key, value in items.items()]
            panel = Panel(
                "\n".join(content),
                title=title,
                border_style=style,
                padding=(1, 2)
            )
            self.console.print(panel)

    def confirm(self, message: str, default: bool = False) -> bool:
        """Ask user for confirmation with rich prompt."""
        # Always show confirmation prompts, even in quiet mode
        return Confirm.ask(message, default=default, console=self.console)

    def code_preview(self, title: str, code: str, lexer: str = "tsx"):
        """Print generated code with syntax highlighting - shown even in quiet mode."""
        syntax = Syntax(code, lexer, line_numbers=True, word_wrap=False)
        self.console.print(Panel(syntax, title=f"{StatusIcon.TEST} {title}", border_style="cyan",
                                 box=rich.box.ROUNDED, title_align="left"))

    def brand_header(self, subtitle: str = ""):
        """Display a concise header."""
        if not self.quiet:
            title_text = Text()
            title_text.append("React Test Generator", style="bold bright_blue")
            if subtitle:
                title_text.append(f" • {subtitle}", style="dim cyan")

            header_panel = Panel(
                Align.center(title_text),
                subtitle=f"v{VERSION}",
                border_style="bright_blue",
                box=rich.box.DOUBLE,
                padding=(0, 2),
            )
            self.console.print(header_panel)

    def _print_details(self, details: str, style: str, console: Optional[Console] = None):
        """Print details with indentation and styling."""
        target_console = console or self.console
        for line in details.split('\n'):
            if line.strip():
                target_console.print(f"  [dim]│[/dim] [{style}]{line}[/{style}]")
