# focusflow/utils/cli_enhanced.py
"""
Console building blocks shared by the timer and history views: framed intro
and outro lines, status messages, notes and the interactive prompts.
"""
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar, Union

from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.prompt import Prompt
from rich.text import Text

from focusflow.utils.error_handler import ValidationError

T = TypeVar("T")

Message = Union[str, Text]


class EnhancedCLI:
    """Thin layer over a rich Console for the prompts and messages we use."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def _line(self, prefix: str, message: Message, style: str = ""):
        line = Text(prefix, style="dim")
        if isinstance(message, Text):
            line.append_text(message)
        else:
            line.append(message, style=style)
        self.console.print(line)

    def intro(self, message: Message):
        self._line("┌  ", message)

    def outro(self, message: Message):
        self._line("└  ", message)
        self.console.print()

    def info(self, message: Message, icon: str = "●"):
        self._line(f"{icon}  ", message, style="blue")

    def warning(self, message: Message, icon: str = "▲"):
        self._line(f"{icon}  ", message, style="yellow")

    def error(self, message: Message, icon: str = "■"):
        self._line(f"{icon}  ", message, style="red")

    def note(self, body: RenderableType, title: str):
        panel = Panel(
            body,
            title=f"[bold]{title}[/bold]",
            title_align="left",
            border_style="dim",
            padding=(0, 1),
        )
        self.console.print(panel)

    def text(
        self,
        message: str,
        placeholder: Optional[str] = None,
        validate: Optional[Callable[[str], str]] = None,
    ) -> str:
        """
        Ask for free text until `validate` accepts it. `validate` returns the
        cleaned value or raises ValidationError, whose message is shown.
        KeyboardInterrupt/EOFError propagate to the caller.
        """
        hint = f" [dim]({placeholder})[/dim]" if placeholder else ""
        while True:
            value = Prompt.ask(f"[bold]{message}[/bold]{hint}",
                               console=self.console, default="",
                               show_default=False)
            if validate is None:
                return value
            try:
                return validate(value)
            except ValidationError as e:
                self.error(str(e))

    def select(self, message: str, options: Sequence[Tuple[T, str]]) -> T:
        """Numbered menu over (value, label) pairs; returns the chosen value."""
        self.console.print(f"[bold]{message}[/bold]")
        for i, (_, label) in enumerate(options, 1):
            style = "green" if i == 1 else "dim"
            marker = "→" if i == 1 else " "
            self.console.print(
                f"  {marker} [dim]{i}.[/dim] [{style}]{label}[/{style}]")
        response = Prompt.ask(
            "Select option",
            console=self.console,
            choices=[str(i) for i in range(1, len(options) + 1)],
            default="1",
        )
        return options[int(response) - 1][0]

