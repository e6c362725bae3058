"""Interactive questions asked before the setup runs."""

from typing import List, Optional

from prompt_toolkit import Application
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout import HSplit, Layout
from prompt_toolkit.layout.containers import Window
from prompt_toolkit.layout.controls import FormattedTextControl
from prompt_toolkit.styles import Style
from rich.prompt import Confirm

from src.utils.console import rich_console

from .exceptions import PromptError
from .models import StyleGuideDescriptor, UserSelection
from .styles import STYLE_GUIDES

STYLE_QUESTION = "Which style guide would you want to follow?"
REACT_QUESTION = "Are you going to use React?"


def select_style(catalog: List[StyleGuideDescriptor]) -> str:
    """Arrow key selection for style guides."""
    current_index = 0

    def get_formatted_text():
        lines = [
            (
                "",
                f"{STYLE_QUESTION} (↑↓ to navigate, Enter to select, Esc to cancel):\n\n",
            )
        ]

        for i, style in enumerate(catalog):
            if i == current_index:
                lines.append(("class:selected", f"▶ {style.name}\n"))
            else:
                lines.append(("", f"  {style.name}\n"))

        return lines

    bindings = KeyBindings()

    @bindings.add("up")
    def move_up(event):
        nonlocal current_index
        current_index = (current_index - 1) % len(catalog)

    @bindings.add("down")
    def move_down(event):
        nonlocal current_index
        current_index = (current_index + 1) % len(catalog)

    @bindings.add("enter")
    def select_item(event):
        event.app.exit(result=catalog[current_index])

    @bindings.add("escape")
    @bindings.add("c-c")
    def cancel(event):
        event.app.exit(result=None)

    application = Application(
        layout=Layout(
            HSplit(
                [
                    Window(FormattedTextControl(get_formatted_text), wrap_lines=True),
                ]
            )
        ),
        key_bindings=bindings,
        mouse_support=False,
        full_screen=False,
        style=Style(
            [
                ("selected", "bg:#0066cc #ffffff bold"),
            ]
        ),
    )

    selected = application.run()
    if selected is None:
        raise PromptError("No style guide selected")
    return selected.value


def confirm_react() -> bool:
    return Confirm.ask(REACT_QUESTION, default=False, console=rich_console)


def collect_selection(
    catalog: List[StyleGuideDescriptor] = None,
    style: Optional[str] = None,
    react: Optional[bool] = None,
) -> UserSelection:
    """
    Ask the style and React questions.

    Answers already given (e.g. from command line flags) are not asked again.

    Raises:
        PromptError: If the user cancels or the terminal cannot be read
    """
    catalog = catalog or STYLE_GUIDES
    try:
        if style is None:
            style = select_style(catalog)
        if react is None:
            react = confirm_react()
    except (EOFError, KeyboardInterrupt) as e:
        raise PromptError(f"Prompt cancelled ({type(e).__name__})") from e
    return UserSelection(style=style, uses_react=react)
