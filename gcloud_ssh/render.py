"""Defines the format for printing RunRequest objects and commands"""

# Standard libraries
import shlex

# Third-party libraries
from rich.markup import escape

# Project libraries
from gcloud_ssh.run_request import RunRequest

RENDER_DICT = {
    "title": {"color": "#39ff14"},
    "field": {"color": "cyan"},
    "empty": {"color": "bright_black"},
    "command": {"color": "yellow"},
    "error": {"color": "bold red"},
}


def return_with_color(text: str, color: str, bold: bool = False) -> str:
    """Returns text wrapped in color tags

    Args:
        text: The text to wrap
        color: The color to use

    Returns:
        The text wrapped in color tags
    """
    if bold:
        color = f"bold {color}"
    return f"[{color}]{text}[/{color}]"


def render_request(request: RunRequest) -> str:
    """Turns a run request into a printable string

    Args:
        request: The run request

    Returns:
        One line per field of the request
    """
    lines = []
    for name in ("destination", "source", "command", "project", "zone"):
        value = getattr(request, name)
        label = return_with_color(text=f"{name.upper():<12}", color=RENDER_DICT["field"]["color"])
        if value:
            lines.append(f"{label} {escape(value)}")
        else:
            lines.append(f"{label} {return_with_color(text='-', color=RENDER_DICT['empty']['color'])}")
    for option in request.options:
        label = return_with_color(text=f"{'OPTION':<12}", color=RENDER_DICT["field"]["color"])
        lines.append(f"{label} {escape(option)}")
    return "\n".join(lines)


def render_command(command: list[str]) -> str:
    """Turns a command into a shell-quoted printable string"""
    return return_with_color(text=escape(shlex.join(command)), color=RENDER_DICT["command"]["color"])


def render_error(error: Exception) -> str:
    return return_with_color(text=escape(f"{type(error).__name__}: {error}"), color=RENDER_DICT["error"]["color"])
