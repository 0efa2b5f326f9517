"""Builds and runs the gcloud and system scp commands"""

# Standard libraries
import logging
import subprocess
from typing import Callable

# Project libraries
from gcloud_ssh.default import DEFAULT_GCLOUD_EXECUTABLE, DEFAULT_SYSTEM_SCP_EXECUTABLE, GCLOUD_TUNNEL_FLAGS
from gcloud_ssh.errors import CommandNotFoundError, CommandStartError
from gcloud_ssh.run_request import RunRequest

logger = logging.getLogger(__name__)

Runner = Callable[[list[str]], int]


def gcloud_ssh_command(request: RunRequest, executable: str = DEFAULT_GCLOUD_EXECUTABLE) -> list[str]:
    """Returns the "gcloud compute ssh" command for a resolved request"""
    return [
        executable,
        "compute",
        "ssh",
        *GCLOUD_TUNNEL_FLAGS,
        "--project",
        request.project,
        "--zone",
        request.zone,
        request.destination,
        "--command",
        request.command,
    ]


def gcloud_scp_command(request: RunRequest, executable: str = DEFAULT_GCLOUD_EXECUTABLE) -> list[str]:
    """Returns the "gcloud compute scp" command for a resolved request"""
    return [
        executable,
        "compute",
        "scp",
        *GCLOUD_TUNNEL_FLAGS,
        "--project",
        request.project,
        "--zone",
        request.zone,
        request.source,
        request.destination,
    ]


def system_scp_command(arguments: list[str], executable: str = DEFAULT_SYSTEM_SCP_EXECUTABLE) -> list[str]:
    """Returns the system scp command, the arguments are passed through untouched

    Args:
        arguments: The original scp arguments without the program name
        executable: The system scp executable
    """
    return [executable, *arguments]


def run_command(command: list[str]) -> int:
    """Runs a command attached to the current stdout and stderr

    Args:
        command: The command and its arguments

    Raises:
        CommandNotFoundError: If the executable cannot be found
        CommandStartError: If the executable cannot be started

    Returns:
        The exit status of the command
    """
    logger.info("Running command: %s", command)
    try:
        result = subprocess.run(command, check=False)
    except FileNotFoundError as ex:
        raise CommandNotFoundError(command[0]) from ex
    except OSError as ex:
        raise CommandStartError(command[0], ex) from ex
    if result.returncode != 0:
        logger.warning("Command %s exited with status %d", command[0], result.returncode)
    return result.returncode
