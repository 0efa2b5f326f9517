"""Main logic for gcloud-ssh, translates ssh/scp invocations into gcloud compute ssh/scp"""

# Standard libraries
import logging
import sys
from typing import Callable, Optional

# Third-party libraries
from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError

# Project libraries
from gcloud_ssh.commands import Runner, gcloud_scp_command, gcloud_ssh_command, run_command, system_scp_command
from gcloud_ssh.config import Config, log_file_from_environment
from gcloud_ssh.errors import GcloudSshError, HasIdentityFileError
from gcloud_ssh.inventory import ComputeInventory, Inventory, default_credentials
from gcloud_ssh.logger import close_logger, console, setup_logger
from gcloud_ssh.render import render_error
from gcloud_ssh.resolver import resolve_request
from gcloud_ssh.run_request import RunRequest

logger = logging.getLogger(__name__)

FATAL_ERRORS = (GcloudSshError, GoogleAPIError, GoogleAuthError)


def parse_and_run(
    config: Config,
    arguments: list[str],
    inventory_factory: Callable[[], Inventory] = ComputeInventory,
    runner: Runner = run_command,
) -> int:
    """Translates one ssh or scp invocation and runs it

    Args:
        config: The invocation configuration
        arguments: The original argument list, program name included
        inventory_factory: Creates the inventory, only called when an instance has to be resolved
        runner: Runs a command and returns its exit status

    Returns:
        The exit status of the command that was run
    """
    if config.do_scp:
        try:
            request = RunRequest.from_scp_arguments(arguments)
        except HasIdentityFileError as ex:
            logger.info("Identity file %s given, running system scp with args: %s", ex.identity_file, arguments[1:])
            return runner(system_scp_command(arguments[1:], executable=config.system_scp_executable))
    else:
        request = RunRequest.from_ssh_arguments(arguments)

    resolve_request(inventory=inventory_factory(), search_space=config.search_space, request=request)
    if request.options:
        logger.info("Not forwarding ssh options: %s", request.options)

    if config.do_scp:
        command = gcloud_scp_command(request, executable=config.gcloud_executable)
    else:
        command = gcloud_ssh_command(request, executable=config.gcloud_executable)
    return runner(command)


def default_project() -> Optional[str]:
    """Returns the project of the application default credentials"""
    _, project = default_credentials()
    return project


def main(arguments: Optional[list[str]] = None, do_scp: Optional[bool] = None) -> int:
    """Runs an invocation with the real collaborators

    Args:
        arguments: The argument list, defaults to sys.argv
        do_scp: Forces the scp or ssh mode, defaults to the DO_SCP environment variable

    Returns:
        The process exit status
    """
    if arguments is None:
        arguments = sys.argv

    handler = setup_logger(log_file_from_environment())
    try:
        config = Config.from_environment(default_project=default_project, do_scp=do_scp)
        logger.info("Starting with zones: %s, projects: %s, doSCP: %s", config.zones, config.projects, config.do_scp)
        return parse_and_run(config=config, arguments=arguments, inventory_factory=ComputeInventory)
    except FATAL_ERRORS as ex:
        logger.error("%s", ex)
        console.print(render_error(ex))
        return 1
    finally:
        close_logger(handler)


def ssh_main():
    sys.exit(main())


def scp_main():
    sys.exit(main(do_scp=True))


if __name__ == "__main__":
    ssh_main()
