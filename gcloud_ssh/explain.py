"""Shows how a raw ssh/scp command line would be translated, without running anything"""

# Standard libraries
import argparse
import sys

# Third-party libraries
from rich.console import Console

# Project libraries
from gcloud_ssh.commands import gcloud_scp_command, gcloud_ssh_command
from gcloud_ssh.default import VERSION
from gcloud_ssh.errors import GcloudSshError, HasIdentityFileError
from gcloud_ssh.render import RENDER_DICT, render_command, render_error, render_request, return_with_color
from gcloud_ssh.run_request import InstanceLocation, RunRequest
from gcloud_ssh.tokenizer import tokenize

PLACEHOLDER_INSTANCE = "<instance>"
PLACEHOLDER_ZONE = "<zone>"
PLACEHOLDER_PROJECT = "<project>"

console = Console()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gcloud-ssh-explain",
        description="Shows how gcloud-ssh translates an ssh or scp command line",
        usage='gcloud-ssh-explain [options] "ssh -o Opt=1 10.0.0.2 ls -la"',
    )
    parser.add_argument("--version", "-v", action="version", version=f"gcloud-ssh v{VERSION}")
    parser.add_argument("--scp", action="store_true", help="Parse the command line as scp arguments")
    parser.add_argument("--no-color", action="store_true", help="Disable colored output")
    parser.add_argument("command_line", help="The raw command line, program name included")
    return parser


def explain(command_line: str, do_scp: bool) -> int:
    """Prints the tokens, the parsed request and the gcloud command of a command line

    Args:
        command_line: The raw command line
        do_scp: Whether to parse the command line as scp arguments

    Returns:
        The exit status
    """
    try:
        arguments = tokenize(command_line)
        console.print(return_with_color(text="ARGUMENTS", color=RENDER_DICT["title"]["color"], bold=True))
        for argument in arguments:
            console.print(f"  {argument!r}", markup=False)

        if do_scp:
            request = RunRequest.from_scp_arguments(arguments)
        else:
            request = RunRequest.from_ssh_arguments(arguments)
    except HasIdentityFileError:
        console.print("Identity file given, the system scp would run with the arguments unchanged")
        return 0
    except GcloudSshError as ex:
        console.print(render_error(ex))
        return 1

    console.print(return_with_color(text="REQUEST", color=RENDER_DICT["title"]["color"], bold=True))
    console.print(render_request(request))
    console.print(return_with_color(text="ADDRESS", color=RENDER_DICT["title"]["color"], bold=True))
    console.print(f"  {request.address}", markup=False)

    request.rewrite(InstanceLocation(name=PLACEHOLDER_INSTANCE, zone=PLACEHOLDER_ZONE, project=PLACEHOLDER_PROJECT))
    command = gcloud_scp_command(request) if do_scp else gcloud_ssh_command(request)
    console.print(return_with_color(text="COMMAND", color=RENDER_DICT["title"]["color"], bold=True))
    console.print(render_command(command))
    return 0


def explain_main():
    args = build_parser().parse_args()

    # Set console color mode
    if args.no_color:
        console.no_color = True

    sys.exit(explain(command_line=args.command_line, do_scp=args.scp))


if __name__ == "__main__":
    explain_main()
