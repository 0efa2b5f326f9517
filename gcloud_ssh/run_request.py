"""Defines the RunRequest and InstanceLocation classes"""

# Standard libraries
import logging

# Third-party libraries
from attrs import define, field, validators

# Project libraries
from gcloud_ssh.default import COMMAND_FLAG, IDENTITY_FLAG, OPTION_FLAG
from gcloud_ssh.destination import extract_address, replace_address
from gcloud_ssh.errors import (
    EmptyCommandError,
    EmptyDestinationError,
    EmptySourceError,
    HasIdentityFileError,
    MissingFlagValueError,
)

logger = logging.getLogger(__name__)


@define(frozen=True)
class InstanceLocation:
    """Where an instance lives"""

    name: str = field(validator=validators.instance_of(str))
    zone: str = field(validator=validators.instance_of(str))
    project: str = field(validator=validators.instance_of(str))


def flag_value(arguments: list[str], index: int) -> str:
    """Returns the value following a flag

    Args:
        arguments: The argument list
        index: The index of the flag

    Raises:
        MissingFlagValueError: If the flag is the last argument
    """
    if index + 1 >= len(arguments):
        raise MissingFlagValueError(arguments[index])
    return arguments[index + 1]


@define
class RunRequest:
    """Class for organizing a translated ssh or scp invocation"""

    destination: str = field(default="", validator=validators.instance_of(str))
    command: str = field(default="", validator=validators.instance_of(str))
    source: str = field(default="", validator=validators.instance_of(str))
    zone: str = field(default="", validator=validators.instance_of(str))
    project: str = field(default="", validator=validators.instance_of(str))
    options: list[str] = field(
        factory=list,
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(str), iterable_validator=validators.instance_of(list)
        ),
    )

    @property
    def address(self) -> str:
        """The address literal of the destination"""
        return extract_address(self.destination)

    @classmethod
    def from_ssh_arguments(cls, arguments: list[str]):
        """Converts ssh arguments into a RunRequest

        The first argument is the program name. "-c" sets the command, "-o" adds an option,
        other flags before the destination and empty arguments are skipped. The first positional
        argument is the destination and the remaining arguments form the command unless "-c" was given.

        Args:
            arguments: The ssh argument list

        Raises:
            MissingFlagValueError: If "-c" or "-o" is the last argument
            EmptyDestinationError: If no destination was found
            EmptyCommandError: If no command was found
        """
        request = cls()
        commands = []

        argument_index = 1
        while argument_index < len(arguments):
            argument = arguments[argument_index]

            if argument == COMMAND_FLAG:
                request.command = flag_value(arguments, argument_index)
                argument_index += 2
                continue
            if argument == OPTION_FLAG:
                request.options.append(flag_value(arguments, argument_index))
                argument_index += 2
                continue
            # Empty arguments, e.g. from "''", are skipped
            if argument == "":
                argument_index += 1
                continue
            # Flags after the destination belong to the remote command
            if argument.startswith("-") and not request.destination:
                argument_index += 1
                continue

            if not request.destination:
                request.destination = argument
            else:
                commands.append(argument)
            argument_index += 1

        if not request.destination:
            raise EmptyDestinationError()
        if not request.command:
            request.command = " ".join(commands)
        if not request.command:
            raise EmptyCommandError()

        logger.info("Parsed ssh arguments: %r", request)
        return request

    @classmethod
    def from_scp_arguments(cls, arguments: list[str]):
        """Converts scp arguments into a RunRequest

        The first argument is the program name. "-i" aborts the parsing since identity files
        can only be honored by the system scp, "-o" adds an option, other flags and empty arguments are skipped.
        The first positional argument is the source, the next one the destination.

        Args:
            arguments: The scp argument list

        Raises:
            HasIdentityFileError: If an identity file was given
            MissingFlagValueError: If "-o" is the last argument
            EmptyDestinationError: If no destination was found
            EmptySourceError: If no source was found
        """
        request = cls()

        argument_index = 1
        while argument_index < len(arguments):
            argument = arguments[argument_index]

            if argument == IDENTITY_FLAG:
                identity_file = arguments[argument_index + 1] if argument_index + 1 < len(arguments) else None
                raise HasIdentityFileError(identity_file)
            if argument == OPTION_FLAG:
                request.options.append(flag_value(arguments, argument_index))
                argument_index += 2
                continue
            if argument == "" or argument.startswith("-"):
                argument_index += 1
                continue

            if not request.source:
                request.source = argument
            else:
                # Extra positional arguments replace the destination
                if request.destination:
                    logger.warning("Replacing scp destination %s with %s", request.destination, argument)
                request.destination = argument
            argument_index += 1

        if not request.destination:
            raise EmptyDestinationError()
        if not request.source:
            raise EmptySourceError()

        logger.info("Parsed scp arguments: %r", request)
        return request

    def rewrite(self, location: InstanceLocation, address: str | None = None):
        """Points the request at a resolved instance

        Args:
            location: The resolved instance
            address: The address being replaced, defaults to the destination's address
        """
        if address is None:
            address = self.address
        self.destination = replace_address(self.destination, address, location.name)
        self.zone = location.zone
        self.project = location.project
