"""Loads the configuration from the environment"""

# Standard libraries
import os
from typing import Callable, Mapping, Optional

# Third-party libraries
from attrs import define, field, validators

# Project libraries
from gcloud_ssh.default import (
    DEFAULT_GCLOUD_EXECUTABLE,
    DEFAULT_LOG_FILE,
    DEFAULT_SYSTEM_SCP_EXECUTABLE,
    ENV_DO_SCP,
    ENV_GCLOUD_EXECUTABLE,
    ENV_LOG_FILE,
    ENV_PROJECTS,
    ENV_SYSTEM_SCP_EXECUTABLE,
    ENV_ZONES,
    FALSE_STRINGS,
    TRUE_STRINGS,
)
from gcloud_ssh.errors import ConfigurationError
from gcloud_ssh.resolver import SearchSpace

str_list_validator = validators.deep_iterable(
    member_validator=validators.instance_of(str), iterable_validator=validators.instance_of(tuple)
)


def parse_bool(value: str, name: str) -> bool:
    """Parses a boolean environment variable

    Raises:
        ConfigurationError: If the value is not a boolean
    """
    normalized = value.strip().lower()
    if normalized in TRUE_STRINGS:
        return True
    if normalized in FALSE_STRINGS:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")


def parse_list(value: Optional[str]) -> list[str]:
    """Splits a comma separated environment variable, empty entries are dropped"""
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def log_file_from_environment(environ: Optional[Mapping[str, str]] = None) -> str:
    """Returns the log file path, it is needed before the rest of the configuration is loaded"""
    if environ is None:
        environ = os.environ
    return environ.get(ENV_LOG_FILE) or DEFAULT_LOG_FILE


@define(frozen=True)
class Config:
    """Configuration of a single invocation"""

    do_scp: bool = field(default=False, validator=validators.instance_of(bool))
    projects: tuple[str, ...] = field(factory=tuple, converter=tuple, validator=str_list_validator)
    zones: tuple[str, ...] = field(factory=tuple, converter=tuple, validator=str_list_validator)
    gcloud_executable: str = field(default=DEFAULT_GCLOUD_EXECUTABLE, validator=validators.instance_of(str))
    system_scp_executable: str = field(default=DEFAULT_SYSTEM_SCP_EXECUTABLE, validator=validators.instance_of(str))

    @property
    def search_space(self) -> SearchSpace:
        return SearchSpace.from_lists(projects=list(self.projects), zones=list(self.zones))

    @classmethod
    def from_environment(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        default_project: Optional[Callable[[], Optional[str]]] = None,
        do_scp: Optional[bool] = None,
    ):
        """Creates a Config from environment variables

        Args:
            environ: The environment, defaults to os.environ
            default_project: Returns the project to search when none is configured
            do_scp: Forces the scp or ssh mode, DO_SCP is not read when given

        Raises:
            ConfigurationError: If a variable is invalid or no project can be determined
        """
        if environ is None:
            environ = os.environ

        projects = parse_list(environ.get(ENV_PROJECTS))
        if len(projects) == 0 and default_project is not None:
            project = default_project()
            if project:
                projects.append(project)
        if len(projects) == 0:
            raise ConfigurationError(f"No project configured, set {ENV_PROJECTS} or the default credentials project")

        if do_scp is None:
            do_scp = parse_bool(environ.get(ENV_DO_SCP, "false"), ENV_DO_SCP)

        return cls(
            do_scp=do_scp,
            projects=projects,
            zones=parse_list(environ.get(ENV_ZONES)),
            gcloud_executable=environ.get(ENV_GCLOUD_EXECUTABLE) or DEFAULT_GCLOUD_EXECUTABLE,
            system_scp_executable=environ.get(ENV_SYSTEM_SCP_EXECUTABLE) or DEFAULT_SYSTEM_SCP_EXECUTABLE,
        )
