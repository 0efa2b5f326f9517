"""Finds the instance owning an internal IP"""

# Standard libraries
import logging

# Third-party libraries
from attrs import define, field, validators

# Project libraries
from gcloud_ssh.errors import InstanceNotFoundError
from gcloud_ssh.inventory import Inventory
from gcloud_ssh.run_request import InstanceLocation, RunRequest

logger = logging.getLogger(__name__)


@define(frozen=True)
class ProjectZones:
    """A project and the zones to search in it, no zones means every zone of the project"""

    project: str = field(validator=validators.instance_of(str))
    zones: tuple[str, ...] = field(
        factory=tuple,
        converter=tuple,
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(str), iterable_validator=validators.instance_of(tuple)
        ),
    )


@define(frozen=True)
class SearchSpace:
    """The ordered projects and zones an instance is searched in"""

    projects: tuple[ProjectZones, ...] = field(
        factory=tuple,
        converter=tuple,
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(ProjectZones), iterable_validator=validators.instance_of(tuple)
        ),
    )

    @classmethod
    def from_lists(cls, projects: list[str], zones: list[str]):
        """Creates a SearchSpace where every project is searched in the same zones

        Args:
            projects: The ordered projects
            zones: The zones of every project, empty to search all zones
        """
        return cls(projects=[ProjectZones(project=project, zones=zones) for project in projects])


def find_instance(inventory: Inventory, search_space: SearchSpace, address: str) -> InstanceLocation:
    """Finds the running instance with a network interface using an address

    Projects and zones are searched in order and the first match wins. Projects without
    zones are searched in every zone the inventory lists for them.

    Args:
        inventory: The inventory to query
        search_space: The projects and zones to search
        address: The internal IP to look for

    Raises:
        InstanceNotFoundError: If no instance uses the address
        Exception: Any inventory error is propagated unchanged

    Returns:
        The location of the instance
    """
    for project_zones in search_space.projects:
        zones = list(project_zones.zones)
        if len(zones) == 0:
            zones = inventory.list_zones(project_zones.project)

        for zone in zones:
            for instance in inventory.list_running_instances(project_zones.project, zone):
                for network_ip in instance.network_ips:
                    if network_ip != address:
                        continue
                    logger.info("Found network IP: %s in zone: %s with name: %s", address, zone, instance.name)
                    return InstanceLocation(name=instance.name, zone=zone, project=project_zones.project)

    raise InstanceNotFoundError(address)


def resolve_request(inventory: Inventory, search_space: SearchSpace, request: RunRequest) -> InstanceLocation:
    """Resolves the request's destination and rewrites the request to use the instance name

    The request is left untouched if the resolution fails.

    Args:
        inventory: The inventory to query
        search_space: The projects and zones to search
        request: The request to rewrite

    Returns:
        The location of the instance
    """
    address = request.address
    location = find_instance(inventory=inventory, search_space=search_space, address=address)
    request.rewrite(location, address=address)
    return location
