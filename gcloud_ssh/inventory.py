"""Defines the cloud inventory used to look up instances"""

# Standard libraries
import logging
from typing import Optional, Protocol

# Third-party libraries
import google.auth
from attrs import define, field, validators
from google.auth.credentials import Credentials
from google.cloud import compute_v1

# Project libraries
from gcloud_ssh.default import COMPUTE_SCOPE, RUNNING_FILTER

logger = logging.getLogger(__name__)


@define(frozen=True)
class InstanceRecord:
    """A running instance and the internal IPs of its network interfaces"""

    name: str = field(validator=validators.instance_of(str))
    network_ips: tuple[str, ...] = field(
        factory=tuple,
        converter=tuple,
        validator=validators.deep_iterable(
            member_validator=validators.instance_of(str), iterable_validator=validators.instance_of(tuple)
        ),
    )

    @classmethod
    def from_instance(cls, instance: compute_v1.Instance):
        """Creates an InstanceRecord from a Compute Engine instance

        Args:
            instance: The Compute Engine instance
        """
        return cls(
            name=instance.name,
            network_ips=[interface.network_i_p for interface in instance.network_interfaces],
        )


class Inventory(Protocol):
    """Queries needed to find an instance by its internal IP"""

    def list_zones(self, project: str) -> list[str]: ...

    def list_running_instances(self, project: str, zone: str) -> list[InstanceRecord]: ...


def default_credentials() -> tuple[Credentials, Optional[str]]:
    """Returns the application default credentials and their project

    Raises:
        google.auth.exceptions.DefaultCredentialsError: If no credentials can be found
    """
    return google.auth.default(scopes=[COMPUTE_SCOPE])


class ComputeInventory:
    """Inventory backed by the Compute Engine API"""

    def __init__(self, credentials: Optional[Credentials] = None):
        if credentials is None:
            credentials, _ = default_credentials()
        self.zones_client = compute_v1.ZonesClient(credentials=credentials)
        self.instances_client = compute_v1.InstancesClient(credentials=credentials)

    def list_zones(self, project: str) -> list[str]:
        zones = [zone.name for zone in self.zones_client.list(project=project)]
        logger.info("Listed %d zones for project %s", len(zones), project)
        return zones

    def list_running_instances(self, project: str, zone: str) -> list[InstanceRecord]:
        instances = self.instances_client.list(
            request=compute_v1.ListInstancesRequest(
                project=project,
                zone=zone,
                filter=RUNNING_FILTER,
            )
        )
        return [InstanceRecord.from_instance(instance) for instance in instances]
