"""Shared fakes for the inventory and the command runner"""

# Third-party libraries
import pytest

# Project libraries
from gcloud_ssh.inventory import InstanceRecord


class FakeInventory:
    """Inventory serving canned zones and instances and recording every query"""

    def __init__(self, zones=None, instances=None):
        self.zones = zones or {}
        self.instances = instances or {}
        self.calls = []

    def list_zones(self, project):
        self.calls.append(("zones", project))
        zones = self.zones.get(project, [])
        if isinstance(zones, Exception):
            raise zones
        return list(zones)

    def list_running_instances(self, project, zone):
        self.calls.append(("instances", project, zone))
        instances = self.instances.get((project, zone), [])
        if isinstance(instances, Exception):
            raise instances
        return list(instances)


class RecordingRunner:
    """Runner recording the commands instead of running them"""

    def __init__(self, returncode=0):
        self.returncode = returncode
        self.commands = []

    def __call__(self, command):
        self.commands.append(command)
        return self.returncode


def instance(name, *network_ips):
    return InstanceRecord(name=name, network_ips=list(network_ips))


@pytest.fixture
def fake_inventory():
    return FakeInventory


@pytest.fixture
def make_instance():
    return instance


@pytest.fixture
def runner():
    return RecordingRunner()
