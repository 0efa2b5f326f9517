"""Tests translating and running whole invocations"""

# Standard libraries
import subprocess

# Third-party libraries
import pytest
from google.api_core.exceptions import ServiceUnavailable
from google.auth.exceptions import DefaultCredentialsError

# Project libraries
from gcloud_ssh.config import Config
from gcloud_ssh.errors import EmptyCommandError, InstanceNotFoundError
from gcloud_ssh.main import main, parse_and_run
from gcloud_ssh.tokenizer import tokenize

SSH_CONFIG = Config(do_scp=False, projects=["infra"], zones=["us-central1-a"])
SCP_CONFIG = Config(do_scp=True, projects=["infra"], zones=["us-central1-a"])


def unused_inventory():
    raise AssertionError("the inventory must not be queried")


@pytest.fixture
def inventory(fake_inventory, make_instance):
    return fake_inventory(instances={("infra", "us-central1-a"): [make_instance("host-42", "172.16.0.11")]})


def test_ssh_invocation(inventory, runner):
    arguments = tokenize("ssh -o ControlMaster=auto 172.16.0.11 /bin/sh -c 'echo ~ && sleep 0'")

    assert parse_and_run(SSH_CONFIG, arguments, inventory_factory=lambda: inventory, runner=runner) == 0
    assert runner.commands == [
        [
            "gcloud",
            "compute",
            "ssh",
            "--quiet",
            "--tunnel-through-iap",
            "--project",
            "infra",
            "--zone",
            "us-central1-a",
            "host-42",
            "--command",
            "echo ~ && sleep 0",
        ]
    ]


def test_scp_invocation(inventory, runner):
    arguments = ["scp", "-C", "-o", "ControlMaster=auto", "/tmp/AnsiballZ_setup.py", "[172.16.0.11]:/home/x/setup.py"]

    assert parse_and_run(SCP_CONFIG, arguments, inventory_factory=lambda: inventory, runner=runner) == 0
    assert runner.commands == [
        [
            "gcloud",
            "compute",
            "scp",
            "--quiet",
            "--tunnel-through-iap",
            "--project",
            "infra",
            "--zone",
            "us-central1-a",
            "/tmp/AnsiballZ_setup.py",
            "host-42:/home/x/setup.py",
        ]
    ]


def test_scp_identity_file_falls_back_to_system_scp(runner):
    arguments = tokenize("scp -i id_rsa src dst")

    assert parse_and_run(SCP_CONFIG, arguments, inventory_factory=unused_inventory, runner=runner) == 0
    assert runner.commands == [["system-scp", "-i", "id_rsa", "src", "dst"]]


def test_exit_status_is_propagated(inventory):
    def failing_runner(command):
        return 255

    arguments = ["ssh", "172.16.0.11", "false"]
    assert parse_and_run(SSH_CONFIG, arguments, inventory_factory=lambda: inventory, runner=failing_runner) == 255


def test_classification_errors_skip_resolution(runner):
    with pytest.raises(EmptyCommandError):
        parse_and_run(SSH_CONFIG, ["ssh", "172.16.0.11"], inventory_factory=unused_inventory, runner=runner)
    assert runner.commands == []


def test_unknown_address(inventory, runner):
    with pytest.raises(InstanceNotFoundError):
        parse_and_run(SSH_CONFIG, ["ssh", "10.9.9.9", "ls"], inventory_factory=lambda: inventory, runner=runner)
    assert runner.commands == []


def test_inventory_errors_propagate(fake_inventory, runner):
    inventory = fake_inventory(instances={("infra", "us-central1-a"): ServiceUnavailable("try again")})
    with pytest.raises(ServiceUnavailable):
        parse_and_run(SSH_CONFIG, ["ssh", "10.9.9.9", "ls"], inventory_factory=lambda: inventory, runner=runner)
    assert runner.commands == []


@pytest.fixture
def environment(monkeypatch, tmp_path):
    log_file = tmp_path / "gcloud-ssh.log"
    monkeypatch.setenv("GCLOUD_SSH_LOG", str(log_file))
    monkeypatch.setenv("GCLOUD_SSH_PROJECTS", "infra")
    monkeypatch.delenv("DO_SCP", raising=False)
    monkeypatch.delenv("GCLOUD_SSH_ZONES", raising=False)
    monkeypatch.delenv("GCLOUD_SSH_GCLOUD", raising=False)
    monkeypatch.delenv("GCLOUD_SSH_SYSTEM_SCP", raising=False)
    return log_file


def test_main_reports_fatal_errors(environment, capsys):
    assert main(["ssh"]) == 1
    assert "Empty destination" in capsys.readouterr().err
    assert "Empty destination" in environment.read_text(encoding="utf-8")


def test_main_reports_configuration_errors(environment, monkeypatch, capsys):
    monkeypatch.setenv("DO_SCP", "sometimes")
    assert main(["ssh", "10.0.0.1", "ls"]) == 1
    assert "DO_SCP" in capsys.readouterr().err


def test_main_scp_identity_file(environment, monkeypatch):
    calls = []

    def fake_run(command, check):
        calls.append(command)
        return subprocess.CompletedProcess(args=command, returncode=0)

    monkeypatch.setattr("gcloud_ssh.commands.subprocess.run", fake_run)

    assert main(["scp", "-i", "id_rsa", "src", "dst"], do_scp=True) == 0
    assert calls == [["system-scp", "-i", "id_rsa", "src", "dst"]]
    log = environment.read_text(encoding="utf-8")
    assert "Starting with zones: (), projects: ('infra',), doSCP: True" in log
    assert "Identity file id_rsa given, running system scp with args" in log


def test_main_forced_scp_ignores_do_scp(environment, monkeypatch):
    monkeypatch.setenv("DO_SCP", "sometimes")
    monkeypatch.setattr(
        "gcloud_ssh.commands.subprocess.run",
        lambda command, check: subprocess.CompletedProcess(args=command, returncode=0),
    )
    assert main(["scp", "-i", "id_rsa", "src", "dst"], do_scp=True) == 0


def test_main_reports_credential_errors(environment, monkeypatch, capsys):
    def missing_credentials(*args, **kwargs):
        raise DefaultCredentialsError("Could not automatically determine credentials")

    monkeypatch.delenv("GCLOUD_SSH_PROJECTS")
    monkeypatch.setattr("gcloud_ssh.main.default_credentials", missing_credentials)

    assert main(["ssh", "10.0.0.1", "ls"]) == 1
    assert "DefaultCredentialsError" in capsys.readouterr().err
    assert "Could not automatically determine credentials" in environment.read_text(encoding="utf-8")


def test_main_reports_inventory_errors(environment, monkeypatch, capsys, fake_inventory):
    inventory = fake_inventory(zones={"infra": ServiceUnavailable("zones unavailable")})
    monkeypatch.setattr("gcloud_ssh.main.ComputeInventory", lambda: inventory)

    assert main(["ssh", "10.0.0.1", "ls"]) == 1
    assert "ServiceUnavailable" in capsys.readouterr().err
    assert "zones unavailable" in environment.read_text(encoding="utf-8")
    assert inventory.calls == [("zones", "infra")]
