"""Defines default values and constants"""

VERSION = "1.0.0"

# Environment variables
ENV_DO_SCP = "DO_SCP"
ENV_PROJECTS = "GCLOUD_SSH_PROJECTS"
ENV_ZONES = "GCLOUD_SSH_ZONES"
ENV_LOG_FILE = "GCLOUD_SSH_LOG"
ENV_GCLOUD_EXECUTABLE = "GCLOUD_SSH_GCLOUD"
ENV_SYSTEM_SCP_EXECUTABLE = "GCLOUD_SSH_SYSTEM_SCP"

# Defaults
DEFAULT_LOG_FILE = "/var/log/gcloud-ssh.log"
DEFAULT_GCLOUD_EXECUTABLE = "gcloud"
DEFAULT_SYSTEM_SCP_EXECUTABLE = "system-scp"

TRUE_STRINGS = ("1", "t", "true", "y", "yes", "on")
FALSE_STRINGS = ("0", "f", "false", "n", "no", "off", "")

# Compute Engine
COMPUTE_SCOPE = "https://www.googleapis.com/auth/compute"
RUNNING_FILTER = "(status = RUNNING)"

# Argument flags
COMMAND_FLAG = "-c"
OPTION_FLAG = "-o"
IDENTITY_FLAG = "-i"

# gcloud flags shared by ssh and scp
GCLOUD_TUNNEL_FLAGS = ("--quiet", "--tunnel-through-iap")
