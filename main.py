"""Entry point for gcloud-ssh, point ansible's ssh and scp executables at this script"""

# Project libraries
from gcloud_ssh.main import ssh_main

if __name__ == "__main__":
    ssh_main()
