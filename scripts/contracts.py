import os

from brownie import accounts, network, project

from .exceptions import ArtifactNotFoundError
from .settings import CHAINLINK_VRF, LOCAL_NETWORKS


def load_accounts():
    if network.show_active() in LOCAL_NETWORKS:
        return accounts[0]
    # see env.example
    private_key = os.getenv("PRIVATE_KEY")
    if private_key:
        return accounts.add(private_key)
    return accounts.load(os.getenv("DEPLOYER_ACCOUNT", "deployer"))


def get_container(name):
    for loaded in project.get_loaded_projects():
        containers = loaded.dict()
        if name in containers:
            return containers[name]
    raise ArtifactNotFoundError(
        f"{name} is not part of any loaded brownie project, run from the project root")


def publish():
    active = network.show_active()
    if active in LOCAL_NETWORKS:
        return False
    return CHAINLINK_VRF.get(active, {}).get("verify", False)
