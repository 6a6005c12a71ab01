from brownie import network
from brownie.exceptions import TransactionError, VirtualMachineError

from .contracts import get_container, load_accounts, publish
from .exceptions import DeploymentFailure, VerificationError
from .parameters import DeploymentParameters
from .settings import CONTRACT_NAME


def deploy_randomness(container, params, deployer, publish_source=False):
    """Deploy one new RandomNumberConsumer instance.

    Every call submits its own creation transaction; failures are not retried.
    Source verification only starts once the contract is mined, so a failed
    verification raises VerificationError with the live contract attached.
    """
    try:
        random_number_consumer = container.deploy(
            *params.constructor_args(),
            {"from": deployer})
    except (VirtualMachineError, TransactionError, ValueError, OSError) as e:
        raise DeploymentFailure(
            f"{CONTRACT_NAME} deployment failed: {e}") from e

    print("Random Number Consumer: ", random_number_consumer.address)

    if publish_source:
        try:
            verified = container.publish_source(random_number_consumer)
        except (ValueError, OSError) as e:
            raise VerificationError(
                f"{CONTRACT_NAME} deployed at {random_number_consumer.address} "
                f"but source verification failed: {e}",
                random_number_consumer) from e
        if not verified:
            print(random_number_consumer.address, ": Source not verified")

    return random_number_consumer


def main():
    active = network.show_active()
    params = DeploymentParameters.for_network(active)
    deployer = load_accounts()
    print(f"Deploying {CONTRACT_NAME} on {active} from {deployer}")
    return deploy_randomness(
        get_container(CONTRACT_NAME), params, deployer, publish_source=publish())
