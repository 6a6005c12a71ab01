import itertools

import pytest

from scripts.parameters import DeploymentParameters


class FakeContract:
    def __init__(self, address, args, tx):
        self.address = address
        self.args = args
        self.tx = tx


class FakeContainer:
    """Stands in for brownie's ContractContainer and records every deploy."""

    def __init__(self, error=None, verify_error=None, verified=True):
        self.error = error
        self.verify_error = verify_error
        self.verified = verified
        self.calls = []
        self.deployed = []
        self.published = []
        self._addresses = (f"0x{n:040x}" for n in itertools.count(1))

    def deploy(self, *args):
        self.calls.append(args)
        if self.error is not None:
            raise self.error
        *constructor_args, tx = args
        contract = FakeContract(next(self._addresses), tuple(constructor_args), tx)
        self.deployed.append(contract)
        return contract

    def publish_source(self, contract):
        self.published.append(contract)
        if self.verify_error is not None:
            raise self.verify_error
        return self.verified


@pytest.fixture
def container():
    return FakeContainer()


@pytest.fixture
def params():
    return DeploymentParameters.for_network("polygon-main")


@pytest.fixture
def deployer():
    return "0x66aB6D9362d4F35596279692F0251Db635165871"
