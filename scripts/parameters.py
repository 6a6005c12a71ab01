from dataclasses import dataclass

from brownie.convert import to_address
from hexbytes import HexBytes

from .exceptions import InvalidParameterError, UnsupportedNetworkError
from .settings import CHAINLINK_VRF


@dataclass(frozen=True)
class DeploymentParameters:
    """Constructor arguments for RandomNumberConsumer.

    Values are kept exactly as given; checks only reject malformed input.
    """

    vrf_coordinator: str
    link_token: str
    key_hash: str
    fee: int

    def __post_init__(self):
        for field in ("vrf_coordinator", "link_token"):
            value = getattr(self, field)
            try:
                to_address(value)
            except (ValueError, TypeError) as e:
                raise InvalidParameterError(f"{field}: invalid address {value!r}") from e

        try:
            key_hash = HexBytes(self.key_hash)
        except (ValueError, TypeError) as e:
            raise InvalidParameterError(f"key_hash: not hex {self.key_hash!r}") from e
        if len(key_hash) != 32:
            raise InvalidParameterError(
                f"key_hash: expected 32 bytes, got {len(key_hash)}")

        # bool is an int subclass and float would lose precision
        if isinstance(self.fee, bool) or not isinstance(self.fee, int):
            raise InvalidParameterError(
                f"fee: expected an integer amount, got {type(self.fee).__name__}")
        if self.fee < 0:
            raise InvalidParameterError(f"fee: must not be negative, got {self.fee}")

    def constructor_args(self):
        return (self.vrf_coordinator, self.link_token, self.key_hash, self.fee)

    @classmethod
    def for_network(cls, network_name):
        try:
            vrf = CHAINLINK_VRF[network_name]
        except KeyError:
            raise UnsupportedNetworkError(
                f"No Chainlink VRF configuration for network {network_name!r}") from None

        return cls(
            vrf_coordinator=vrf["vrf_coordinator"],
            link_token=vrf["link_token"],
            key_hash=vrf["key_hash"],
            fee=vrf["fee"],
        )
