from brownie import Wei

CONTRACT_NAME = "RandomNumberConsumer"

# accounts[0] is unlocked on these, no key or keystore needed
LOCAL_NETWORKS = [
    "development",
    "ganache",
    "ganache-local",
    "hardhat",
    "mainnet-fork",
    "polygon-main-fork",
]

# Chainlink VRF (v1) configuration, keyed by brownie network id
CHAINLINK_VRF = {
    "polygon-main": {
        "vrf_coordinator": "0x3d2341ADb2D31f1c5530cDC622016af293177AE0",
        "link_token": "0xb0897686c545045aFc77CF20eC7A532E3120E0F1",
        "key_hash": "0xf86195cf7690c55907b2b611ebb7343a6f649bff128701cc542f0569e2c549da",
        # 0.0001 LINK
        "fee": Wei("0.0001 ether"),
        "verify": True,
    },
}
