"""Errors raised while deploying the RandomNumberConsumer contract."""


class DeploymentError(Exception):
    """Base exception for deployment errors."""

    pass


class DeploymentFailure(DeploymentError):
    """Raised when the contract-creation transaction could not be completed."""

    pass


class UnsupportedNetworkError(DeploymentError, KeyError):
    """Raised when there is no VRF configuration for the active network."""

    pass


class ArtifactNotFoundError(DeploymentError, LookupError):
    """Raised when the contract container is not in any loaded project."""

    pass


class InvalidParameterError(DeploymentError, ValueError):
    """Raised when a constructor argument is malformed."""

    pass


class VerificationError(DeploymentError):
    """Raised when a mined contract could not be verified on the block explorer.

    The deployed contract is kept on ``contract``; it must not be redeployed.
    """

    def __init__(self, message, contract):
        super().__init__(message)
        self.contract = contract
