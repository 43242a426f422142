"""Error taxonomy for AKS access lookups."""


class AKSSupportError(Exception):
    """Base exception for access posture lookups"""


class CredentialError(AKSSupportError):
    """An Azure credential could not be obtained"""


class ClientConstructionError(AKSSupportError):
    """An Azure or Kubernetes client could not be built"""


class ConfigMissingError(AKSSupportError):
    """A required environment variable is not set"""

    def __init__(self, variable: str, what: str):
        self.variable = variable
        super().__init__(
            f"error retrieving azure {what}: environment variable {variable} not set"
        )


class PageFetchError(AKSSupportError):
    """Advancing a paged Azure listing failed"""


class RoleDefinitionLookupError(AKSSupportError):
    """Resolving a role definition by id failed"""


class NotFoundError(AKSSupportError):
    """The requested Azure resource does not exist"""


class APIError(AKSSupportError):
    """The Azure API rejected or failed a request"""


class NoBindingsFoundError(AKSSupportError):
    """Listing Kubernetes role bindings failed"""

    def __init__(self, message: str, tier: str):
        self.tier = tier
        super().__init__(message)
