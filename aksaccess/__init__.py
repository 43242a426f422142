"""Identity and access-control posture lookups for AKS clusters."""

__version__ = "0.1.0"
