"""Enumeration definitions for the error interceptor."""

from enum import Enum


class Environment(str, Enum):
    """Deployment environment types."""

    LOCAL = "local"
    DEV = "dev"
    UAT = "uat"
    PREPROD = "preprod"
    PROD = "prod"

    @property
    def is_release(self) -> bool:
        """Whether diagnostic detail must be withheld from clients."""
        return self in (Environment.PREPROD, Environment.PROD)
