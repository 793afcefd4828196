"""
Harvest integration errors.
"""
from typing import Optional


class HarvestError(Exception):
    """
    Base exception for Harvest integration failures.
    """


class HarvestConfigurationError(HarvestError):
    """
    Raised when Harvest credentials are not configured.
    """


class HarvestAPIError(HarvestError):
    """
    Raised when a Harvest request fails or returns an unusable payload.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
