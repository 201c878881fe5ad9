class OdysseyError(Exception):
    """Base error for the home feed service."""


class StoreUnavailableError(OdysseyError):
    """The post store could not be read (transport failure or error status)."""


class StoreConfigurationError(OdysseyError):
    """The post store is selected but not configured."""
