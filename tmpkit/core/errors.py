class TmpkitError(Exception):
    """Base class for errors raised by tmpkit itself."""


class ValidationError(TmpkitError, ValueError):
    """Options that conflict or are malformed. Raised before any I/O."""


class ConfigurationError(TmpkitError, AttributeError):
    """The temp root is read-only or unusable."""
