class SaleCycleError(RuntimeError):
    pass

class InvalidArgument(SaleCycleError, ValueError):
    """Bad input to a store operation or setter (blank name, negative quantity...)."""

class ConfigurationError(SaleCycleError):
    """Render cannot produce a tag: a mandatory field is missing."""
