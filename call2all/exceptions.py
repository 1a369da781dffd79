class Call2AllError(Exception):
    """Base class for exceptions in this module."""
    pass

class ConfigError(Call2AllError):
    """Exception raised for invalid client options."""
    pass

class StoreError(Call2AllError):
    """Exception raised when a persistent store cannot be read."""
    pass
