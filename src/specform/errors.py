"""Exception definitions for specform"""


class SpecformException(Exception):
    """Base exception for all specform errors.

    All custom exceptions in specform inherit from this class. Use this as a
    catch-all for specform-specific errors when you don't need to handle
    specific exception types.
    """

    pass


class SchemaException(SpecformException):
    """Raised when a connector schema document cannot be parsed at all.

    Use this exception when:
    - The root document is not a JSON object
    - The root document has no ``properties`` mapping
    - A schema file cannot be read or is not valid JSON

    Malformed nodes below the root never raise; they degrade gracefully.
    """

    pass


class ConfigException(SpecformException):
    """Raised when configuration validation or loading fails.

    Use this exception when:
    - The configuration file cannot be found
    - The TOML syntax is invalid
    - Configuration validation fails (invalid values, unknown log level)
    """

    pass
