class FieldGenError(Exception):
    """
    Base exception for all field generation errors
    """
    pass


class ConfigError(FieldGenError):
    """
    Raised when generation configuration is missing or invalid
    """
    pass


class ColumnDefinitionError(FieldGenError):
    """
    Raised when an introspected column record is malformed
    """
    pass
