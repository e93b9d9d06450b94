class BikeSpaceError(Exception):
    """Base exception for all bikespace_dashboard errors"""
    pass

class InvalidArgumentError(BikeSpaceError, TypeError):
    """A filter or filter mapping was built from a value of the wrong shape"""
    pass

class DuplicateComponentError(BikeSpaceError, ValueError):
    """Two components resolved to the same registry key"""
    pass

class ReportSchemaError(BikeSpaceError):
    """
    A raw submission doesn't match the Report shape
    missing fields, unparseable parking_time, non-numeric coordinates, etc
    """
    pass

class ConfigError(BikeSpaceError):
    """Invalid or inconsistent global.json"""
    pass

class AnalyticsUnavailableError(BikeSpaceError):
    """No analytics backend is active"""
    pass
