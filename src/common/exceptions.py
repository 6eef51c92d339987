class TrafficMonitorError(Exception):
    """Base exception for all traffic monitor errors."""
    pass

class InvalidInputError(TrafficMonitorError):
    """Raised when caller-supplied input is rejected."""
    pass

class ConfigurationError(TrafficMonitorError):
    """Raised when configuration is invalid or incomplete."""
    pass

class DatasetError(TrafficMonitorError):
    """Raised when a static dataset cannot be read."""
    pass

class UpstreamError(TrafficMonitorError):
    """Raised when a third-party HTTP call fails."""
    pass

class RouteNotFoundError(UpstreamError):
    """Raised when the directions provider returns no usable route."""
    pass
