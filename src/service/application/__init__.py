from .builder import BackendApplicationBuilder, BackendServices

__all__ = ["BackendApplicationBuilder", "BackendServices"]
