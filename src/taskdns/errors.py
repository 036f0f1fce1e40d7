"""Domain errors for taskdns."""


class SyncError(RuntimeError):
    """Raised when a synchronization run cannot continue."""


class ConfigurationError(SyncError):
    """Required cluster or zone identifiers are missing."""


class UpstreamFetchError(SyncError):
    """Listing tasks or records failed."""


class UpstreamApplyError(SyncError):
    """The Route 53 change batch was rejected or could not be sent."""
