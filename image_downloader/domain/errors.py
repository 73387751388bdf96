"""Error taxonomy for a download run. Every error here is fatal to the run."""


class DownloaderError(Exception):
    """Base class for errors that abort a download run"""
    pass


class TransportError(DownloaderError):
    """Raised when a page of messages cannot be fetched or decoded"""
    pass


class PersistError(DownloaderError):
    """Raised when an attachment cannot be downloaded or written to disk"""
    pass
