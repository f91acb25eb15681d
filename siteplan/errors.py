"""Exceptions raised by the siteplan package."""


class SiteplanError(Exception):
    """Base class for every failure surfaced to the caller."""


class ConfigError(SiteplanError):
    pass


class ConversionError(SiteplanError):
    """DWG -> DXF conversion failed (remote job, upload or download)."""


class DrawingParseError(SiteplanError):
    """The DXF could not be read or its entities could not be extracted."""


class MalformedEntityError(DrawingParseError):
    """An entity carried non-numeric, non-finite or negative geometry."""

    def __init__(self, message: str, handle: str = ""):
        super().__init__(message)
        self.handle = handle
