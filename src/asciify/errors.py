class AsciifyError(Exception):
    """Base class for conversion failures that are not plain OS errors."""


class DecodeError(AsciifyError):
    """The input is not a supported image, or its data is corrupt."""


class EncodeError(AsciifyError):
    """The rendered canvas could not be encoded as PNG."""
