class MissingManifestAttributeError(KeyError):
    """Raised when a manifest attribute is read but not present."""
