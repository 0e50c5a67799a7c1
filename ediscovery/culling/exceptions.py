class CullingError(Exception):
    """Raised when the culling query cannot be evaluated against a document."""
