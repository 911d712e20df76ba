class InvalidBucketsError(ValueError):
    """Raised when a bucket mapping lacks the shape an operation requires."""
