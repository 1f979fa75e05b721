"""Error kinds raised by the signer and the uploader."""


class UploadToolError(Exception):
    """Base exception for every failure the CLI reports."""

    def __init__(self, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class CredentialsError(UploadToolError):
    """Raised when no credentials or configuration could be resolved."""
    pass


class SigningError(UploadToolError):
    """Raised when the presigned request cannot be built or signed."""
    pass


class FileAccessError(UploadToolError):
    """Raised when the local file cannot be opened or stat'd."""

    def __init__(self, message, path, details=None):
        super().__init__(message, details)
        self.path = path


class TransportError(UploadToolError):
    """Raised when the PUT request fails before a response arrives."""
    pass


class ResponseReadError(UploadToolError):
    """Raised when the response body cannot be read."""
    pass
