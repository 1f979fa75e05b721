"""
Upload a local file to S3 through a short-lived presigned PUT URL.
"""

__version__ = "1.0.0"

from s3uploader.errors import (
    CredentialsError,
    FileAccessError,
    ResponseReadError,
    SigningError,
    TransportError,
    UploadToolError,
)
from s3uploader.signer import PRESIGN_EXPIRES_IN, generate_presigned_url
from s3uploader.uploader import UploadResult, upload_file

__all__ = [
    "PRESIGN_EXPIRES_IN",
    "generate_presigned_url",
    "upload_file",
    "UploadResult",
    "UploadToolError",
    "CredentialsError",
    "SigningError",
    "FileAccessError",
    "TransportError",
    "ResponseReadError",
    "__version__",
]
