"""
Send a local file to a presigned URL with a single HTTP PUT.
"""

import logging
import os
from dataclasses import dataclass

import requests

from s3uploader.errors import FileAccessError, ResponseReadError, TransportError

logger = logging.getLogger(__name__)


@dataclass
class UploadResult:
    status_code: int
    body: str


def upload_file(file_path, url):
    """PUT the contents of file_path to url and return the response.

    The file is opened before the URL is looked at, so a missing file is
    reported ahead of a missing or malformed URL. Any HTTP status counts as
    a completed upload; callers decide what a 4xx/5xx body means.
    """
    try:
        f = open(file_path, 'rb')
    except OSError as e:
        raise FileAccessError(f"Error opening {file_path}: {e}", path=file_path,
                              details={"path": file_path}) from e

    with f:
        try:
            size = os.fstat(f.fileno()).st_size
        except OSError as e:
            raise FileAccessError(f"Error reading size of {file_path}: {e}", path=file_path,
                                  details={"path": file_path}) from e

        if not url:
            raise TransportError(f"Error uploading {file_path}: no upload URL given",
                                 details={"path": file_path})

        # An empty stream would make requests fall back to chunked encoding
        data = f if size else b''
        headers = {'Content-Length': str(size)}

        logger.info("Uploading %s (%d bytes)", file_path, size)
        try:
            response = requests.put(url, data=data, headers=headers, stream=True)
        except requests.RequestException as e:
            raise TransportError(f"Error uploading {file_path}: {e}",
                                 details={"path": file_path, "size": str(size)}) from e

    with response:
        try:
            body = response.text
        except (requests.RequestException, OSError) as e:
            raise ResponseReadError(f"Error reading upload response: {e}",
                                    details={"path": file_path, "status": str(response.status_code)}) from e

    logger.info("Upload finished with HTTP %d", response.status_code)
    return UploadResult(status_code=response.status_code, body=body)
