"""
Resolve AWS credentials and presign S3 PUT requests.

Credentials come from the boto3 provider chain (or an injected session) and
are checked before any client is built. Presigning itself is local: the
returned URL carries a SigV4 signature that expires after PRESIGN_EXPIRES_IN
seconds unless told otherwise.
"""

import logging

import boto3
import botocore.config
from botocore.exceptions import BotoCoreError, ClientError

from s3uploader.errors import CredentialsError, SigningError

logger = logging.getLogger(__name__)

# Lifetime of a generated URL, in seconds
PRESIGN_EXPIRES_IN = 60


def resolve_credentials(session, profile=None):
    """Resolve credentials through the session's provider chain."""
    details = {"profile": profile or "default"}
    try:
        credentials = session.get_credentials()
    except BotoCoreError as e:
        raise CredentialsError(f"Error resolving AWS credentials: {e}", details) from e
    if credentials is None:
        raise CredentialsError(
            "Error resolving AWS credentials: no credentials found in the environment, "
            "shared config files or instance metadata",
            details,
        )
    logger.debug("Resolved credentials via %s", getattr(credentials, "method", "unknown"))
    return credentials


def build_s3_client(session=None, region=None, endpoint_url=None, profile=None):
    """Create an S3 client that signs with SigV4."""
    try:
        if session is None:
            session = boto3.session.Session(profile_name=profile, region_name=region)
        resolve_credentials(session, profile)

        # Query-string auth must be SigV4; a bare region maps to its regional S3 host
        config = botocore.config.Config(signature_version='s3v4')
        if region and not endpoint_url:
            endpoint_url = f'https://s3.{region}.amazonaws.com'
        return session.client('s3', region_name=region, endpoint_url=endpoint_url, config=config)
    except (BotoCoreError, ValueError) as e:
        raise CredentialsError(
            f"Error loading AWS configuration: {e}",
            {"profile": profile or "default", "region": region or "", "endpoint_url": endpoint_url or ""},
        ) from e


def generate_presigned_url(bucket, key, expires_in=PRESIGN_EXPIRES_IN, session=None,
                           region=None, endpoint_url=None, profile=None):
    """Generate a presigned PUT URL for (bucket, key)."""
    details = {"bucket": bucket or "", "key": key or ""}
    if not bucket:
        raise SigningError("Error generating presigned URL: bucket name is empty", details)
    if not key:
        raise SigningError("Error generating presigned URL: object key is empty", details)
    if isinstance(expires_in, bool) or not isinstance(expires_in, int) or expires_in <= 0:
        raise SigningError(
            f"Error generating presigned URL: expiry must be a positive number of seconds, got {expires_in!r}",
            details,
        )

    s3_client = build_s3_client(session=session, region=region, endpoint_url=endpoint_url, profile=profile)

    logger.info("Signing PUT for s3://%s/%s (expires in %ss)", bucket, key, expires_in)
    try:
        url = s3_client.generate_presigned_url(
            'put_object',
            Params={
                'Bucket': bucket,
                'Key': key
            },
            ExpiresIn=expires_in
        )
    except (BotoCoreError, ClientError) as e:
        raise SigningError(f"Error generating presigned URL: {e}", details) from e

    return url
