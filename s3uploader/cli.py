#!/usr/bin/env python3
"""
Presign an S3 PUT URL and/or upload a local file to it.

    s3uploader --op url --bucket my-bucket --key reports/q1.csv
    s3uploader --op upload --url "<presigned url>" --file reports/q1.csv
    s3uploader --bucket my-bucket --key reports/q1.csv
"""

import argparse
import enum
import logging
import sys

from s3uploader.errors import UploadToolError
from s3uploader.signer import PRESIGN_EXPIRES_IN, generate_presigned_url
from s3uploader.uploader import upload_file

logger = logging.getLogger(__name__)


class Operation(enum.Enum):
    GENERATE_URL = "url"
    UPLOAD = "upload"
    GENERATE_AND_UPLOAD = ""


def build_parser():
    parser = argparse.ArgumentParser(prog='s3uploader',
                                     description='Upload a file to S3 through a presigned PUT URL')
    parser.add_argument('-op', '--op', default='', choices=[op.value for op in Operation],
                        metavar='{url,upload}',
                        help='Operation: url (presign only), upload (PUT to --url), '
                             'or omit to presign and upload')
    parser.add_argument('-bucket', '--bucket', default='', help='S3 bucket name')
    parser.add_argument('-key', '--key', default='', help='S3 object key')
    parser.add_argument('-url', '--url', default='', help='Presigned URL to upload to (upload mode)')
    parser.add_argument('-file', '--file', default='',
                        help='Local file to upload (default: same as --key)')
    parser.add_argument('--region', help='AWS region (default: from the AWS config chain)')
    parser.add_argument('--profile', help='AWS named profile')
    parser.add_argument('--endpoint-url', help='Override the S3 endpoint')
    parser.add_argument('--expires-in', type=int, default=PRESIGN_EXPIRES_IN,
                        help=f'URL expiration in seconds (default: {PRESIGN_EXPIRES_IN})')
    parser.add_argument('--debug', default=False, action='store_true', help='Turn on debugging')
    return parser


def configure_logging(debug=False):
    logging.basicConfig(format="%(asctime)s [%(name)s:%(levelname)s]: %(message)s",
                        level=logging.DEBUG if debug else logging.INFO,
                        stream=sys.stderr)
    if not debug:
        for name in ('boto3', 'botocore', 'urllib3'):
            logging.getLogger(name).setLevel(logging.WARNING)


def _presign(args):
    return generate_presigned_url(
        args.bucket,
        args.key,
        expires_in=args.expires_in,
        region=args.region,
        endpoint_url=args.endpoint_url,
        profile=args.profile,
    )


def run(op, args, out=None):
    """Execute op and write its result to out."""
    out = out or sys.stdout
    file_path = args.file or args.key

    if op is Operation.GENERATE_URL:
        print(_presign(args), file=out)
    elif op is Operation.UPLOAD:
        result = upload_file(file_path, args.url)
        print(result.body, file=out)
    elif op is Operation.GENERATE_AND_UPLOAD:
        url = _presign(args)
        result = upload_file(file_path, url)
        print(result.body, file=out)
    else:
        raise ValueError(f"Unhandled operation: {op!r}")


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)
    op = Operation(args.op)

    try:
        run(op, args)
    except UploadToolError as e:
        logger.debug("Operation %r failed", op.value, exc_info=True)
        print(e, file=sys.stdout)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
