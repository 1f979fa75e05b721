import sys

from s3uploader.cli import main

sys.exit(main())
