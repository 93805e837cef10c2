import sys

from lambda_client.cli import main

sys.exit(main())
