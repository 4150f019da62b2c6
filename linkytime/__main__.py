import sys

from linkytime.cli import main

sys.exit(main())
