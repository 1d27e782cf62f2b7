import sys

from turkicheck.cli import main

sys.exit(main())
