import sys

from exprcheck.cli import main

sys.exit(main())
