import sys

from candlescope.cli import main

sys.exit(main())
