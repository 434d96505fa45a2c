import sys

from alcoholometry.cli import main

sys.exit(main())
