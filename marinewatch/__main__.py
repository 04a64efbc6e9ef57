import sys

from marinewatch.cli import main

sys.exit(main())
