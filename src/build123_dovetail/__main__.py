import sys

from build123_dovetail.cli import main

sys.exit(main())
