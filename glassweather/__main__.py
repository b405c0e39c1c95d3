import sys

from glassweather.cli import main

sys.exit(main())
