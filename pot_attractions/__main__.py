import sys

from pot_attractions.cli import main

sys.exit(main())
