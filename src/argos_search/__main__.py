import sys

from argos_search.cli import main

sys.exit(main())
