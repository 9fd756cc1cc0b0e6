import sys

from archie.cli import main

sys.exit(main())
