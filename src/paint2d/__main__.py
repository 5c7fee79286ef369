import sys

from paint2d.cli import main

sys.exit(main())
