import sys

from articlesum.cli import main

sys.exit(main())
