import sys

from grocerylist.cli import main

sys.exit(main())
