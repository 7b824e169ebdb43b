import sys

from crudgen.cli import main

sys.exit(main())
