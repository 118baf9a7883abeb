import sys

from line_search.cli import main


sys.exit(main())
