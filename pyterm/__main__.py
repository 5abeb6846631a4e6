import sys

from pyterm.main import main

sys.exit(main())
