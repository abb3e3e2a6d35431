import sys

from kmul.cli import main

sys.exit(main())
