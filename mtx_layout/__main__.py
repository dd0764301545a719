import sys

from mtx_layout.cli import main

sys.exit(main())
