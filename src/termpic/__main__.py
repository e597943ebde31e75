import sys

from termpic.cli import main

sys.exit(main())
