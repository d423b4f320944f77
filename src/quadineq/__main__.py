import sys

from quadineq.cli import main

sys.exit(main())
