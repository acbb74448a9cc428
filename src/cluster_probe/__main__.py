import sys

from cluster_probe.cli import main

sys.exit(main())
