"""Allow running git-workdir-keeper with ``python -m git_workdir_keeper``."""

import sys

from git_workdir_keeper.cli.main import main

sys.exit(main())
