"""Allow ``python -m clap_orchestrator``."""

import sys

from clap_orchestrator.cli.commands import main

sys.exit(main())
