#!/usr/bin/env python3
"""
bare2gitea - Migrate local bare git repositories into a Gitea instance.

The tool walks a directory laid out as <path>/<org>/<repo>.git, makes sure
each organization exists on the Gitea server (creating it when missing) and
asks Gitea to migrate every repository that is not already there. Gitea
clones the repository from the given path itself, so the path has to be
readable by the Gitea server.

License: MIT
"""

from __future__ import annotations

import sys
from typing import List, NoReturn, Optional

from argument_parser import parse_arguments
from migration_orchestrator import MigrationOrchestrator


def main(argv: Optional[List[str]] = None) -> NoReturn:
    cfg = parse_arguments(argv)
    orchestrator = MigrationOrchestrator(cfg)
    sys.exit(orchestrator.run())


if __name__ == "__main__":
    main()
