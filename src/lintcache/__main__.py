"""Allow ``python -m lintcache``."""

from lintcache.cli.main import main

raise SystemExit(main())
