"""Allow ``python -m appsui``."""

from appsui.cli.main import main

raise SystemExit(main())
