"""Allow ``python -m montana_counties``."""

from .cli import main

raise SystemExit(main())
