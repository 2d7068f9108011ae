"""Allow ``python -m dirkit``."""

from dirkit.ui.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
