"""Allow ``python -m buoyview``."""

from buoyview.cli.main import main

if __name__ == "__main__":
    main()
