"""Allow ``python -m cd_engine``."""

from cd_engine.cli import main

if __name__ == "__main__":
    main()
