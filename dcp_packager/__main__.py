"""Package entry point for ``python -m dcp_packager``."""

from dcp_packager.cli import main

if __name__ == "__main__":
    main()
