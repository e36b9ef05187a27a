import sys

from src.cli_install import main

if __name__ == "__main__":
    sys.exit(main())
