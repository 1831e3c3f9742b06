import sys

from parenpp.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
