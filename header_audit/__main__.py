import sys

from header_audit.cli import main

if __name__ == "__main__":
    sys.exit(main())
