import sys

from win_printers.cli import main

if __name__ == "__main__":
    sys.exit(main())
