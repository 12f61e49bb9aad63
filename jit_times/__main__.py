import sys

from jit_times.cli import main

if __name__ == "__main__":
    sys.exit(main())
