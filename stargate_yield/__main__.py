"""Allow running the package as a module: python -m stargate_yield"""

import sys

from stargate_yield.cli import main

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
