import sys

from elpris_optimizer.cli import main


if __name__ == "__main__":
    sys.exit(main())
