import sys

from quoridor_fences.scripts.count_fences import main


if __name__ == '__main__':
    sys.exit(main())
