import os
import sys

from testtools import run

import blueprint_resolver.tests


def main():
    tests_dir = blueprint_resolver.tests.__path__[0]
    top_dir = os.path.dirname(os.path.dirname(tests_dir))
    run.main([sys.argv[0], 'discover', '-t', top_dir, '-s', tests_dir] +
             sys.argv[1:], sys.stdout)


if __name__ == "__main__":
    main()
