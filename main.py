# main.py - run AutoSuggest from a source checkout (installed: `autosuggest`)

import sys

from autosuggest.cli import main

if __name__ == "__main__":
    sys.exit(main())
