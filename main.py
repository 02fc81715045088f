# main.py - run the word counter from a source checkout
#   python main.py -a -frequency book.txt

import sys

from wordcount.cli import main

if __name__ == "__main__":
    sys.exit(main())
