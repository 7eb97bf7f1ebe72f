"""This allows calling the dogma cli via ``python -m``

>>> python -m dogma run ATGGGGTAA --steps

Note that we try to behave just like running ``dogma`` from the command
line, rewriting argv[0] and setting the click program name.
"""

import sys
from dogma.cli import main

if __name__ == "__main__":
    sys.argv[0] = "dogma"
    sys.exit(main(prog_name="dogma"))
