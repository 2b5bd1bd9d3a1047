"""
graphgrow - moderngl-window launcher

Press Enter to grow the graph by one node, Escape or close the window to quit.
"""

import sys

from graphgrow.app import main


if __name__ == "__main__":
    sys.exit(main())
