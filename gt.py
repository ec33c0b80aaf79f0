#!/usr/bin/env python3
"""
tryout - Ephemeral workspace manager.

Run directly during development (`python gt.py [query]`); installs get the
`tryout` console script. Pair with `tryout init <shell>` so the `gt` shell
function can cd into the folder that gets printed.
"""

import sys

from tryout.app import main


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)
