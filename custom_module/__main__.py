import sys

from custom_module.cli import main

raise SystemExit(main(sys.argv[1:]))
