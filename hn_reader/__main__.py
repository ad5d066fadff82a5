import sys

from hn_reader.cli import main

sys.exit(main())
