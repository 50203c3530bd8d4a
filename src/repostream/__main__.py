import sys

from repostream.cli import main

sys.exit(main())
