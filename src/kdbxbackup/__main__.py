import sys

from kdbxbackup.cli import main

sys.exit(main())
