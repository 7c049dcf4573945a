import sys

from deadline_slots.cli import main

sys.exit(main())
