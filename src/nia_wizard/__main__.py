import sys

from nia_wizard.cli import main

sys.exit(main())
