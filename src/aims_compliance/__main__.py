import sys

from aims_compliance.cli import main

sys.exit(main())
