import sys
from txtnotes.cli import main

sys.exit(main())
