import sys

from qif_json.cli import main

sys.exit(main())
