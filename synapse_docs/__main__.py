import sys

from synapse_docs.cli import main

sys.exit(main())
