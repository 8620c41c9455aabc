"""Allow running the catalog with python -m patterncatalog."""
import sys

from patterncatalog.cli.main import main

sys.exit(main())
