import sys

from docconversion.cli import main

sys.exit(main())
