import sys

from random_gradient.cli import main

sys.exit(main())
