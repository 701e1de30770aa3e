import sys

from brickbreak.main import main

sys.exit(main())
