import sys

from uniquest.main import main

sys.exit(main())
