import sys

from piglatin.app import main

sys.exit(main())
