import sys

from wordscramble.main import main

sys.exit(main())
