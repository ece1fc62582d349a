import sys

from cmdblackjack.cli import main

sys.exit(main())
