import sys

from dodge_game.main import main

sys.exit(main())
