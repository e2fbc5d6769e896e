import sys

from wutbot.launcher import main

sys.exit(main())
