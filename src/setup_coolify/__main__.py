import sys

from setup_coolify.main import main

sys.exit(main())
