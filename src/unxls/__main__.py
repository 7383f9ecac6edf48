import sys

from unxls.ls import main

sys.exit(main())
