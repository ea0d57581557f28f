# targetinfo - compiler target triple decomposition
# Licensed under MIT

import sys

from targetinfo.cli import main

sys.exit(main())
