""" python3 -m flexvolume <operation> [args...] """

import sys
from flexvolume.logvolume import run_plugin

sys.exit(run_plugin())
