import sys

from device_monitor.run_monitor import main

sys.exit(main())
