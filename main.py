"""
Planner entry point
 - Single responsibility: load configuration and the initial catalog
 - Imports and calls gridcore.planner.main()
 - Configuration errors are reported instead of raised
"""
import sys
from gridconfig import ConfigurationError
from gridcore.planner import main

if __name__ == "__main__":
    try:
        sys.exit(main())
    except ConfigurationError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)
