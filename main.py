"""IR Learner - main entry point.

Run this file to start the app:
    python main.py [--url http://openhab.local:8080/broadlink]

Or as a module:
    python -m ir_learner
"""

import sys
from pathlib import Path

# Make src importable without installing
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

from ir_learner.app import main

if __name__ == "__main__":
    main()
