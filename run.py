"""
Launch Canvas Export from a source checkout (no install needed):

    python run.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from canvas_export.main import main

if __name__ == "__main__":
    sys.exit(main())
