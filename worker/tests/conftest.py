import sys
from pathlib import Path

# Make the `src` package importable when pytest runs from the repository root.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
