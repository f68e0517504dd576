import sys
from pathlib import Path

# Allow running the suite without installing the package
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))
