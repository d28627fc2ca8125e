import sys
from pathlib import Path

# Put 'src' on sys.path so tests can import mri_coordinates without
# installing the package.
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / 'src'))
