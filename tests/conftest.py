import os
import sys
from pathlib import Path

# Make src/ importable without installation and keep test logging off disk
PROJECT_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = PROJECT_ROOT / "src"
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

os.environ.setdefault(
    "GEDCOM_IMPORT_CONFIG",
    str(PROJECT_ROOT / "tests" / "data" / "gedcom_import_test.yml"),
)
