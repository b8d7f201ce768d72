from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Logs go to PROTTER_HOME; keep test runs out of the user's home directory.
os.environ.setdefault("PROTTER_HOME", tempfile.mkdtemp(prefix="protter-tests-"))
