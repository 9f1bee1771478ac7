"""Test package initialisation.

The ``notifications`` and ``utils`` packages live one directory above this
package and are imported with absolute imports, the same way the application
imports them. Make sure the repository root is importable when the tests run
without an installed checkout.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))
