from __future__ import annotations

import os

# Qt needs a platform plugin even for QObject/QTimer based tests; offscreen
# works without a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
