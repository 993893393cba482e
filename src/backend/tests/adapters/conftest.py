import os
import sys


# Ensure `src/backend` is on sys.path so imports like `import adapters...` work when running this folder alone.
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), "../.."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from datetime import date
from pathlib import Path

import pytest


FIXTURES = Path(__file__).parent / "fixtures" / "scorecard"


@pytest.fixture
def today() -> date:
    return date(2026, 10, 19)


@pytest.fixture
def load_scorecard():
    def _load(name: str) -> str:
        return (FIXTURES / name).read_text(encoding="utf-8")

    return _load
