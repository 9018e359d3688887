import sys
from pathlib import Path

import pytest

# Ensure src/ is on path when the package is not installed
SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from inimanager import IniManager


SAMPLE_INI = """\
; global comment
orphan=dropped

[window]
width = 800
height=600 ; inline
title = "My App"

# another comment
[paths]
home=/home/user
"""


@pytest.fixture()
def sample_text() -> str:
    return SAMPLE_INI


@pytest.fixture()
def sample_file(tmp_path: Path) -> Path:
    p = tmp_path / "settings.ini"
    p.write_text(SAMPLE_INI, encoding="utf-8")
    return p


@pytest.fixture()
def manager(sample_text: str) -> IniManager:
    return IniManager(sample_text)
