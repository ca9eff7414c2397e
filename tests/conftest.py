from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from sample_documents import HOTELS_XSD


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, str], str]:
    def _write(name: str, content: str) -> str:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


@pytest.fixture
def xsd_location(write_file) -> str:
    return write_file("Hotels.xsd", HOTELS_XSD)
