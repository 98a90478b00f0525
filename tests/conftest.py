from __future__ import annotations

from typing import Iterator

import pytest

from typedconf import reset_global


@pytest.fixture(autouse=True)
def _isolated_global_settings() -> Iterator[None]:
    reset_global()
    yield
    reset_global()
