from __future__ import annotations

import sys
from unittest.mock import patch

import colour.utilities
import pytest

from colour_ffcc.io import read_raw_BGR
from colour_ffcc.utilities.requirements import is_rawpy_installed


def test_rawpy_requirement_registered():
    requirements = colour.utilities.requirements.REQUIREMENTS_TO_CALLABLE

    assert requirements["rawpy"] is is_rawpy_installed


def test_rawpy_missing(tmp_path):
    """Test that a missing *rawpy* is reported with the install hint."""
    path = tmp_path / "IMG_0001.DNG"
    path.write_bytes(b"")

    with patch.dict(sys.modules, {"rawpy": None}):
        assert not is_rawpy_installed()

        with pytest.raises(ImportError, match=r"colour-ffcc\[raw\]"):
            is_rawpy_installed(raise_exception=True)

        with pytest.raises(ImportError):
            read_raw_BGR(path)


def test_rawpy_installed():
    pytest.importorskip("rawpy")

    assert is_rawpy_installed()
    assert is_rawpy_installed(raise_exception=True)
