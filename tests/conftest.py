import pytest

from tmpkit.app import TempSpace


@pytest.fixture
def space(tmp_path):
    return TempSpace(root=tmp_path / "root")
