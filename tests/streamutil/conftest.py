import io
import pathlib

import pytest

from tests.streamutil.testing_utils import DATA


@pytest.fixture
def sample_file(tmp_path: pathlib.Path) -> pathlib.Path:
    """Return the path of a file containing ``DATA``."""
    path = tmp_path / "sample.bin"
    path.write_bytes(DATA)
    return path


@pytest.fixture
def memory_stream():
    stream = io.BytesIO(DATA)
    yield stream
    stream.close()
