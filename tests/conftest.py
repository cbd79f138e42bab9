import pytest

from android_fixtures import PNG_BYTES, make_project


@pytest.fixture
def rn_project(tmp_path):
    return make_project(tmp_path / "app")


@pytest.fixture
def splash_image(tmp_path):
    image = tmp_path / "splash.png"
    image.write_bytes(PNG_BYTES)
    return image
