import pytest
from _pytest.nodes import Item

LAYER_MARKERS = {"web": pytest.mark.api, "cli": pytest.mark.cli}


def pytest_collection_modifyitems(items: list[Item]) -> None:
    """Marks each test by its suite and by the layer it exercises.

    Everything under `units` is a unit test; tests of the REST API and of the
    command line also get `api` and `cli`, so `-m "not api"` skips the
    slower TestClient-based suite.

    Args:
        items: A list of test items collected by pytest.
    """
    for item in items:
        parts = item.path.parts
        if "units" in parts:
            item.add_marker(pytest.mark.unit)
        for layer, marker in LAYER_MARKERS.items():
            if layer in parts:
                item.add_marker(marker)
