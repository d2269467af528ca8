"""Tests for the Qt list model over the grid."""

import pytest

pytest.importorskip("PySide6")

from PySide6.QtCore import Qt  # noqa: E402

from desktop_ui.qt_models.cell_model import CellModel  # noqa: E402
from gridcore.data_models import Cell  # noqa: E402


def test_rows_follow_grid_changes(grid, onyx):
    model = CellModel(grid, image_url=lambda gift, name: f"img://{gift}/{name}")
    assert model.rowCount() == 9

    grid.set_cell(0, 1, Cell(gift="Plush Pepe", model="Amalgam", backdrop=onyx))
    grid.add_row()

    assert model.rowCount() == 12
    index = model.index(1, 0)
    assert model.data(index, CellModel.GiftRole) == "Plush Pepe"
    assert model.data(index, CellModel.EdgeColorRole) == "#111111"
    assert model.data(index, CellModel.ModelImageRole) == "img://Plush Pepe/Amalgam"
    assert model.data(model.index(0, 0), CellModel.IsEmptyRole) is True
    assert model.data(model.index(0, 0), Qt.ItemDataRole.DisplayRole) == "Empty"


def test_detach_stops_updates(grid):
    model = CellModel(grid)
    model.detach()

    grid.add_row()

    assert model.rowCount() == 9
    assert b"gift" in [name.data() for name in model.roleNames().values()]
