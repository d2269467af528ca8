from typing import Any, Callable, Optional
from PySide6.QtCore import QAbstractListModel, QByteArray, QModelIndex, QPersistentModelIndex, Qt
from gridcore.data_models import Cell
from gridcore.grid_model import GridModel, GridSnapshot


class CellModel(QAbstractListModel):
    """Exposes grid cells in linear-index order to a QML GridView."""

    GiftRole = Qt.ItemDataRole.UserRole + 1
    ModelRole = Qt.ItemDataRole.UserRole + 2
    PatternRole = Qt.ItemDataRole.UserRole + 3
    BackdropNameRole = Qt.ItemDataRole.UserRole + 4
    EdgeColorRole = Qt.ItemDataRole.UserRole + 5
    CenterColorRole = Qt.ItemDataRole.UserRole + 6
    ModelImageRole = Qt.ItemDataRole.UserRole + 7
    IsEmptyRole = Qt.ItemDataRole.UserRole + 8

    def __init__(self, grid: GridModel, image_url: Optional[Callable[[str, str], str]] = None) -> None:
        super().__init__()
        self.grid = grid
        self.image_url = image_url
        self.cells = grid.cells()
        grid.register_callback(self._on_grid_changed)

    def _on_grid_changed(self, snapshot: GridSnapshot) -> None:
        self.beginResetModel()
        self.cells = [cell for row in snapshot for cell in row]
        self.endResetModel()

    def detach(self) -> None:
        self.grid.unregister_callback(self._on_grid_changed)

    def rowCount(self, parent: QModelIndex | QPersistentModelIndex = QModelIndex()) -> int:
        return len(self.cells)

    def data(self, index: QModelIndex | QPersistentModelIndex, role: int = Qt.ItemDataRole.DisplayRole) -> Any:
        if not index.isValid() or index.row() >= len(self.cells):
            return None

        cell: Optional[Cell] = self.cells[index.row()]

        if role == self.IsEmptyRole:
            return cell is None
        if cell is None:
            return "Empty" if role == Qt.ItemDataRole.DisplayRole else None

        if role in (self.GiftRole, Qt.ItemDataRole.DisplayRole):
            return cell.gift
        elif role == self.ModelRole:
            return cell.model
        elif role == self.PatternRole:
            return cell.pattern
        elif role == self.BackdropNameRole:
            return cell.backdrop.name if cell.backdrop else None
        elif role == self.EdgeColorRole:
            return cell.backdrop.edge_color if cell.backdrop else None
        elif role == self.CenterColorRole:
            return cell.backdrop.center_color if cell.backdrop else None
        elif role == self.ModelImageRole:
            if self.image_url and cell.gift and cell.model:
                return self.image_url(cell.gift, cell.model)

        return None

    def roleNames(self) -> dict[int, QByteArray]:
        return {
            self.GiftRole: QByteArray(b"gift"),
            self.ModelRole: QByteArray(b"model"),
            self.PatternRole: QByteArray(b"pattern"),
            self.BackdropNameRole: QByteArray(b"backdropName"),
            self.EdgeColorRole: QByteArray(b"edgeColor"),
            self.CenterColorRole: QByteArray(b"centerColor"),
            self.ModelImageRole: QByteArray(b"modelImage"),
            self.IsEmptyRole: QByteArray(b"isEmpty")
        }
