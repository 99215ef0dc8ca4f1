from __future__ import annotations
from PyQt5 import Qt

from ..header import CartridgeHeader


class CartridgeHeaderView(Qt.QWidget):
    def __init__(self, parent: Qt.QWidget | None = None):
        Qt.QWidget.__init__(self, parent=parent)
        layout = Qt.QGridLayout(self)
        self._table = Qt.QTableWidget(self)
        self._table.setColumnCount(3)
        self._table.setHorizontalHeaderLabels(["Offset", "Bytes", "Value"])
        self._table.horizontalHeader().setStretchLastSection(True)
        self._table.setEditTriggers(Qt.QAbstractItemView.NoEditTriggers)
        self._font = Qt.QFontDatabase.systemFont(Qt.QFontDatabase.FixedFont)
        layout.addWidget(self._table)

    def _setRow(self, row: int, offset: int, data: bytes, description: str):
        offsetItem = Qt.QTableWidgetItem()
        offsetItem.setText(f"0x{offset:04X}")
        offsetItem.setFont(self._font)
        self._table.setItem(row, 0, offsetItem)

        dataItem = Qt.QTableWidgetItem()
        dataItem.setText(data.hex(" ").upper())
        dataItem.setFont(self._font)
        self._table.setItem(row, 1, dataItem)

        item = Qt.QTableWidgetItem()
        item.setText(description)
        self._table.setItem(row, 2, item)

    def setHeader(self, header: CartridgeHeader):
        self._table.clearContents()
        rows = header.parse_struct()
        self._table.setRowCount(len(rows))
        for row, (offset, data, description) in enumerate(rows):
            self._setRow(row, offset, data, description)
        self._table.resizeColumnsToContents()
