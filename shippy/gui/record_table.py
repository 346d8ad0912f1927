# gui/record_table.py
from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QGroupBox, QGridLayout,
    QTableWidget, QTableWidgetItem, QAbstractItemView, QHeaderView,
    QComboBox, QLineEdit, QSpinBox, QDoubleSpinBox, QDateEdit, QMessageBox
)


class RecordTableView(QWidget):
    """
    Shared screen for a record collection:
    top: title + "Add" toggle, add form (hidden by default)
    body: table, one row editable at a time (changes are saved as they are made)
    """
    title = ""
    add_label = "Add"
    columns = []          # [(header, field), ...]

    def __init__(self, store, parent=None):
        super().__init__(parent)
        self.store = store
        self.controller = None
        self._build_ui()
        self.reload()

    # ---------- hooks ----------
    def make_controller(self):
        raise NotImplementedError

    def build_form(self, form: QGridLayout):
        raise NotImplementedError

    def collect_form(self) -> dict:
        raise NotImplementedError

    def clear_form(self):
        raise NotImplementedError

    def display(self, record, field) -> str:
        return str(getattr(record, field))

    def make_editor(self, record, field) -> QWidget:
        raise NotImplementedError

    # ---------- UI ----------
    def _build_ui(self):
        root = QVBoxLayout(self)

        top = QHBoxLayout()
        self.count_label = QLabel("")
        self.count_label.setStyleSheet("font-weight:600; font-size:15px;")
        top.addWidget(self.count_label)
        top.addStretch(1)
        self.btn_toggle_add = QPushButton(f"+ {self.add_label}")
        top.addWidget(self.btn_toggle_add)
        root.addLayout(top)

        self.add_box = QGroupBox(self.add_label)
        form = QGridLayout(self.add_box)
        self.build_form(form)
        btn_row = QHBoxLayout()
        self.btn_save_new = QPushButton("Save")
        self.btn_cancel_new = QPushButton("Cancel")
        btn_row.addWidget(self.btn_save_new)
        btn_row.addWidget(self.btn_cancel_new)
        btn_row.addStretch(1)
        form.addLayout(btn_row, form.rowCount(), 0, 1, -1)
        self.add_box.setVisible(False)
        root.addWidget(self.add_box)

        headers = [h for h, _ in self.columns] + ["Actions"]
        self.table = QTableWidget(0, len(headers))
        self.table.setHorizontalHeaderLabels(headers)
        self.table.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.table.setSelectionMode(QAbstractItemView.NoSelection)
        self.table.verticalHeader().setVisible(False)
        self.table.verticalHeader().setDefaultSectionSize(36)
        header = self.table.horizontalHeader()
        header.setSectionResizeMode(QHeaderView.Stretch)
        header.setSectionResizeMode(len(headers) - 1, QHeaderView.ResizeToContents)
        root.addWidget(self.table)

        self.btn_toggle_add.clicked.connect(self._toggle_add_form)
        self.btn_save_new.clicked.connect(self._on_add)
        self.btn_cancel_new.clicked.connect(lambda: self.add_box.setVisible(False))

    # ---------- data/binding ----------
    def reload(self):
        """Re-read storage, like mounting the screen again."""
        self.controller = self.make_controller()
        self._fill_table()

    def _fill_table(self):
        self.table.setRowCount(0)
        for rec in self.controller.records:
            r = self.table.rowCount()
            self.table.insertRow(r)
            editing = self.controller.is_editing(rec.id)
            for c, (_, field) in enumerate(self.columns):
                if editing:
                    self.table.setCellWidget(r, c, self.make_editor(rec, field))
                else:
                    item = QTableWidgetItem(self.display(rec, field))
                    item.setData(Qt.UserRole, rec.id)
                    self.table.setItem(r, c, item)
            self.table.setCellWidget(r, len(self.columns), self._actions(rec.id, editing))
        self.count_label.setText(f"{self.title} ({len(self.controller)})")

    def _actions(self, record_id, editing: bool) -> QWidget:
        box = QWidget()
        row = QHBoxLayout(box)
        row.setContentsMargins(2, 0, 2, 0)
        if editing:
            btn_save = QPushButton("Save")
            btn_cancel = QPushButton("Cancel")
            btn_save.clicked.connect(self._end_edit)
            btn_cancel.clicked.connect(self._end_edit)
            row.addWidget(btn_save)
            row.addWidget(btn_cancel)
        else:
            btn_edit = QPushButton("Edit")
            btn_del = QPushButton("Delete")
            btn_edit.clicked.connect(lambda _=False, rid=record_id: self._begin_edit(rid))
            btn_del.clicked.connect(lambda _=False, rid=record_id: self._delete(rid))
            row.addWidget(btn_edit)
            row.addWidget(btn_del)
        return box

    # ---------- actions ----------
    def _toggle_add_form(self):
        self.add_box.setVisible(not self.add_box.isVisible())

    def _on_add(self):
        rec = self.controller.add(self.collect_form())
        if rec is None:
            # required field blank: nothing is stored
            names = ", ".join(f.replace("_", " ").capitalize() for f in self.controller.required_fields)
            QMessageBox.warning(self, "Required", f"{names} required.")
            return
        self.clear_form()
        self.add_box.setVisible(False)
        self._fill_table()

    def _begin_edit(self, record_id):
        self.controller.begin_edit(record_id)
        self._refresh_later()

    def _end_edit(self):
        self.controller.end_edit()
        self._refresh_later()

    def _delete(self, record_id):
        self.controller.remove(record_id)
        self._refresh_later()

    def _refresh_later(self):
        # rows own the clicked button; rebuild after the signal returns
        QTimer.singleShot(0, self._fill_table)

    def update_field(self, record_id, field, value):
        self.controller.update(record_id, field, value)

    # ---------- editor widgets ----------
    def text_editor(self, record, field) -> QLineEdit:
        w = QLineEdit(str(getattr(record, field)))
        w.textEdited.connect(lambda v, rid=record.id: self.update_field(rid, field, v))
        return w

    def combo_editor(self, record, field, options) -> QComboBox:
        w = QComboBox()
        w.addItems(options)
        current = getattr(record, field)
        if current in options:
            w.setCurrentIndex(options.index(current))
        w.currentTextChanged.connect(lambda v, rid=record.id: self.update_field(rid, field, v))
        return w

    def int_editor(self, record, field) -> QSpinBox:
        w = QSpinBox()
        w.setRange(0, 1_000_000_000)
        w.setValue(int(getattr(record, field)))
        w.valueChanged.connect(lambda v, rid=record.id: self.update_field(rid, field, v))
        return w

    def float_editor(self, record, field) -> QDoubleSpinBox:
        w = QDoubleSpinBox()
        w.setRange(0, 1_000_000_000)
        w.setDecimals(2)
        w.setSingleStep(0.01)
        w.setValue(float(getattr(record, field)))
        w.valueChanged.connect(lambda v, rid=record.id: self.update_field(rid, field, v))
        return w

    def date_editor(self, record, field) -> QDateEdit:
        w = QDateEdit()
        w.setCalendarPopup(True)
        w.setDisplayFormat("yyyy-MM-dd")
        current = getattr(record, field)
        if current:
            w.setDate(current)
        w.dateChanged.connect(lambda qd, rid=record.id: self.update_field(rid, field, qd.toPython()))
        return w
