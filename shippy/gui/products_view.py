# gui/products_view.py
from PySide6.QtWidgets import QLabel, QLineEdit, QComboBox, QSpinBox, QDoubleSpinBox

from shippy.gui.record_table import RecordTableView
from shippy.logic.collection import ProductCollection
from shippy.models.product import CATEGORIES, GST_OPTIONS, CONDITIONS
from shippy.utils.parse_utils import money


class ProductsView(RecordTableView):
    title = "Products"
    add_label = "Add Product"
    columns = [
        ("Product", "name"),
        ("Category", "category"),
        ("Stock", "stock"),
        ("Price", "price"),
        ("GST", "gst"),
        ("Condition", "condition"),
    ]

    def make_controller(self):
        return ProductCollection(self.store)

    def build_form(self, form):
        self.txt_name = QLineEdit()
        self.txt_name.setPlaceholderText("Enter product name")
        self.cmb_category = QComboBox(); self.cmb_category.addItems(CATEGORIES)
        self.spin_stock = QSpinBox(); self.spin_stock.setRange(0, 1_000_000_000)
        self.spin_price = QDoubleSpinBox(); self.spin_price.setRange(0, 1_000_000_000)
        self.spin_price.setDecimals(2)
        self.cmb_gst = QComboBox(); self.cmb_gst.addItems(GST_OPTIONS)
        self.cmb_condition = QComboBox(); self.cmb_condition.addItems(CONDITIONS)

        rows = [
            ("Product Name*", self.txt_name), ("Category", self.cmb_category),
            ("Stock", self.spin_stock), ("Price (₹)", self.spin_price),
            ("GST", self.cmb_gst), ("Condition", self.cmb_condition),
        ]
        # two columns of label/field pairs
        for i, (label, w) in enumerate(rows):
            r, c = divmod(i, 2)
            form.addWidget(QLabel(label), r, c * 2)
            form.addWidget(w, r, c * 2 + 1)
        self.clear_form()

    def collect_form(self) -> dict:
        return {
            "name": self.txt_name.text(),
            "category": self.cmb_category.currentText(),
            "stock": int(self.spin_stock.value()),
            "price": float(self.spin_price.value()),
            "gst": self.cmb_gst.currentText(),
            "condition": self.cmb_condition.currentText(),
        }

    def clear_form(self):
        self.txt_name.clear()
        self.cmb_category.setCurrentText("T-Shirt")
        self.spin_stock.setValue(0)
        self.spin_price.setValue(0)
        self.cmb_gst.setCurrentText("18%")
        self.cmb_condition.setCurrentText("New")

    def display(self, record, field) -> str:
        if field == "price":
            return money(record.price)
        return super().display(record, field)

    def make_editor(self, record, field):
        if field == "category":
            return self.combo_editor(record, field, CATEGORIES)
        if field == "gst":
            return self.combo_editor(record, field, GST_OPTIONS)
        if field == "condition":
            return self.combo_editor(record, field, CONDITIONS)
        if field == "stock":
            return self.int_editor(record, field)
        if field == "price":
            return self.float_editor(record, field)
        return self.text_editor(record, field)
