from .main_window import MainWindow
from .view_box import InspectionViewBox

__all__ = ["MainWindow", "InspectionViewBox"]
