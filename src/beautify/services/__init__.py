from .doctor import run_doctor_checks
from .exporter import export_catalog

__all__ = ["export_catalog", "run_doctor_checks"]
