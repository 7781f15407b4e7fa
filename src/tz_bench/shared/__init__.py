"""Moduły współdzielone: konfiguracja, logowanie, raporty błędów."""

from .config import BenchmarkConfig, load_config
from .error_reporting import ErrorReport, get_error_reports_dir, write_error_report
from .logging import configure_logging

__all__ = [
	"BenchmarkConfig",
	"load_config",
	"configure_logging",
	"ErrorReport",
	"get_error_reports_dir",
	"write_error_report",
]
