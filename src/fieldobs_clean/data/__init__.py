"""Raw record parsing, cleaning and reshaping."""

from .scan import scan_dataset, scan_raw_lines
from .preprocess import clean_lines, run_preprocess
from .reshape import melt_wide_table, run_reshape

__all__ = ["scan_dataset", "scan_raw_lines", "clean_lines", "run_preprocess", "melt_wide_table", "run_reshape"]
