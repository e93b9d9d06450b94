from .issue_chart import IssueChart
from .duration_chart import DurationChart
from .report_map import ReportMap
from .summary_box import SummaryBox

__all__ = ["IssueChart", "DurationChart", "ReportMap", "SummaryBox"]
