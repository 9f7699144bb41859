"""
Reports package for the personnel toolkit.

This module re-exports the generator interfaces, the built-in generators and
the registry-backed `ReportService`.
"""

from personnel.reports.abstract import AbstractReportGenerator, ReportGenerator, report_row
from personnel.reports.csv_report import CSVReportGenerator
from personnel.reports.html_report import HTMLReportGenerator
from personnel.reports.json_report import JSONReportGenerator
from personnel.reports.service import ReportService, default_generators
from personnel.reports.xml_report import XMLReportGenerator

__all__ = [
    # Abstracts
    "AbstractReportGenerator",
    "ReportGenerator",
    "report_row",
    # Concrete generators
    "CSVReportGenerator",
    "HTMLReportGenerator",
    "JSONReportGenerator",
    "XMLReportGenerator",
    # Registry
    "ReportService",
    "default_generators",
]
