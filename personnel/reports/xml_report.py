"""
Tagged-markup report: one `<employee>` element per employee.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import Iterable

from personnel.domain.models import Employee
from personnel.reports.abstract import AbstractReportGenerator, report_row

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'

# Characters outside the XML 1.0 Char production; ElementTree writes them unescaped.
_ILLEGAL_XML_CHARS = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")


def _xml_text(value: str) -> str:
    return _ILLEGAL_XML_CHARS.sub("", value)


class XMLReportGenerator(AbstractReportGenerator):
    format_name: str = "XML"
    description: str = "XML document rooted at <employees>; the id is an attribute."

    def render(self, employees: Iterable[Employee]) -> str:
        root = ET.Element("employees")
        for employee in employees:
            row = {tag: _xml_text(value) for tag, value in report_row(employee).items()}
            element = ET.SubElement(root, "employee", id=row.pop("id"))
            for tag, value in row.items():
                ET.SubElement(element, tag).text = value
        ET.indent(root, space="  ")
        return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}"


__all__ = ["XMLReportGenerator"]
