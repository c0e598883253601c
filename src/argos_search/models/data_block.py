"""
Pydantic model for DataBlock records extracted from Argos exports.

Schema Design:
- One record per <DataBlock> region, kept in a flat list (no tree)
- Reports are stored by name only, in document order
- Searchable text is derived from the verbatim <Data> lines
"""

from typing import List

from pydantic import BaseModel, Field, computed_field


class DataBlock(BaseModel):
    """
    One <DataBlock>...</DataBlock> region of an export.

    The scanner creates the record when it sees the opening tag and fills
    it while scanning the region. Nothing is removed afterwards.

    Example:
        >>> block = DataBlock(name="Employee Deductions")
        >>> block.add_content_line("SELECT * FROM EMPLOYEE_TABLE")
        >>> block.add_report("EmpDedReport")
        >>> block.content_lower
        'select * from employee_table'
        >>> block.reports
        ['EmpDedReport']
    """

    name: str = Field(
        default="",
        description="Resolved display name; empty until resolved"
    )

    content_original: List[str] = Field(
        default_factory=list,
        description="Verbatim lines captured between <Data> and </Data>"
    )

    reports: List[str] = Field(
        default_factory=list,
        description="Names of owned reports in document order (duplicates kept)"
    )

    @computed_field
    @property
    def content_lower(self) -> str:
        """Case-folded, newline-joined <Data> content used for matching."""
        return "\n".join(line.lower() for line in self.content_original)

    def add_content_line(self, line: str) -> None:
        """Append one verbatim <Data> line."""
        self.content_original.append(line)

    def add_report(self, report_name: str) -> None:
        """Attach a report name to this block."""
        self.reports.append(report_name)

    def __repr__(self) -> str:
        return (
            f"DataBlock("
            f"name='{self.name}', "
            f"lines={len(self.content_original)}, "
            f"reports={self.reports})"
        )
