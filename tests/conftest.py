"""
Pytest configuration shared by unit and pipeline tests.

Provides sample Argos export documents shared by the scanner, writer
and pipeline tests.
"""

import pytest

from argos_search.config import ScannerConfig


EMPLOYEE_EXPORT = """\
<?xml version="1.0" encoding="utf-8"?>
<ArgosExport>
  <Children>
    <DataBlock Name="Main">
      <Name>Employee Deductions</Name>
      <Data>
SELECT * from EMPLOYEE_TABLE
SSN_Details some text
<Condition>Ignore me</Condition>
      </Data>
      <Children>
        <Report Name="EmpDedReport">
          <Layout>banded</Layout>
        </Report>
        <Report Name="AnotherReport">
        </Report>
      </Children>
    </DataBlock>
  </Children>
</ArgosExport>
"""

ESCAPED_EXPORT = """\
<Export><Payload>
&lt;Children&gt;
&lt;DataBlock Name="Main"&gt;
&lt;Name&gt;Escaped Block&lt;/Name&gt;
&lt;Data&gt;
select ssn from person
&lt;/Data&gt;
&lt;Children&gt;
&lt;Report Name="EscapedReport"&gt;
&lt;/Report&gt;
&lt;/Children&gt;
&lt;/DataBlock&gt;
&lt;/Children&gt;
</Payload></Export>
"""


@pytest.fixture
def scanner_config():
    """Scanner config with built-in defaults, independent of config/scanner.yaml."""
    return ScannerConfig(placeholder_names=["Main"])


@pytest.fixture
def employee_lines():
    return EMPLOYEE_EXPORT.splitlines()


@pytest.fixture
def escaped_lines():
    return ESCAPED_EXPORT.splitlines()


@pytest.fixture
def employee_export(tmp_path):
    """Employee Deductions export written to a temporary file."""
    path = tmp_path / "ArgosExport.xml"
    path.write_text(EMPLOYEE_EXPORT, encoding="utf-8")
    return path


@pytest.fixture
def escaped_export(tmp_path):
    """Entity-escaped export written to a temporary file."""
    path = tmp_path / "export.html"
    path.write_text(ESCAPED_EXPORT, encoding="utf-8")
    return path
