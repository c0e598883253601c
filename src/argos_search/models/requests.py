"""
Request models for search operations.

These Pydantic models provide a type-safe, validated interface between
the command line and the search pipeline.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, field_validator, ConfigDict


class SearchRequest(BaseModel):
    """
    Request model for searching DataBlocks.

    Attributes:
        terms: Search terms, trimmed and lower-cased, order preserved.
               An empty list selects every block.
        extract_sql: Append the verbatim <Data> lines of matched blocks

    Example:
        >>> request = SearchRequest.from_cli(" SSN, ,Salary ", "y")
        >>> request.terms
        ['ssn', 'salary']
        >>> request.extract_sql
        True
    """

    terms: List[str] = Field(
        default_factory=list,
        description="Case-folded substrings searched in DataBlock content",
        examples=[["ssn", "salary"]]
    )

    extract_sql: bool = Field(
        default=False,
        description="Echo original <Data> lines for matched blocks"
    )

    @field_validator('terms')
    @classmethod
    def normalize_terms(cls, v: List[str]) -> List[str]:
        """Trim and lower-case each term, dropping empty ones."""
        normalized = []
        for term in v:
            term = term.strip()
            if term:
                normalized.append(term.lower())
        return normalized

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [{
                "terms": ["ssn"],
                "extract_sql": True
            }]
        }
    )

    @classmethod
    def from_cli(
        cls,
        terms_csv: Optional[str] = None,
        extract_sql: Optional[str] = None
    ) -> "SearchRequest":
        """
        Build a request from raw command line strings.

        Args:
            terms_csv: Comma-separated terms; None or blank means no terms
            extract_sql: "Y" (any case) enables SQL echo, anything else disables it

        Returns:
            Validated SearchRequest
        """
        terms = []
        if terms_csv is not None and terms_csv.strip():
            terms = terms_csv.split(',')

        flag = extract_sql is not None and extract_sql.strip().upper() == 'Y'

        return cls(terms=terms, extract_sql=flag)
