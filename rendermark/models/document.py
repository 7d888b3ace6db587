"""
Document models for rendered output and the render API.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field


class RenderedDocument(BaseModel):
    """A fetched document and its HTML rendering"""

    url: str = Field(..., description="Resolved document URL")
    markdown: str = Field(..., description="Source text as fetched")
    html: str = Field(..., description="Rendered HTML, fragments joined by newlines")
    line_count: int = Field(..., ge=0, description="Number of source lines")
    fetched_at: datetime = Field(default_factory=datetime.utcnow)


class RenderRequest(BaseModel):
    """Model for converting markdown supplied in the request body"""

    markdown: str = Field(..., description="Markdown source text")

    class Config:
        json_schema_extra = {
            "example": {
                "markdown": "# Title\n\n- one\n- two\n1. first",
            }
        }


class RenderResponse(BaseModel):
    """Conversion result"""

    html: str
    fragments: List[str]
