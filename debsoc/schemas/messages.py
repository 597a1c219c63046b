# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
from pydantic import Field

from debsoc.schemas import RequestModel


class FeedbackRequest(RequestModel):
    feedback: str = Field(..., min_length=1, max_length=5000)
    member_id: str = Field(..., alias="memberId", min_length=1)


class MessageRequest(RequestModel):
    message: str = Field(..., min_length=1, max_length=5000)
    president_id: str = Field(..., alias="presidentId", min_length=1)
