from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field

from dumbify.errors import ValidationError


class Tone(str, Enum):
    BABY = "baby"
    SARCASTIC = "sarcastic"
    INFLUENCER = "influencer"
    PROFESSOR = "professor"

    @classmethod
    def from_value(cls, value) -> "Tone":
        try:
            return cls(value)
        except ValueError:
            raise ValidationError("Valid tone is required") from None


# Fields stay loosely typed so bad input reaches our own validation
# and is reported as a 400 with an error body.
class CodeRequest(BaseModel):
    code: Optional[str] = Field(None, description="The code snippet to be explained.")
    tone: Optional[str] = Field(None, description="One of baby, sarcastic, influencer or professor.")


class ShareCardsRequest(CodeRequest):
    template: Optional[str] = Field(None, description="Card template id, defaults to 'modern'.")
    explanation: Optional[str] = Field(
        None, description="A previous explanation used when social content cannot be generated."
    )


class RenderRequest(BaseModel):
    explanation: Optional[str] = Field(None, description="A raw explanation to split and format.")


class ExplainResponse(BaseModel):
    explanation: str


class SocialContentResponse(BaseModel):
    socialMediaContent: str


class DisplayRowModel(BaseModel):
    text: str
    bullet: bool


class RenderResponse(BaseModel):
    overview: str
    lineByLine: str
    rows: List[DisplayRowModel]
    wordCount: int
    readingTime: int


class ShareCardModel(BaseModel):
    kind: str
    title: str
    content: str
    template: str


class ShareCardsResponse(BaseModel):
    overview: str
    cards: List[ShareCardModel]
    source: str = Field(..., description="'social' when generated, 'explanation' for the fallback.")


class HistoryEntryModel(BaseModel):
    id: str
    code: str
    tone: str
    explanation: str
    timestamp: str
