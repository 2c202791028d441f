"""
Chat-related data models

These models define the inbound relay request and the payloads exchanged
with the GigaChat API.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class ChatRequest(BaseModel):
    """Inbound request for POST /chat. The message is forwarded unvalidated."""
    model_config = ConfigDict(extra="allow")

    message: Any = None

    @property
    def has_message(self) -> bool:
        return "message" in self.model_fields_set

    @classmethod
    def from_body(cls, body: Any) -> "ChatRequest":
        """Build from a decoded JSON body; anything but an object counts as empty"""
        return cls.model_validate(body if isinstance(body, dict) else {})


class ChatMessage(BaseModel):
    """A single chat-completion message"""
    role: str
    content: Any = None


class ChatCompletionRequest(BaseModel):
    """Request body sent to the GigaChat chat-completion endpoint"""
    model: str
    messages: List[ChatMessage]
    stream: bool
    repetition_penalty: Union[int, float]

    @classmethod
    def for_user_message(cls, request: ChatRequest) -> "ChatCompletionRequest":
        # content stays unset when the caller sent no message at all
        if request.has_message:
            message = ChatMessage(role="user", content=request.message)
        else:
            message = ChatMessage(role="user")
        return cls(model="GigaChat", messages=[message], stream=False, repetition_penalty=1)

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class TokenResponse(BaseModel):
    """OAuth token response. Only access_token is relied upon."""
    model_config = ConfigDict(extra="allow")

    access_token: str
    expires_at: Optional[int] = None
