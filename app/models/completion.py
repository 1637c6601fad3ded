from typing import Any, Literal

from pydantic import BaseModel, ValidationError


class ChatMessage(BaseModel):
    role: str | None = None
    content: str | None = None


class ChatChoice(BaseModel):
    message: ChatMessage | None = None
    finish_reason: str | None = None


class ChatCompletion(BaseModel):
    kind: Literal["chat_completion"] = "chat_completion"
    id: str | None = None
    model: str | None = None
    choices: list[ChatChoice]

    @property
    def content(self) -> str | None:
        if not self.choices or self.choices[0].message is None:
            return None
        return self.choices[0].message.content or None


class ProviderError(BaseModel):
    kind: Literal["provider_error"] = "provider_error"
    message: str
    code: int | str | None = None


class Unrecognized(BaseModel):
    kind: Literal["unrecognized"] = "unrecognized"
    payload: Any = None


CompletionResponse = ChatCompletion | ProviderError | Unrecognized


def classify_completion(payload: Any) -> CompletionResponse:
    """Map a decoded chat-completion body onto one of the known response shapes."""
    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict):
            return ProviderError(message=str(error.get("message") or "unknown provider error"), code=error.get("code"))
        if isinstance(payload.get("choices"), list):
            try:
                return ChatCompletion.model_validate(payload)
            except ValidationError:
                pass
    return Unrecognized(payload=payload)
