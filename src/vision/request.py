"""ImageQueryRequest — one user message pairing a prompt with an image."""
from dataclasses import dataclass
from typing import Optional

from src.image import media_type_from_base64, remove_base64_prefix
from src.vision.provider import ActiveProvider


@dataclass(frozen=True)
class ImageQueryRequest:
    model: str
    query: str
    image_base64: str
    media_type: str

    def to_messages(self) -> list[dict]:
        return [
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": self.query},
                    {
                        "type": "image_url",
                        "image_url": {"url": f"data:{self.media_type};base64,{self.image_base64}"},
                    },
                ],
            }
        ]


def build_image_query_request(
    provider: Optional[ActiveProvider],
    image_base64: str,
    query: str,
) -> Optional[ImageQueryRequest]:
    """Returns None when no provider is active."""
    match provider:
        case None:
            return None
        case p:
            return ImageQueryRequest(
                model=p.model,
                query=query,
                image_base64=remove_base64_prefix(image_base64),
                media_type=media_type_from_base64(image_base64),
            )
