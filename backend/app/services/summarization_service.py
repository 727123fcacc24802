"""
Document summarization. Wraps AWS Bedrock converse() to turn extracted
document text into a short professional summary.
"""
from __future__ import annotations

import logging
from typing import Any, Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from app.core.config import settings
from app.utils.exceptions import SummarizationError
from app.utils.helpers import truncate_text

logger = logging.getLogger(__name__)

SUMMARY_PROMPT = (
    "Summarize the following legal document in a concise, professional manner "
    "highlighting key points:\n\n{content}"
)


def build_bedrock_client() -> Any:
    return boto3.client(
        "bedrock-runtime",
        region_name=settings.AWS_REGION,
        aws_access_key_id=settings.AWS_ACCESS_KEY_ID or None,
        aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY or None,
        config=Config(
            read_timeout=settings.BEDROCK_READ_TIMEOUT_SECONDS,
            retries={"max_attempts": 1, "mode": "standard"},
        ),
    )


class SummarizationService:
    """
    Text in, summary out. Holds only its Bedrock client; build one per
    application and hand it to the services that need it.
    """

    def __init__(
        self,
        client: Any = None,
        model_id: Optional[str] = None,
        max_tokens: Optional[int] = None,
        temperature: Optional[float] = None,
    ) -> None:
        self._client = client if client is not None else build_bedrock_client()
        self.model_id = model_id or settings.BEDROCK_MODEL_ID
        self.max_tokens = max_tokens or settings.SUMMARY_MAX_TOKENS
        self.temperature = settings.SUMMARY_TEMPERATURE if temperature is None else temperature

    def summarize(self, content: str) -> str:
        """
        Returns the trimmed model output ("" when the model produced no text).
        Raises SummarizationError on any client or response failure.
        """
        try:
            response = self._client.converse(
                modelId=self.model_id,
                messages=[
                    {
                        "role": "user",
                        "content": [{"text": SUMMARY_PROMPT.format(content=content)}],
                    }
                ],
                inferenceConfig={
                    "temperature": self.temperature,
                    "maxTokens": self.max_tokens,
                },
            )
        except (BotoCoreError, ClientError) as exc:
            logger.error("Bedrock summarization failed: %s", exc)
            raise SummarizationError(f"LLM summarization error: {exc}") from exc

        try:
            blocks = response["output"]["message"]["content"]
            if not isinstance(blocks, list):
                raise TypeError(f"content is {type(blocks).__name__}, expected list")
            text = "".join(block.get("text") or "" for block in blocks if isinstance(block, dict))
        except (KeyError, TypeError) as exc:
            logger.error("Unexpected Bedrock response shape: %s", truncate_text(str(response), 200))
            raise SummarizationError("Malformed summarization response") from exc

        return text.strip()
