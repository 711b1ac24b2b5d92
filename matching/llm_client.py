import logging
from typing import Optional

import requests

from config import FALLBACK_RESPONSE, LLM_API_URL, LLM_TIMEOUT, MODEL_NAME, OPENAI_API_KEY
from errors import ServiceUnavailable

logger = logging.getLogger(__name__)


class LLMClient:
    """Chat-completions client bound to one credential and model.

    Built once at startup and shared read-only between requests. Holds
    configuration only; each call goes through module-level requests.post,
    which opens its own session, so threadpool workers share no connection state.
    """

    def __init__(
        self,
        api_key: Optional[str] = OPENAI_API_KEY,
        model: str = MODEL_NAME,
        api_url: str = LLM_API_URL,
        timeout: float = LLM_TIMEOUT,
        http=None,
    ):
        self.api_key = api_key
        self.model = model
        self.api_url = api_url
        self.timeout = timeout
        self.http = http or requests

    def request_analysis(self, prompt: str) -> str:
        """
        Send one prompt and return the completion text.

        Returns FALLBACK_RESPONSE when the service answers without content.
        Raises ServiceUnavailable on transport or HTTP errors.
        """
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
        }

        try:
            response = self.http.post(self.api_url, headers=headers, json=payload, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"LLM API error: {e}")
            raise ServiceUnavailable(str(e)) from e

        return _completion_text(data) or FALLBACK_RESPONSE


def _completion_text(data) -> str:
    if not isinstance(data, dict):
        return ""
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return ""
    message = choices[0].get("message") or {}
    content = message.get("content")
    if not isinstance(content, str):
        return ""
    return content.strip()
