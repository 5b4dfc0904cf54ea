"""
IBM watsonx Deployment Provider

Calls a deployed watsonx AI service over plain HTTP:
- exchange the IBM Cloud API key for an IAM bearer token
- POST {"messages": [...]} to the deployment endpoint
- read choices[0].message.content, or predictions[0].text for older deployments
"""

import logging

import httpx

from finlit.core.config import Settings
from finlit.core.errors import GenerativeUnavailable
from finlit.services.llm.base import LLMProvider

logger = logging.getLogger(__name__)

IAM_GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"


def extract_watsonx_text(data: dict) -> str:
    """Pull the generated text out of a deployment response body."""
    choices = data.get("choices") or []
    if choices:
        content = (choices[0].get("message") or {}).get("content")
        if content:
            return content

    predictions = data.get("predictions") or []
    if predictions:
        return predictions[0].get("text") or ""

    return ""


class WatsonxProvider(LLMProvider):
    """Provider for an IBM watsonx AI service deployment."""

    provider_name = "watsonx"

    async def _get_iam_token(self, client: httpx.AsyncClient) -> str:
        response = await client.post(
            self.settings.iam_token_url,
            headers={
                "Content-Type": "application/x-www-form-urlencoded",
                "Accept": "application/json",
            },
            data={
                "grant_type": IAM_GRANT_TYPE,
                "apikey": self.settings.watsonx_api_key,
            },
        )
        if response.status_code != 200:
            logger.error("[LLM] IAM token error response: %s", response.text)
            raise GenerativeUnavailable(
                "IAM token request failed", upstream_status=response.status_code
            )
        try:
            token = response.json()["access_token"]
        except (ValueError, KeyError, TypeError) as e:
            logger.error("[LLM] IAM token response malformed: %s", response.text[:200])
            raise GenerativeUnavailable(
                "IAM token response malformed", upstream_status=response.status_code
            ) from e
        if not isinstance(token, str) or not token:
            raise GenerativeUnavailable(
                "IAM token response malformed", upstream_status=response.status_code
            )
        return token

    async def complete(
        self,
        prompt: str,
        model: str,
        max_output_tokens: int = 2000,
        temperature: float = 0.3,
    ) -> str:
        # The deployment pins its own model; `model` is informational here
        if not self.settings.watsonx_endpoint:
            raise GenerativeUnavailable("watsonx endpoint is not configured")

        try:
            async with httpx.AsyncClient() as client:
                token = await self._get_iam_token(client)
                response = await client.post(
                    self.settings.watsonx_endpoint,
                    headers={
                        "Content-Type": "application/json",
                        "Accept": "application/json",
                        "Authorization": f"Bearer {token}",
                    },
                    json={"messages": [{"role": "user", "content": prompt}]},
                )
        except httpx.HTTPError as e:
            raise GenerativeUnavailable(f"watsonx transport failure: {e}") from e

        if not response.is_success:
            raise GenerativeUnavailable(
                f"watsonx API error: {response.status_code} {response.reason_phrase}",
                upstream_status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError:
            # A 2xx with a non-JSON body is still untrusted text
            return response.text
        if not isinstance(data, dict):
            return ""
        return extract_watsonx_text(data)
