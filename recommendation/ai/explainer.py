import os
import json
import hashlib
import logging
from collections import OrderedDict
from typing import Dict, Any, Optional
import openai
from dotenv import load_dotenv

from .prompt_builder import build_system_prompt, build_user_prompt

# Load env vars (if not already loaded)
load_dotenv()

logger = logging.getLogger(__name__)


def result_fingerprint(engine_output: Dict[str, Any]) -> str:
    """Stable hash of an engine result, ignoring its timestamp."""
    payload = {k: v for k, v in engine_output.items() if k != "generated_at"}
    return hashlib.sha256(json.dumps(payload, sort_keys=True).encode("utf-8")).hexdigest()


class AIExplainer:
    def __init__(self, api_key: Optional[str] = None, client=None, max_cache_entries: int = 256):
        self.api_key = api_key or os.getenv("OPENAI_API_KEY")
        self.client = client
        if self.client is None and self.api_key:
            self.client = openai.OpenAI(api_key=self.api_key)

        self.model = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self.max_tokens = 700
        self.temperature = 0.3

        # In-memory LRU cache: result fingerprint -> response
        self.max_cache_entries = max_cache_entries
        self.cache: "OrderedDict[str, Dict[str, Any]]" = OrderedDict()

    def get_explanation(self, student_profile: Dict[str, Any], engine_output: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        Generates an explanation for the recommendation results.
        Returns None if API key is missing or the provider call fails.
        """
        if not self.client:
            logger.warning("OpenAI API key not found. Skipping AI explanation.")
            return None

        fingerprint = result_fingerprint(engine_output)
        if fingerprint in self.cache:
            self.cache.move_to_end(fingerprint)
            return self.cache[fingerprint]

        system_prompt = build_system_prompt()
        user_prompt = build_user_prompt(student_profile, engine_output)

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt}
                ],
                temperature=self.temperature,
                max_tokens=self.max_tokens,
                response_format={"type": "json_object"}
            )
        except openai.OpenAIError as e:
            logger.error(f"Error generating AI explanation: {e}")
            return None

        content = response.choices[0].message.content
        if not content:
            return None

        try:
            parsed_content = json.loads(content)
        except json.JSONDecodeError as e:
            logger.error(f"AI explanation was not valid JSON: {e}")
            return None

        self.cache[fingerprint] = parsed_content
        while len(self.cache) > self.max_cache_entries:
            self.cache.popitem(last=False)
        return parsed_content

# Singleton instance
explainer = AIExplainer()
