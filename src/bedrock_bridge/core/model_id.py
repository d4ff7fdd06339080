"""core.model_id

Parsing of model identifiers of the form

    "<provider>:<model>"

Only the provider slug is normalised. Everything after the first colon is the
provider's own model identifier and is kept verbatim: Bedrock ids contain
colons and dots (``anthropic.claude-3-haiku-20240307-v1:0``), and ARNs add
slashes and case-sensitive resource ids
(``arn:aws:bedrock:us-east-1:123456789012:provisioned-model/AbCdEf123``).
"""

from __future__ import annotations

import re

from pydantic import BaseModel, Field, field_validator

# ---------------------------------------------------------------------------
# Regular-expression helpers
# ---------------------------------------------------------------------------

_PROVIDER_PATTERN = r'[a-z0-9_-]+'

_MODEL_ID_REGEX: re.Pattern[str] = re.compile(
    rf'^(?P<provider>{_PROVIDER_PATTERN}):(?P<model>\S+)$',
    re.IGNORECASE,
)

_ARN_PREFIX = 'arn:'


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


class ModelId(BaseModel):
    """Value-object representing a model identifier.

    * `provider` … provider slug, lower-cased (e.g. ``bedrock``)
    * `model` … provider model id or ARN, exactly as given

    The *raw* string is preserved for logging/debugging purposes.
    """

    provider: str = Field(..., pattern=rf'^{_PROVIDER_PATTERN}$', description='provider slug')
    model: str = Field(..., pattern=r'^\S+$', description='provider model id, kept verbatim')
    raw: str = Field(..., description='original, unmodified identifier')

    model_config = {
        'frozen': True,  # hashable / usable as dict key
        'str_strip_whitespace': True,
    }

    @field_validator('provider', mode='before')
    @classmethod
    def _provider_to_lower(cls, v: str) -> str:
        """Force lower-case for case-insensitive registry lookups."""
        return v.lower()

    @property
    def is_arn(self) -> bool:
        """Whether the model is addressed by ARN (inference profile, provisioned or imported model)."""
        return self.model.startswith(_ARN_PREFIX)

    @classmethod
    def parse(cls, raw: str, *, default_provider: str | None = None) -> ModelId:
        """Parse and validate a *raw* identifier string.

        With *default_provider*, an identifier without a provider prefix (a bare
        Bedrock model id or an ARN) is attributed to that provider instead of
        being rejected.

        >>> ModelId.parse("bedrock:anthropic.claude-v2:1").model
        'anthropic.claude-v2:1'
        """
        text = raw.strip()
        unprefixed = text.startswith(_ARN_PREFIX) or _MODEL_ID_REGEX.match(text) is None
        if unprefixed:
            if default_provider is None or not text or any(c.isspace() for c in text):
                raise ValueError(f"Invalid ModelId format. Expected '<provider>:<model>', got: {raw}")
            return cls(provider=default_provider, model=text, raw=raw)

        provider, _, model = text.partition(':')
        return cls(provider=provider, model=model, raw=raw)

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f'{self.provider}:{self.model}'


# Convenience alias so callers don't need to import the class explicitly
parse_model_id = ModelId.parse
