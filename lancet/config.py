"""Configuration for Lancet."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict
import os

import yaml

from lancet.exceptions import LancetConfigError
from lancet.models import (
    Policy,
    PolicyKind,
    policy_from_dict,
)
from lancet.models.policy import DEFAULT_CONTEXT_SENTENCES, DEFAULT_MAX_TOKENS
from lancet.tokenization import BACKENDS


@dataclass
class LancetConfig:
    """Configuration for Lancet processing."""

    # Split policy
    policy: str = PolicyKind.TOKEN.value
    """Splitting strategy: sentence, paragraph, token or token_packed."""

    max_tokens: int = DEFAULT_MAX_TOKENS
    """Maximum tokens per chunk for token policies (inclusive)."""

    context_sentences: int = DEFAULT_CONTEXT_SENTENCES
    """Preceding sentences carried into each token-bounded chunk."""

    # Tokenizer
    tokenizer_backend: str = "tiktoken"
    """Tokenizer backend: tiktoken or huggingface."""

    tokenizer_model: str = "gpt-4"
    """tiktoken model/encoding name, or Hugging Face repository id or tokenizer.json path."""

    # Logging
    verbose: bool = False
    """Enable verbose logging output."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Validate configuration values."""
        # Normalizes the policy name and rejects unknown ones
        self.policy = PolicyKind.from_string(self.policy).value

        if self.tokenizer_backend not in BACKENDS:
            raise LancetConfigError(
                f"tokenizer_backend must be one of {', '.join(BACKENDS)}, got {self.tokenizer_backend}",
                "tokenizer_backend",
            )

        if not self.tokenizer_model:
            raise LancetConfigError(
                "tokenizer_model must not be empty",
                "tokenizer_model",
            )

        # Values substituted from environment variables arrive as strings
        for key in ("max_tokens", "context_sentences"):
            value = getattr(self, key)
            if isinstance(value, str) and value.strip().isdigit():
                setattr(self, key, int(value))

        # Numeric bounds are checked by the policy itself
        self.build_policy()

    @property
    def requires_tokenizer(self) -> bool:
        """Check if the configured policy consults a tokenizer."""
        return self.build_policy().requires_tokenizer

    def build_policy(self) -> Policy:
        """Build the split policy described by this configuration."""
        return policy_from_dict(
            {
                "kind": self.policy,
                "max_tokens": self.max_tokens,
                "context_sentences": self.context_sentences,
            }
        )

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LancetConfig":
        """Create configuration from dictionary."""
        # Handle nested structure from YAML
        flat_data = {}

        # Extract from nested sections if present
        if "chunking" in data:
            chunking = data["chunking"] or {}
            flat_data["policy"] = chunking.get("policy", PolicyKind.TOKEN.value)
            flat_data["max_tokens"] = chunking.get("max_tokens", DEFAULT_MAX_TOKENS)
            flat_data["context_sentences"] = chunking.get(
                "context_sentences", DEFAULT_CONTEXT_SENTENCES
            )

        if "tokenizer" in data:
            tokenizer = data["tokenizer"] or {}
            flat_data["tokenizer_backend"] = tokenizer.get("backend", "tiktoken")
            flat_data["tokenizer_model"] = tokenizer.get("model", "gpt-4")

        if "behavior" in data:
            behavior = data["behavior"] or {}
            flat_data["verbose"] = behavior.get("verbose", False)

        # Also accept flat keys
        for key in [
            "policy",
            "max_tokens",
            "context_sentences",
            "tokenizer_backend",
            "tokenizer_model",
            "verbose",
        ]:
            if key in data and key not in flat_data:
                flat_data[key] = data[key]

        return cls(**flat_data)

    @classmethod
    def from_yaml(cls, path: str) -> "LancetConfig":
        """Load configuration from YAML file."""
        file_path = Path(path)
        if not file_path.exists():
            raise LancetConfigError(f"Config file not found: {path}")

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise LancetConfigError(f"Invalid YAML in config file: {e}")

        if data is None:
            data = {}

        if not isinstance(data, dict):
            raise LancetConfigError(
                f"Config file must contain a mapping, got {type(data).__name__}"
            )

        # Handle environment variable substitution
        data = cls._substitute_env_vars(data)

        return cls.from_dict(data)

    @classmethod
    def _substitute_env_vars(cls, data: Any) -> Any:
        """Recursively substitute environment variables in config."""
        if isinstance(data, dict):
            return {k: cls._substitute_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [cls._substitute_env_vars(item) for item in data]
        elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
            env_var = data[2:-1]
            return os.environ.get(env_var, "")
        return data

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return {
            "policy": self.policy,
            "max_tokens": self.max_tokens,
            "context_sentences": self.context_sentences,
            "tokenizer_backend": self.tokenizer_backend,
            "tokenizer_model": self.tokenizer_model,
            "verbose": self.verbose,
        }
