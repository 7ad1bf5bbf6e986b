"""Main Lancet class - entry point for the library."""

import logging
import time
from typing import Any, Optional

from lancet.config import LancetConfig
from lancet.models import LancetResult, Policy
from lancet.parsers import TextParser
from lancet.segmenters import paragraphs
from lancet.splitter import split_chunks
from lancet.tokenization import create_tokenizer

logger = logging.getLogger(__name__)


class Lancet:
    """Main Lancet class for policy-driven document chunking."""

    def __init__(
        self,
        config: Optional[LancetConfig] = None,
        policy: Optional[Policy] = None,
        tokenizer: Optional[Any] = None,
    ) -> None:
        """Initialize Lancet.

        Args:
            config: Configuration object
            policy: Split policy (overrides the policy described by config)
            tokenizer: Tokenizer with encode/decode (overrides the configured
                backend). Only consulted by token policies.
        """
        self._config = config or LancetConfig()
        self._policy = policy or self._config.build_policy()

        # Set up tokenizer
        if tokenizer is not None:
            self._tokenizer = tokenizer
        elif self._policy.requires_tokenizer:
            self._tokenizer = create_tokenizer(
                backend=self._config.tokenizer_backend,
                model=self._config.tokenizer_model,
            )
        else:
            self._tokenizer = None

    @classmethod
    def builder(cls) -> "LancetBuilder":
        """Create a builder for fluent configuration.

        Returns:
            LancetBuilder instance
        """
        return LancetBuilder()

    def chunk_text(self, text: str) -> LancetResult:
        """Split text directly and return chunks with run metrics.

        Args:
            text: Text content to chunk

        Returns:
            LancetResult with chunks and metrics

        Raises:
            LancetTokenizationError: If the tokenizer rejects the text
        """
        start_time = time.time()

        chunks = split_chunks(text, self._policy, self._tokenizer)

        result = LancetResult(chunks=chunks)
        result.add_metric("policy", self._policy.kind.value)
        result.add_metric("paragraph_count", len(paragraphs(text)))
        result.add_metric("chunk_count", len(chunks))
        result.add_metric("split_time", time.time() - start_time)

        max_tokens = getattr(self._policy, "max_tokens", None)
        if max_tokens is not None:
            for chunk in chunks:
                if chunk.token_count is not None and chunk.token_count > max_tokens:
                    result.add_warning(
                        f"Chunk {chunk.index} has {chunk.token_count} tokens "
                        f"(max_tokens={max_tokens}): a single word that cannot be split"
                    )

        if self._config.verbose:
            logger.info(
                f"Split into {len(chunks)} chunks in {result.metrics['split_time']:.3f}s"
            )

        return result

    def chunk(self, input_file: str) -> LancetResult:
        """Read a document and split it into chunks.

        Args:
            input_file: Path to input document

        Returns:
            LancetResult with chunks and metrics

        Raises:
            LancetParseError: If the file cannot be read
        """
        document = TextParser().parse(input_file)
        logger.info(f"Chunking {document.filename} ({len(document)} characters)")

        result = self.chunk_text(document.text)
        result.add_metric("input_file", input_file)
        return result

    @property
    def config(self) -> LancetConfig:
        """Get the configuration."""
        return self._config

    @property
    def policy(self) -> Policy:
        """Get the split policy."""
        return self._policy


class LancetBuilder:
    """Builder for fluent Lancet configuration."""

    def __init__(self) -> None:
        """Initialize the builder."""
        self._config: Optional[LancetConfig] = None
        self._policy: Optional[Policy] = None
        self._tokenizer: Optional[Any] = None

    def with_config(self, config: LancetConfig) -> "LancetBuilder":
        """Set configuration.

        Args:
            config: LancetConfig instance

        Returns:
            Self for chaining
        """
        self._config = config
        return self

    def with_policy(self, policy: Policy) -> "LancetBuilder":
        """Set the split policy.

        Args:
            policy: Policy instance

        Returns:
            Self for chaining
        """
        self._policy = policy
        return self

    def with_tokenizer(self, tokenizer: Any) -> "LancetBuilder":
        """Set the tokenizer.

        Args:
            tokenizer: Object with encode/decode

        Returns:
            Self for chaining
        """
        self._tokenizer = tokenizer
        return self

    def build(self) -> Lancet:
        """Build the Lancet instance.

        Returns:
            Configured Lancet instance
        """
        return Lancet(
            config=self._config,
            policy=self._policy,
            tokenizer=self._tokenizer,
        )
