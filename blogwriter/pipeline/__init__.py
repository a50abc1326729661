"""Article generation: prompts, Claude API adapter, response parsing, orchestration."""

from blogwriter.pipeline.generator import GenerationStep, generate_article
from blogwriter.pipeline.model_client import ModelClient

__all__ = ["GenerationStep", "ModelClient", "generate_article"]
