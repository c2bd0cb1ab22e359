"""
Model providers and the resolver that picks one for a model identifier.

Every provider family is one ``ModelProvider`` subclass built on
LangChain's ``init_chat_model``. ``resolve_model`` is the only place that
decides which family a model identifier belongs to.
"""

import os
from typing import Any, Dict, Optional, Tuple, Type, Union

from langchain.chat_models import init_chat_model
from langchain_core.prompts import BasePromptTemplate, ChatPromptTemplate
from pydantic import BaseModel, ValidationError

from yt_tldr.config import config
from yt_tldr.models.schemas import ProviderFamily, ResolvedModel
from yt_tldr.utils.error_handling import MissingCredentialsError, SchemaValidationError, UnsupportedModelError

OLLAMA_PREFIX = "ollama:"

PromptInput = Union[str, BasePromptTemplate]

# Wraps a finished prompt string; its braces are never parsed as template variables
raw_prompt = ChatPromptTemplate.from_messages([
    ("human", "{prompt}")
])


def resolve_model(model_id: str) -> ResolvedModel:
    """
    Resolve a model identifier to a provider family and concrete model name.

    Args:
        model_id: Identifier supplied by the caller, e.g. "gemini",
            "gemini-2.0-flash", "mistral-small-latest" or "ollama:llama3.2:latest"

    Returns:
        ResolvedModel for the identifier

    Raises:
        UnsupportedModelError: If no provider family matches
    """
    model_id = (model_id or "").strip()

    if model_id == "gemini":
        return ResolvedModel(family=ProviderFamily.GEMINI, model_name=config.DEFAULT_GEMINI_MODEL)
    if model_id in config.VALID_GEMINI_MODELS:
        return ResolvedModel(family=ProviderFamily.GEMINI, model_name=model_id)

    if model_id in config.VALID_MISTRAL_MODELS:
        return ResolvedModel(family=ProviderFamily.MISTRAL, model_name=model_id)

    if model_id.startswith(OLLAMA_PREFIX):
        name = model_id[len(OLLAMA_PREFIX):]
        if not name:
            raise UnsupportedModelError("No Ollama model name given after the \"ollama:\" prefix")
        return ResolvedModel(family=ProviderFamily.OLLAMA, model_name=_normalize_ollama_name(name))
    if model_id in config.OLLAMA_ALIASES or model_id == config.DEFAULT_OLLAMA_MODEL:
        return ResolvedModel(family=ProviderFamily.OLLAMA, model_name=_normalize_ollama_name(model_id))

    supported = ", ".join(("gemini",) + config.VALID_GEMINI_MODELS + config.VALID_MISTRAL_MODELS)
    raise UnsupportedModelError(
        f"Unsupported model: \"{model_id}\". Supported models: {supported}, or ollama:<model name>"
    )


def _normalize_ollama_name(name: str) -> str:
    if name in config.OLLAMA_ALIASES:
        return config.DEFAULT_OLLAMA_MODEL
    return name


class ModelProvider:
    """Common capability interface over the LangChain chat models."""

    family: ProviderFamily
    model_provider: str

    def __init__(self, model_name: str, temperature: float = config.TEMPERATURE):
        self.model_name = model_name
        self.temperature = temperature

    def _model_kwargs(self) -> Dict[str, Any]:
        """Provider specific keyword arguments for ``init_chat_model``."""
        return {}

    def chat_model(self):
        return init_chat_model(
            model=self.model_name,
            model_provider=self.model_provider,
            temperature=self.temperature,
            **self._model_kwargs()
        )

    def generate(self, prompt: PromptInput, variables: Optional[Dict[str, Any]] = None) -> str:
        """Free-form completion of a prompt string or prompt template."""
        template, inputs = _chain_input(prompt, variables)
        chain = template | self.chat_model()
        return _message_text(chain.invoke(inputs))

    def generate_structured(
        self,
        prompt: PromptInput,
        schema: Type[BaseModel],
        variables: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """Completion constrained to ``schema``; may return an instance, a dict or None."""
        template, inputs = _chain_input(prompt, variables)
        chain = template | self.chat_model().with_structured_output(schema)
        try:
            return chain.invoke(inputs)
        except ValidationError as e:
            raise SchemaValidationError(f"Structured output did not match the summary schema: {e}") from e


class GeminiProvider(ModelProvider):
    family = ProviderFamily.GEMINI
    model_provider = "google_genai"

    def _model_kwargs(self) -> Dict[str, Any]:
        api_key = os.getenv("GEMINI_API_KEY")
        if not api_key:
            raise MissingCredentialsError(
                "No GEMINI_API_KEY environment variable found. Please set it before using Gemini models."
            )
        return {"google_api_key": api_key}


class MistralProvider(ModelProvider):
    family = ProviderFamily.MISTRAL
    model_provider = "mistralai"

    def _model_kwargs(self) -> Dict[str, Any]:
        api_key = os.getenv("MISTRAL_API_KEY")
        if not api_key:
            raise MissingCredentialsError(
                "No MISTRAL_API_KEY environment variable found. Please set it before using Mistral models."
            )
        return {"api_key": api_key}


class OllamaProvider(ModelProvider):
    family = ProviderFamily.OLLAMA
    model_provider = "ollama"

    def _model_kwargs(self) -> Dict[str, Any]:
        return {"base_url": os.getenv("OLLAMA_BASE_URL", config.OLLAMA_BASE_URL)}


PROVIDERS: Dict[ProviderFamily, Type[ModelProvider]] = {
    ProviderFamily.GEMINI: GeminiProvider,
    ProviderFamily.MISTRAL: MistralProvider,
    ProviderFamily.OLLAMA: OllamaProvider,
}


def get_provider(resolved: ResolvedModel, temperature: Optional[float] = None) -> ModelProvider:
    """Instantiate the provider for a resolved model."""
    provider_class = PROVIDERS.get(resolved.family)
    if provider_class is None:
        raise UnsupportedModelError(f"No provider registered for family \"{resolved.family.value}\"")
    if temperature is None:
        return provider_class(resolved.model_name)
    return provider_class(resolved.model_name, temperature=temperature)


def _message_text(message: Any) -> str:
    """Extract plain text from a chat model response."""
    content = getattr(message, "content", message)
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for block in content:
            if isinstance(block, str):
                parts.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                parts.append(block.get("text", ""))
        return "".join(parts)
    return str(content)


def _chain_input(prompt: PromptInput, variables: Optional[Dict[str, Any]]) -> Tuple[BasePromptTemplate, Dict[str, Any]]:
    """Pair a prompt with the variables to invoke it with; plain strings become a one-message template."""
    if isinstance(prompt, BasePromptTemplate):
        return prompt, dict(variables or {})
    return raw_prompt, {"prompt": prompt}
