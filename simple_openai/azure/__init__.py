"""Azure OpenAI client and configurator."""

from .client import AzureOpenAIConfigurator, SimpleOpenAIAzure

__all__ = ["AzureOpenAIConfigurator", "SimpleOpenAIAzure"]
