"""OpenAI client and configurator."""

from .client import SimpleOpenAI, SimpleOpenAIConfigurator

__all__ = ["SimpleOpenAI", "SimpleOpenAIConfigurator"]
