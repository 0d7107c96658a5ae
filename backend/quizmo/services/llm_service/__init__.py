"""LLM service module.

Provides the language model abstraction layer (Google Gemini or a local
Ollama model) used by quiz generation.

Key modules:
- llm.py: ProviderConfig and chat model factory
- json_extractor.py: pulls the first top-level JSON array out of model text
"""
