"""
Product Copy package.

Provides:
- Marketing description generation over a hosted chat-completions provider
- Deterministic fallback copy when the provider is unavailable
- FastAPI app exposing the generator over HTTP
"""
