"""
OpenAI Assistant package.

Provides:
- Key plots extraction via the OpenAI chat-completion endpoint
- Image generation via the OpenAI image-generation endpoint
- A FastAPI web front end and a small command-line client
"""
