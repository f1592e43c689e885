"""
Endpoint modules.

Each module fixes a path and delegates to openai_api.rest.Client. Every
operation accepts an optional per-call Config and an optional Client, and
returns Ok / Error.

    from openai_api.endpoints import completions
    result = completions.fetch({"model": "gpt-3.5-turbo-instruct", "prompt": "Hi"})
"""

from . import (
    audio,
    chat_completions,
    completions,
    edits,
    embeddings,
    engines,
    files,
    fine_tunes,
    images,
    models,
    moderations,
)

__all__ = [
    "audio",
    "chat_completions",
    "completions",
    "edits",
    "embeddings",
    "engines",
    "files",
    "fine_tunes",
    "images",
    "models",
    "moderations",
]
