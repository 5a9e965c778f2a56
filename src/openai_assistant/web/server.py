"""Launch the web front end under uvicorn."""
from __future__ import annotations
import argparse

import uvicorn

from openai_assistant.common.config import HOST, LOG_LEVEL, PORT

def main() -> None:
    ap = argparse.ArgumentParser(description="Serve the OpenAI Assistant web UI")
    ap.add_argument("--host", default=HOST)
    ap.add_argument("--port", type=int, default=PORT)
    ap.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    args = ap.parse_args()

    uvicorn.run(
        "openai_assistant.web.fastapi_app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=LOG_LEVEL.lower(),
    )

if __name__ == "__main__":
    main()
