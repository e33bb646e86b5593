import logging
import os
from pathlib import Path

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from routers.health import router as health_router

# Routers
from routers.questions import router as questions_router
from routers.sessions import router as sessions_router
from session import SessionStore

logger = logging.getLogger("flashcards")
logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO").upper())

STATIC_DIR = Path(__file__).resolve().parent / "static"

CORS_ORIGINS = [
    "http://localhost:8000",
    "http://127.0.0.1:8000",
]
# extra comma separated origins for deployed front-ends
CORS_ORIGINS += [o.strip() for o in os.getenv("FLASHCARDS_CORS_ORIGINS", "").split(",") if o.strip()]

app = FastAPI(title="Business Maths Flashcards")

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# One store per process; sessions do not survive a restart
app.state.sessions = SessionStore.from_env()
logger.info(
    "session store ready (max_sessions=%d, seeded=%s)",
    app.state.sessions.max_sessions,
    app.state.sessions.seed is not None,
)


@app.get("/", include_in_schema=False)
def index():
    return FileResponse(STATIC_DIR / "index.html")


app.include_router(questions_router)  # /patterns, /questions/random
app.include_router(sessions_router)  # /sessions/...
app.include_router(health_router)  # /health


def run():
    """Serve the app with uvicorn; `flashcards` console script."""
    uvicorn.run(
        "main:app",
        host=os.getenv("FLASHCARDS_HOST", "127.0.0.1"),
        port=int(os.getenv("FLASHCARDS_PORT", "8000")),
    )


if __name__ == "__main__":
    run()
