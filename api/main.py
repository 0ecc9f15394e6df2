from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes.chords import router as chords_router

app = FastAPI(title="Chord Detector")

# CORS: allow the keyboard UI dev server to call the API
# Include both localhost and 127.0.0.1 variants
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
        "http://localhost:4173",
        "http://127.0.0.1:4173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(chords_router)


@app.get("/health")
def health() -> dict[str, str]:
    """Return a simple liveness check."""
    return {"status": "ok"}
