"""FastAPI application entrypoint for Featherweight."""

from __future__ import annotations

from featherweight.libs.logging_utils import configure_logging

configure_logging()

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from featherweight.apps.api.routes.harmonics import router as harmonics_router
from featherweight.libs.schemas.settings import get_settings

settings = get_settings()

app = FastAPI(title=f"{settings.app_name} API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health():
    return {"status": "ok"}


app.include_router(harmonics_router)


if __name__ == "__main__":  # pragma: no cover
    import uvicorn

    uvicorn.run("featherweight.apps.api.main:app", host="0.0.0.0", port=8000, reload=True)
