import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from core import config
from core.schemas import HealthResponse
from courses import router as courses_router
from scholarships import router as scholarships_router


def create_app() -> FastAPI:
    app = FastAPI(title="Study Catalogue API")

    # Allow the frontend dev server to call this API from the browser.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.allowed_origins(),
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.include_router(courses_router.router, tags=["courses"])
    app.include_router(scholarships_router.router, tags=["scholarships"])

    @app.get("/api/health", response_model=HealthResponse, tags=["health"])
    async def health() -> HealthResponse:
        return HealthResponse(ok=True)

    # Built frontend, mounted last so /api routes take precedence.
    dist = config.static_dir()
    if dist.is_dir():
        app.mount("/", StaticFiles(directory=dist, html=True), name="static")

    return app


app = create_app()


def run() -> None:
    uvicorn.run(app, host="0.0.0.0", port=config.port())


if __name__ == "__main__":
    run()
