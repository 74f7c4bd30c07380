from fastapi import APIRouter, FastAPI

from .routes import forms


def create_app(config_obj=None) -> FastAPI:
    from ..config import Config

    if config_obj is None:
        config_obj = Config()

    app = FastAPI(title="specform API")
    app.state.config = config_obj

    api_router = APIRouter(prefix="/api/v1")
    api_router.include_router(forms.router)

    @api_router.get("/health")
    def health():
        return {"status": "ok"}

    app.include_router(api_router)
    return app
