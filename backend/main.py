import logging

from fastapi import FastAPI
from routes import recipes
from config import get_settings


def configure_logging(level=None):
    logging.basicConfig(
        level=level or get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


configure_logging()

app = FastAPI(title="Recipe Generator API")

app.include_router(recipes.router, prefix="/api")

@app.get("/")
def root():
    return {"message": "Welcome to Recipe Generator API"}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
