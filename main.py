from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import os
import logging

from db import Base, engine
from recommendation.models import RecCareer  # noqa: F401  (registers rec_careers on Base.metadata)
from recommendation.routes import router as recommendation_router
from recommendation.logic.constants import ENGINE_VERSION
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logging.info("App starting with DATABASE_URL")

app = FastAPI(title="Lantern Career Recommendation API", version=ENGINE_VERSION)

CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

Base.metadata.create_all(bind=engine)

app.include_router(recommendation_router)


@app.get("/health", tags=["meta"], summary="Health check")
def health():
    return {"status": "ok"}
