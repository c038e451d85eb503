from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api.trainings import router as trainings_router
from app.core.config import settings
from app.core.logging_config import setup_logging


setup_logging(settings.log_level)

app = FastAPI(title="Fitness tracker")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(trainings_router)


@app.get("/")
def root():
    return {"message": "Fitness tracker backend is running"}
