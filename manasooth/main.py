# manasooth/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging
from sqlalchemy import exc as sa_exc

from manasooth.config import settings
from manasooth.database import engine, Base
from manasooth.models.storage import StorageEntry  # noqa: F401  registers the table
from manasooth.routers import (
    assessment, conversation, results, goal, mood, chat, consultation, support, storage
)

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Manasooth - Mental Wellbeing API", version="1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include Routers
app.include_router(conversation.router)
app.include_router(assessment.router)
app.include_router(results.router)
app.include_router(goal.router)
app.include_router(mood.router)
app.include_router(chat.router)
app.include_router(consultation.router)
app.include_router(support.router)
app.include_router(storage.router)

# Create DB Tables (Alembic revisions describe the same schema)
@app.on_event("startup")
async def startup_event():
    # ignore duplicate-object errors from previous partial runs
    async with engine.begin() as conn:
        try:
            await conn.run_sync(Base.metadata.create_all)
        except sa_exc.IntegrityError as e:
            msg = str(getattr(e, "orig", e))
            if "duplicate key value violates unique constraint" in msg or "already exists" in msg:
                logger.warning("Ignored duplicate DDL error during create_all: %s", msg)
            else:
                raise

@app.get("/")
def read_root():
    return {"message": "Welcome to the Manasooth wellbeing API"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("manasooth.main:app", host="0.0.0.0", port=8000, reload=True)
