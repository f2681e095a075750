import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nextset.core.config import settings
from nextset.core.db import init_db
from nextset.core.errors import NextSetError
from nextset.routers.commands import router as commands_router
from nextset.routers.days import router as days_router
from nextset.routers.exercises import router as exercises_router
from nextset.routers.templates import router as templates_router
from nextset.routers.workouts import router as workouts_router

logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("Database ready at %s", settings.DATABASE_URL)
    yield


app = FastAPI(title="NextSet API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(NextSetError)
async def nextset_error_handler(request: Request, exc: NextSetError):
    return JSONResponse(status_code=exc.status_code, content={"detail": str(exc)})


app.include_router(days_router)
app.include_router(exercises_router)
app.include_router(workouts_router)
app.include_router(templates_router)
app.include_router(commands_router)



@app.get("/health")
def health():
    return {"ok": True}
