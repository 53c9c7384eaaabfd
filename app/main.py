"""
This module is the main entry point for the FastAPI application.
It builds the FastAPI app around an explicitly constructed TitleStore and
defines the read endpoints for the Netflix titles catalog: the route
directory, the movie list, titles grouped by country and a movie by id.
Store failures are answered with a 500, missing movies with a 404.
app.main.py
"""
import logging
from contextlib import asynccontextmanager
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from app.config import Settings
from app.db import TitleStore
from app.endpoints import EndpointRegistry
from app.ingest import load_dataset, seed_database
from app.movie_service import get_movie, list_movies, titles_by_country
from app.schemas import RouteDescriptor, TitleDocument

logger = logging.getLogger(__name__)

router = APIRouter()
endpoints = EndpointRegistry(router, middlewares=[CORSMiddleware.__name__])


def get_store(request: Request) -> TitleStore:
    return request.app.state.store


def server_error() -> JSONResponse:
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


@endpoints.get("/", response_model=List[RouteDescriptor])
def list_endpoints():
    return endpoints.routes


@endpoints.get("/movies", response_model=List[TitleDocument], response_model_exclude_none=True)
def movies(store: TitleStore = Depends(get_store)):
    try:
        return list_movies(store)
    except PyMongoError as e:
        logger.error("Listing movies failed: %s", e)
        return server_error()


@endpoints.get("/country", response_model=Dict[str, List[TitleDocument]], response_model_exclude_none=True)
def by_country(store: TitleStore = Depends(get_store)):
    try:
        return titles_by_country(store)
    except PyMongoError as e:
        logger.error("Grouping titles by country failed: %s", e)
        return server_error()


@endpoints.get("/movies/{movie_id}", response_model=TitleDocument, response_model_exclude_none=True)
def movie(movie_id: str, store: TitleStore = Depends(get_store)):
    try:
        found = get_movie(store, movie_id)
    except PyMongoError as e:
        logger.error("Fetching movie %r failed: %s", movie_id, e)
        return server_error()
    if found is None:
        return JSONResponse(status_code=404, content={"message": "Movie not found"})
    return found


async def reset_collection(store: TitleStore, settings: Settings):
    try:
        titles = load_dataset(settings.data_file)
        result = await run_in_threadpool(seed_database, store, titles)
    except (OSError, ValueError, PyMongoError) as e:
        logger.error("Seeding the database failed: %s", e)
        return None
    return result


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = app.state.store
    try:
        await run_in_threadpool(store.ping)
        logger.info("Connected to MongoDB")
    except PyMongoError as e:
        logger.error("Error connecting to MongoDB: %s", e)

    if app.state.settings.reset_database:
        await reset_collection(store, app.state.settings)

    try:
        yield
    finally:
        store.close()


def create_app(store: Optional[TitleStore] = None, settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    application = FastAPI(
        title="Netflix Titles API",
        description="Read API over the Netflix titles dataset stored in MongoDB.",
        version="1.0.0",
        lifespan=lifespan,
    )
    application.state.settings = settings
    application.state.store = store or TitleStore.from_settings(settings)

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.include_router(router)
    return application


app = create_app()


def main():
    settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
