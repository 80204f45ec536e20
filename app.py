#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: The server handles multiple connections simultaneously via async I/O
(FastAPI + asyncpg connection pool + redis.asyncio). Set WORKERS > 1 for
multi-process scaling across CPU cores; workers are started from
the `app:worker_app` factory and each one builds its own DB pool.

Usage:
    python app.py

Environment variables:
    DATABASE_URL - Store connection URL (postgresql://... or memory://)
    CREATE_TABLES - Set to 'true' to create the urls table on startup
    REDIS_URL - Redis connection URL (optional)
    BASE_URL - Base URL for short links when no Host header is present
    PORT - Port to listen on
    WORKERS - Number of uvicorn worker processes (default 1)
    LOG_LEVEL - Logging level
"""

import logging
import os
import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortener.database import create_database
from shortener.database.cache import RedisCache
from shortener.database.postgres import mask_dsn
from shortener.service import URLShortenerService
from shortener.shortid import ShortIdGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app

WORKER_APP = "app:worker_app"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager: build the store and service once, release on shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    logger.info(f"Connecting to store at {mask_dsn(config.database_url)}")
    db_instance = create_database(
        config.database_url,
        pool_max_size=config.pool_max_size,
        connection_timeout_seconds=config.store_timeout_seconds,
        logger=logger,
    )
    if config.create_tables:
        await db_instance.ensure_schema()

    # Initialize cache (optional)
    if config.redis_url:
        logger.info(f"Connecting to Redis at {mask_dsn(config.redis_url)}")
        cache_instance = RedisCache(
            redis_url=config.redis_url,
            ttl_seconds=config.cache_ttl_seconds,
            logger=logger,
        )
        await cache_instance.connect()
    else:
        logger.info("Redis caching disabled")
        cache_instance = None

    generator = ShortIdGenerator(default_length=config.short_id_length)
    service_instance = URLShortenerService(
        db=db_instance,
        cache=cache_instance,
        short_id_generator=generator,
        logger=logger,
        max_collision_retries=config.max_collision_retries,
        store_timeout_seconds=config.store_timeout_seconds,
    )

    app.state.db = db_instance
    app.state.cache = cache_instance
    app.state.service = service_instance

    logger.info("Service started successfully")

    try:
        yield
    finally:
        logger.info("Shutting down URL shortener service...")
        await service_instance.close()
        logger.info("Service stopped")


def build_app(config: Config, logger: logging.Logger) -> FastAPI:
    """App whose store, cache and service are created by the lifespan handler."""
    app = create_app(
        db_instance=None,
        cache_instance=None,
        service_instance=None,
        config=config,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan
    return app


def worker_app() -> FastAPI:
    """App factory for uvicorn worker processes; each worker reads the environment itself."""
    config = load_config()
    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )
    return build_app(config, logger)


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump(exclude={'database_url', 'redis_url'})}")

    if config.workers > 1:
        # uvicorn only forks workers when given an import string
        logger.info(f"Starting {config.workers} workers on {config.host}:{config.port}")
        uvicorn.run(
            WORKER_APP,
            factory=True,
            app_dir=os.path.dirname(os.path.abspath(__file__)),
            host=config.host,
            port=config.port,
            workers=config.workers,
            log_level=config.log_level.lower(),
            access_log=False,
        )
        return

    app = build_app(config, logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=False,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
