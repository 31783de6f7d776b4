"""
Interprete - Presence & Delivery Relay

Orchestrates Clean Architecture components to provide private-message
delivery over WebSocket and on-demand translation over HTTP.
"""

import asyncio
import os
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from shared.reporter import SystemReporter
from shared.reporter.emojis import Emoji

from interprete.config.settings import Settings, load_config
from interprete.di.container import Container
from interprete.presentation.api.dependencies import set_container
from interprete.presentation.api.routes import (
    health_router,
    stats_router,
    translation_router,
    websocket_router,
)


class InterpreteApp:
    """
    Interprete application orchestrator.

    Responsibilities:
        - Initialize reporter and DI container
        - Setup FastAPI application (CORS, routes, lifespan)
        - Manage graceful shutdown of live connections
        - Run uvicorn server
    """

    def __init__(self, settings: Settings):
        """
        Initialize Interprete application.

        Args:
            settings: Application settings
        """
        self.settings = settings

        # Initialize reporter FIRST
        self.reporter = self._create_reporter()

        self.container = Container(settings, reporter=self.reporter)

        self.app = self._create_app()

        # Set global container for FastAPI dependencies
        set_container(self.container)

        # Server instance (set during serve)
        self.server: Optional[uvicorn.Server] = None

        self.reporter.info(
            "Interprete initialized",
            context="Interprete",
            verbose_level=1,
        )

    def _create_reporter(self) -> SystemReporter:
        log_dir = None
        if self.settings.log_file:
            log_dir = os.path.dirname(self.settings.log_file) or "logs"

        return SystemReporter.from_level_name(
            name="interprete",
            level_name=self.settings.log_level,
            log_dir=log_dir,
            verbose=3 if self.settings.DEBUG else 1,
        )

    def _create_app(self) -> FastAPI:
        @asynccontextmanager
        async def lifespan(app: FastAPI):
            await self._on_startup()
            yield
            await self._on_shutdown()

        app = FastAPI(
            title=self.settings.APP_NAME,
            description="Private-message relay with translation gateway",
            version=self.settings.APP_VERSION,
            lifespan=lifespan,
        )

        app.add_middleware(
            CORSMiddleware,
            allow_origins=self.settings.cors_origins,
            allow_methods=["GET", "POST"],
            allow_headers=["*"],
        )

        app.include_router(websocket_router)
        app.include_router(translation_router)
        app.include_router(health_router)
        app.include_router(stats_router)

        return app

    async def _on_startup(self) -> None:
        """Register shutdown handling and log the runtime configuration."""
        self.reporter.info(
            f"{Emoji.SYSTEM.STARTUP} Interprete starting...",
            context="Interprete",
            verbose_level=1,
        )

        shutdown_manager = self.container.shutdown_manager
        shutdown_manager.register_shutdown_callback(self._graceful_shutdown_callback)
        if shutdown_manager.setup_signal_handlers():
            self.reporter.info(
                f"Graceful shutdown enabled "
                f"(timeout: {self.settings.shutdown_timeout}s)",
                context="Interprete",
                verbose_level=1,
            )

        self.reporter.info(
            f"Host: {self.settings.host}:{self.settings.port}",
            context="Interprete",
            verbose_level=1,
        )
        self._log_translation_provider()

    def _log_translation_provider(self) -> None:
        client = self.container.completion_client
        if client is None:
            self.reporter.warning(
                f"{Emoji.ERROR.WARNING} No API key found. Translation will not "
                f"work. Set OPENROUTER_API_KEY or OPENAI_API_KEY.",
                context="Interprete",
            )
            return
        self.reporter.info(
            f"{Emoji.MESSAGE.TRANSLATE} Using {client.provider.display_name} "
            f"API for translation (model: {client.provider.model})",
            context="Interprete",
            verbose_level=1,
        )

    async def _graceful_shutdown_callback(self) -> None:
        """Notify and close live connections, then stop uvicorn."""
        await self._notify_clients_shutdown()
        await self._close_all_connections_gracefully()

        if self.server:
            self.server.should_exit = True

    async def _on_shutdown(self) -> None:
        """Application shutdown: drain connections, release resources."""
        self.reporter.info(
            f"{Emoji.SYSTEM.SHUTDOWN} Interprete shutting down...",
            context="Interprete",
            verbose_level=1,
        )

        shutdown_manager = self.container.shutdown_manager
        await shutdown_manager.initiate_shutdown("lifespan")
        shutdown_manager.restore_signal_handlers()

        await self.container.close()
        shutdown_manager.mark_shutdown_complete()

        self.reporter.info(
            "Interprete stopped",
            context="Interprete",
            verbose_level=1,
        )

    async def _notify_clients_shutdown(self) -> None:
        handles = self.container.connection_manager.all()
        if not handles:
            return

        self.reporter.info(
            f"Notifying {len(handles)} clients of shutdown",
            context="Interprete",
            verbose_level=1,
        )
        for handle in handles:
            try:
                await handle.emit(
                    "shutdown", {"message": "Server is shutting down", "code": 1001}
                )
            except Exception as e:
                self.reporter.debug(
                    f"Shutdown notice to {handle.id} failed: {e}",
                    context="Interprete",
                )

    async def _close_all_connections_gracefully(self) -> None:
        """Wait the grace period, then close whatever is still open."""
        handles = self.container.connection_manager.all()
        if not handles:
            return

        grace_period = self.settings.shutdown_grace_period
        if grace_period:
            self.reporter.info(
                f"Waiting {grace_period}s for graceful close",
                context="Interprete",
                verbose_level=1,
            )
            await asyncio.sleep(grace_period)

        total_closed = 0
        for handle in self.container.connection_manager.all():
            try:
                await handle.close(code=1001, reason="Server shutdown")
                total_closed += 1
            except Exception as e:
                self.reporter.debug(
                    f"Close of {handle.id} failed: {e}",
                    context="Interprete",
                )

        if total_closed:
            self.reporter.info(
                f"{Emoji.SYSTEM.CLEANUP} Closed {total_closed} connections",
                context="Interprete",
                verbose_level=1,
            )

    async def serve(self) -> None:
        """Run server via the uvicorn.Server API for shutdown control."""
        config = uvicorn.Config(
            self.app,
            host=self.settings.host,
            port=self.settings.port,
            log_level=self.settings.log_level,
        )
        self.server = uvicorn.Server(config)
        await self.server.serve()

    def start(self) -> None:
        """Start the server; blocks until it stops."""
        asyncio.run(self.serve())


def main():
    """
    Main entry point for Interprete.

    Loads configuration and starts the server. An optional first
    argument overrides the port.
    """
    config = load_config()

    if len(sys.argv) > 1:
        try:
            config.port = int(sys.argv[1])
        except ValueError:
            print(f"Invalid port: {sys.argv[1]}")
            sys.exit(1)

    app = InterpreteApp(config)

    try:
        app.start()
    except KeyboardInterrupt:
        print("\nInterprete stopped by user")
        sys.exit(0)


if __name__ == "__main__":
    main()
