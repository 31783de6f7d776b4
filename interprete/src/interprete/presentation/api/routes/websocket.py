"""
WebSocket endpoint for the private-message relay.
"""

import asyncio
import time

from fastapi import APIRouter, Depends, WebSocket, WebSocketDisconnect, status
from shared.reporter.emojis import Emoji

from interprete.application.use_cases import RouteResult, RouteStatus
from interprete.di.container import Container
from interprete.domain.value_objects import languages_payload
from interprete.infrastructure.websocket import ConnectionHandle
from interprete.presentation.api.dependencies import get_container

router = APIRouter(tags=["websocket"])

LANGUAGES_EVENT = "languages"
AUTHENTICATE_EVENT = "authenticate"
PRIVATE_MESSAGE_EVENT = "private-message"


def _record_route(container: Container, result: RouteResult) -> None:
    if result.status == RouteStatus.REJECTED:
        container.increment_stat("messages_rejected")
        return
    container.increment_stat("messages_routed")
    if result.delivered:
        container.increment_stat("messages_delivered")
    else:
        container.increment_stat("messages_dropped")


@router.websocket("/ws")
async def websocket_endpoint(
    websocket: WebSocket,
    container: Container = Depends(get_container),
):
    """
    Relay connection.

    Frames are JSON objects ``{"type": <event>, "data": <payload>}``.

    Server -> client: languages (on connect), private-message,
    message-sent, error, ping/pong, shutdown.
    Client -> server: authenticate, private-message, ping.

    Rejects new connections during graceful shutdown.
    """
    reporter = container.reporter
    shutdown_manager = container.shutdown_manager

    if shutdown_manager.is_shutting_down():
        container.increment_stat("connection_rejections")
        reporter.warning(
            "Connection rejected: server shutting down", context="WebSocket"
        )
        await websocket.close(
            code=status.WS_1001_GOING_AWAY,
            reason="Server is shutting down",
        )
        return

    await websocket.accept()

    handle = ConnectionHandle(websocket)
    connection_id = handle.id
    conn_manager = container.connection_manager
    conn_manager.add(handle)
    container.increment_stat("total_connections")

    reporter.info(
        f"{Emoji.NETWORK.CONNECTED} User connected [conn={connection_id}]",
        context="WebSocket",
    )

    validate_uc = container.get_validate_frame_use_case()
    authenticate_uc = container.get_authenticate_use_case()
    route_uc = container.get_route_message_use_case()
    disconnect_uc = container.get_disconnect_use_case()

    heartbeat_interval = container.settings.heartbeat_interval
    connection_start_time = time.time()
    messages_processed = 0
    validation_failures = 0

    try:
        await handle.emit(LANGUAGES_EVENT, languages_payload())

        while True:
            try:
                raw = await asyncio.wait_for(
                    websocket.receive_text(), timeout=heartbeat_interval
                )
            except asyncio.TimeoutError:
                await handle.emit("ping")
                reporter.debug(
                    f"{Emoji.SYSTEM.HEARTBEAT} Heartbeat ping sent "
                    f"[conn={connection_id}]",
                    context="WebSocket",
                )
                continue

            container.increment_stat("total_messages_received")
            handle.connection.messages_received += 1
            messages_processed += 1

            validation = validate_uc.validate(raw)
            if not validation.valid:
                validation_failures += 1
                container.increment_stat("validation_failures")
                reporter.warning(
                    f"Message validation failed [conn={connection_id}] "
                    f"[errors={validation.errors}]",
                    context="WebSocket",
                )
                await handle.emit(
                    "error",
                    {
                        "message": "Message validation failed",
                        "errors": validation.errors,
                    },
                )
                continue

            event = validation.event
            if validate_uc.is_control_event(event.type):
                if event.type == "ping":
                    await handle.emit("pong")
                continue

            if event.type == AUTHENTICATE_EVENT:
                await authenticate_uc.execute(handle, event.data)
            elif event.type == PRIVATE_MESSAGE_EVENT:
                result = await route_uc.execute(handle, event.data)
                _record_route(container, result)
            else:
                reporter.warning(
                    f"Unknown event type '{event.type}' [conn={connection_id}]",
                    context="WebSocket",
                )
                await handle.emit(
                    "error", {"message": f"Unknown event type: {event.type}"}
                )

    except WebSocketDisconnect:
        reporter.info(
            f"{Emoji.NETWORK.DISCONNECTED} User disconnected "
            f"[conn={connection_id}] [user={handle.user_id}]",
            context="WebSocket",
        )

    except Exception as e:
        reporter.error(
            f"WebSocket connection error [conn={connection_id}]: "
            f"{type(e).__name__}: {e}",
            context="WebSocket",
        )

    finally:
        disconnect_uc.execute(handle)
        conn_manager.remove(handle)

        reporter.info(
            f"Connection closed [conn={connection_id}] "
            f"[duration={time.time() - connection_start_time:.2f}s] "
            f"[messages={messages_processed}] "
            f"[validation_failures={validation_failures}]",
            context="WebSocket",
        )
