import asyncio
import logging

from fastapi import APIRouter, WebSocket, WebSocketDisconnect
from starlette.websockets import WebSocketState

from src.config import settings
from src.core.websockets.manager import hub

logger = logging.getLogger(__name__)
router = APIRouter()


async def _receive_frame(websocket: WebSocket) -> str:
    message = await websocket.receive()
    if message["type"] == "websocket.disconnect":
        raise WebSocketDisconnect(message.get("code", 1000))
    if message.get("text") is not None:
        return message["text"]
    return (message.get("bytes") or b"").decode("utf-8", errors="replace")


async def _close_quietly(websocket: WebSocket, code: int) -> None:
    if websocket.application_state == WebSocketState.DISCONNECTED:
        return
    try:
        await websocket.close(code=code)
    except RuntimeError as e:
        # Peer already gone
        logger.debug(f"Close after error failed: {e}")


@router.websocket("/ws")
async def collaboration_endpoint(websocket: WebSocket):
    """
    WebSocket endpoint for collaborative mind-map editing.
    Clients send {"type": "join", "projectId": ...} and then node/edge updates.
    """
    conn_id = await hub.connect(websocket)
    timeout = settings.WS_IDLE_TIMEOUT_SECONDS
    try:
        while True:
            if timeout:
                data = await asyncio.wait_for(_receive_frame(websocket), timeout=timeout)
            else:
                data = await _receive_frame(websocket)
            await hub.handle_message(conn_id, data)
    except WebSocketDisconnect:
        logger.info(f"🔌 Client {conn_id} disconnected")
    except asyncio.TimeoutError:
        logger.info(f"⏱️ Closing idle connection {conn_id}")
        await websocket.close(code=1000)
    except Exception as e:
        logger.error(f"❌ WebSocket error on {conn_id}: {type(e).__name__}: {e}")
        await _close_quietly(websocket, code=1011)
    finally:
        hub.disconnect(conn_id)
