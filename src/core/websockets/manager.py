import json
import logging
import uuid
from typing import Any, Dict, List, Optional, Set

from fastapi import WebSocket
from starlette.websockets import WebSocketState

logger = logging.getLogger(__name__)

JOIN = "join"
JOINED = "joined"
MUTATION_TYPES = frozenset({
    "node_add",
    "node_update",
    "node_remove",
    "edge_add",
    "edge_update",
    "edge_remove",
})


class Room:
    """Connections editing the same project's mind map."""

    def __init__(self, room_id: str):
        self.room_id = room_id
        self.members: Set[str] = set()

    def join(self, conn_id: str) -> None:
        self.members.add(conn_id)

    def leave(self, conn_id: str) -> None:
        self.members.discard(conn_id)

    def members_except(self, conn_id: str) -> List[str]:
        return [member for member in self.members if member != conn_id]

    @property
    def is_empty(self) -> bool:
        return not self.members

    def __len__(self) -> int:
        return len(self.members)


class Connection:
    def __init__(self, conn_id: str, websocket: WebSocket):
        self.id = conn_id
        self.websocket = websocket
        self.room_id: Optional[str] = None

    @property
    def is_open(self) -> bool:
        return (
            self.websocket.client_state == WebSocketState.CONNECTED
            and self.websocket.application_state == WebSocketState.CONNECTED
        )


class CollaborationHub:
    """Relays mind-map edits between the members of a project room.

    A connection starts without a room, joins one with a ``join`` message
    and is forgotten on disconnect. Rooms exist only while they have
    members. Nothing is persisted; edits sent to an empty room are lost.
    All state is touched from the event loop only.
    """

    def __init__(self):
        self.connections: Dict[str, Connection] = {}
        # Map room_id (str(projectId)) -> Room
        self.rooms: Dict[str, Room] = {}

    async def connect(self, websocket: WebSocket) -> str:
        await websocket.accept()
        conn_id = f"conn_{uuid.uuid4().hex[:12]}"
        self.connections[conn_id] = Connection(conn_id, websocket)
        logger.info(f"WebSocket connected: {conn_id}. Total connections: {len(self.connections)}")
        return conn_id

    def disconnect(self, conn_id: str) -> None:
        connection = self.connections.pop(conn_id, None)
        if connection is None:
            return
        self._leave_room(connection)
        logger.info(f"WebSocket disconnected: {conn_id}")

    def room_members(self, room_id: Any) -> Set[str]:
        room = self.rooms.get(str(room_id))
        return set(room.members) if room else set()

    async def handle_message(self, conn_id: str, raw: str) -> None:
        """Dispatch one inbound frame. Bad frames are logged and dropped."""
        try:
            message = json.loads(raw)
        except (TypeError, ValueError):
            logger.warning(f"Dropping non-JSON message from {conn_id}")
            return

        if not isinstance(message, dict) or not isinstance(message.get("type"), str):
            logger.warning(f"Dropping message without a type from {conn_id}")
            return

        message_type = message["type"]
        if message_type == JOIN:
            await self.join(conn_id, message.get("projectId"))
        elif message_type in MUTATION_TYPES:
            await self.broadcast(conn_id, raw)
        else:
            logger.debug(f"Ignoring unknown message type {message_type!r} from {conn_id}")

    async def join(self, conn_id: str, project_id: Any) -> None:
        """Move the connection into the project's room, leaving any previous one."""
        connection = self.connections.get(conn_id)
        if connection is None:
            return
        if project_id is None or isinstance(project_id, (dict, list)):
            logger.warning(f"Dropping join without a usable projectId from {conn_id}")
            return

        room_id = str(project_id)
        if connection.room_id != room_id:
            self._leave_room(connection)
            if room_id not in self.rooms:
                self.rooms[room_id] = Room(room_id)
            self.rooms[room_id].join(conn_id)
            connection.room_id = room_id
            logger.info(f"{conn_id} joined project {room_id}. Total in room: {len(self.rooms[room_id])}")

        await self._send(connection, json.dumps({"type": JOINED, "projectId": project_id, "status": "success"}))

    async def broadcast(self, sender_id: str, payload: str) -> int:
        """Forward a frame to every other open member of the sender's room.

        Returns the number of sockets it was delivered to.
        """
        sender = self.connections.get(sender_id)
        if sender is None or sender.room_id is None:
            logger.debug(f"Dropping update from {sender_id}: not in a room")
            return 0

        room = self.rooms.get(sender.room_id)
        if room is None:
            return 0

        delivered = 0
        for conn_id in room.members_except(sender_id):
            target = self.connections.get(conn_id)
            if target is None or not target.is_open:
                continue
            if await self._send(target, payload):
                delivered += 1
        return delivered

    async def _send(self, connection: Connection, payload: str) -> bool:
        try:
            await connection.websocket.send_text(payload)
            return True
        except Exception as e:
            logger.error(f"Error sending to {connection.id} in room {connection.room_id}: {e}")
            return False

    def _leave_room(self, connection: Connection) -> None:
        room_id = connection.room_id
        if room_id is None:
            return
        room = self.rooms.get(room_id)
        if room is not None:
            room.leave(connection.id)
            if room.is_empty:
                del self.rooms[room_id]
                logger.info(f"Room {room_id} closed")
        connection.room_id = None


hub = CollaborationHub()
