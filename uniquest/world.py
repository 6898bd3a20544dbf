from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class ItemKind(str, Enum):
    GENERIC = "generic"
    KEY = "key"
    WEARABLE = "wearable"


class GoalKind(str, Enum):
    COLLECT_ITEMS = "collect_items"
    REACH_ROOM = "reach_room"


# ==========================================
# CORE OBJECT MODEL
# ==========================================

@dataclass(frozen=True)
class Item:
    name: str
    kind: ItemKind = ItemKind.GENERIC


@dataclass
class Container:
    label: str
    items: List[Item] = field(default_factory=list)

    def find(self, name, kinds):
        """Index of the first item called `name` whose kind is in `kinds`, or None."""
        for idx, item in enumerate(self.items):
            if item.kind in kinds and item.name == name:
                return idx
        return None


@dataclass
class Inventory:
    is_worn: bool = False
    items: List[Item] = field(default_factory=list)

    def holds(self, name):
        return any(item.name == name for item in self.items)

    def get(self, name):
        for item in self.items:
            if item.name == name:
                return item
        return None


@dataclass
class RoomText:
    on_enter: str = ""
    on_look: str = ""
    area: str = ""
    goal_prefix: str = ""
    key_kind: Optional[ItemKind] = None
    empty_msg: str = ""
    locked_msg: str = ""
    unlocked_msg: str = ""


@dataclass
class Goal:
    """
    A scripted condition owned by one room.
    The kind decides which fields matter: COLLECT_ITEMS reads `items`,
    REACH_ROOM reads `room` and the optional `requires` (a sibling goal title).
    """
    kind: GoalKind
    title: str
    items: Tuple[str, ...] = ()
    room: str = ""
    requires: Optional[str] = None
    is_achieved: bool = False


@dataclass(eq=False)
class Room:
    name: str
    text: RoomText = field(default_factory=RoomText)
    containers: List[Container] = field(default_factory=list)
    exits: List["Room"] = field(default_factory=list)
    is_locked: bool = False
    goals: List[Goal] = field(default_factory=list)

    def goal(self, title):
        for goal in self.goals:
            if goal.title == title:
                return goal
        return None

    def __repr__(self):
        # exits are references and the graph has cycles
        return f"Room({self.name!r}, locked={self.is_locked})"


@dataclass
class Player:
    location: Room
    inventory: Inventory = field(default_factory=Inventory)


@dataclass
class World:
    title: str
    rooms: Dict[str, Room]
    start: str

    def room(self, name):
        return self.rooms.get(name)


@dataclass
class Session:
    """Everything one game run mutates. Built once, handed to the Director."""
    world: World
    player: Player

    @property
    def location(self):
        return self.player.location


# ==========================================
# LOADER
# ==========================================

def build_world(data):
    """
    Builds a World from a story dict (see story.GAME_DATA).
    Rooms are created first, exits are wired in a second pass
    so that forward references resolve to the same Room objects.
    """
    rooms = {}
    for room_data in data.get('rooms', []):
        room = Room(
            name=room_data['name'],
            text=_load_text(room_data.get('text', {})),
            containers=[_load_container(c) for c in room_data.get('containers', [])],
            is_locked=room_data.get('locked', False),
            goals=[_load_goal(g) for g in room_data.get('goals', [])],
        )
        if room.name in rooms:
            raise ValueError(f"duplicate room: {room.name}")
        rooms[room.name] = room

    for room_data in data.get('rooms', []):
        room = rooms[room_data['name']]
        for target in room_data.get('exits', []):
            if target not in rooms:
                raise ValueError(f"room {room.name!r} has an exit to unknown room {target!r}")
            room.exits.append(rooms[target])

    start = data['start_room']
    if start not in rooms:
        raise ValueError(f"unknown start room: {start}")

    world = World(title=data.get('title', 'Untitled'), rooms=rooms, start=start)
    unreachable = set(rooms) - reachable_from(rooms[start])
    if unreachable:
        raise ValueError(f"rooms not reachable from {start!r}: {', '.join(sorted(unreachable))}")
    return world


def reachable_from(room):
    seen = {room.name}
    stack = [room]
    while stack:
        for nxt in stack.pop().exits:
            if nxt.name not in seen:
                seen.add(nxt.name)
                stack.append(nxt)
    return seen


def new_session(data=None):
    """Fresh world and player. Every call starts the story from scratch."""
    if data is None:
        from uniquest.story import GAME_DATA
        data = GAME_DATA
    world = build_world(data)
    return Session(world=world, player=Player(location=world.rooms[world.start]))


TEXT_KEYS = ('on_enter', 'on_look', 'area', 'goal_prefix', 'key_kind',
             'empty_msg', 'locked_msg', 'unlocked_msg')


def _load_text(data):
    unknown = set(data) - set(TEXT_KEYS)
    if unknown:
        raise ValueError(f"unknown room text keys: {', '.join(sorted(unknown))}")
    key_kind = data.get('key_kind')
    return RoomText(
        on_enter=data.get('on_enter', ""),
        on_look=data.get('on_look', ""),
        area=data.get('area', ""),
        goal_prefix=data.get('goal_prefix', ""),
        key_kind=ItemKind(key_kind) if key_kind else None,
        empty_msg=data.get('empty_msg', ""),
        locked_msg=data.get('locked_msg', ""),
        unlocked_msg=data.get('unlocked_msg', ""),
    )


def _load_container(data):
    items = [Item(i['name'], ItemKind(i.get('kind', 'generic'))) for i in data.get('items', [])]
    return Container(label=data['label'], items=items)


def _load_goal(data):
    return Goal(
        kind=GoalKind(data['kind']),
        title=data['title'],
        items=tuple(data.get('items', ())),
        room=data.get('room', ""),
        requires=data.get('requires'),
    )
